from __future__ import annotations

from dataclasses import dataclass
from datetime import time

WEEKDAY_MNEMONICS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@dataclass(frozen=True)
class Shift:
    """Thực thể miền (domain): Ca làm việc (Shift).

    Weekdays follow 0=Sunday..6=Saturday. `is_night_shift` is a cached hint
    for display only; use `shifts.timing.is_overnight` for computations.
    """

    shift_id: str
    name: str
    start_time: time
    office_end_time: time
    end_time: time
    departure_time: time
    break_minutes: int = 0
    is_night_shift: bool = False
    work_days: tuple[int, ...] = (1, 2, 3, 4, 5)
    show_punch: bool = False

    @property
    def days_applied(self) -> tuple[str, ...]:
        return tuple(WEEKDAY_MNEMONICS[d] for d in self.work_days)

    def to_dict(self) -> dict:
        return {
            "id": self.shift_id,
            "name": self.name,
            "start_time": self.start_time.strftime("%H:%M"),
            "office_end_time": self.office_end_time.strftime("%H:%M"),
            "end_time": self.end_time.strftime("%H:%M"),
            "departure_time": self.departure_time.strftime("%H:%M"),
            "break_minutes": self.break_minutes,
            "is_night_shift": self.is_night_shift,
            "work_days": list(self.work_days),
            "days_applied": list(self.days_applied),
            "show_punch": self.show_punch,
        }
