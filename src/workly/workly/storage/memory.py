from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, Sequence

from ..attendance.model import AttendanceLog
from ..notes.model import Note
from ..settings.model import PublicHoliday, UserSettings
from ..shifts.model import Shift
from ..status.model import DailyWorkStatus


@dataclass
class InMemoryStore:
    """Dict-backed key-value storage implementing every repository protocol."""

    shifts: dict[str, Shift] = field(default_factory=dict)
    settings: UserSettings = field(default_factory=UserSettings)
    holidays: list[PublicHoliday] = field(default_factory=list)
    logs: dict[date, list[AttendanceLog]] = field(default_factory=dict)
    statuses: dict[date, DailyWorkStatus] = field(default_factory=dict)
    notes: dict[str, Note] = field(default_factory=dict)

    # shifts
    def list_all(self) -> Sequence[Shift]:
        return list(self.shifts.values())

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        return self.shifts.get(shift_id)

    def save(self, shift: Shift) -> None:
        self.shifts[shift.shift_id] = shift

    def delete(self, shift_id: str) -> bool:
        return self.shifts.pop(shift_id, None) is not None

    # settings
    def get_user_settings(self) -> UserSettings:
        return self.settings

    def set_user_settings(self, settings: UserSettings) -> None:
        self.settings = settings

    def get_public_holidays(self) -> Sequence[PublicHoliday]:
        return list(self.holidays)

    def set_public_holidays(self, holidays: Sequence[PublicHoliday]) -> None:
        self.holidays = list(holidays)

    # attendance logs
    def get_attendance_logs_for_date(self, work_date: date) -> Sequence[AttendanceLog]:
        return list(self.logs.get(work_date, []))

    def set_attendance_logs_for_date(self, work_date: date, logs: Sequence[AttendanceLog]) -> None:
        self.logs[work_date] = list(logs)

    def add_attendance_log(self, work_date: date, log: AttendanceLog) -> None:
        self.logs.setdefault(work_date, []).append(log)

    def clear_attendance_logs_for_date(self, work_date: date) -> None:
        self.logs.pop(work_date, None)

    # daily statuses
    def get_daily_work_status_for_date(self, work_date: date) -> Optional[DailyWorkStatus]:
        return self.statuses.get(work_date)

    def set_daily_work_status_for_date(self, work_date: date, status: DailyWorkStatus) -> None:
        self.statuses[work_date] = status

    def delete_daily_work_status_for_date(self, work_date: date) -> bool:
        return self.statuses.pop(work_date, None) is not None

    def list_range(self, *, start: date, end: date) -> dict[date, DailyWorkStatus]:
        return {d: s for d, s in self.statuses.items() if start <= d <= end}

    # notes
    def list_notes(self) -> Sequence[Note]:
        return list(self.notes.values())

    def get_note(self, note_id: str) -> Optional[Note]:
        return self.notes.get(note_id)

    def save_note(self, note: Note) -> None:
        self.notes[note.note_id] = note

    def delete_note(self, note_id: str) -> bool:
        return self.notes.pop(note_id, None) is not None
