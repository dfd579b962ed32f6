from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import DEFAULT_LATE_THRESHOLD_MINUTES, DEFAULT_RAPID_PRESS_THRESHOLD_SECONDS
from ..core.enums import ButtonMode, HolidayType, RotationFrequency, ShiftChangeMode


@dataclass(frozen=True)
class RotationConfig:
    """Danh sách ca xoay vòng; `current_index` trỏ vào ca đang áp dụng."""

    shift_ids: tuple[str, ...] = ()
    frequency: RotationFrequency = RotationFrequency.WEEKLY
    last_applied: Optional[datetime] = None
    current_index: int = 0

    def to_dict(self) -> dict:
        return {
            "shift_ids": list(self.shift_ids),
            "frequency": self.frequency.value,
            "last_applied": self.last_applied.isoformat() if self.last_applied else None,
            "current_index": self.current_index,
        }


@dataclass(frozen=True)
class UserSettings:
    """Cấu hình người dùng mà engine chỉ đọc."""

    late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES
    rapid_press_threshold_seconds: int = DEFAULT_RAPID_PRESS_THRESHOLD_SECONDS
    multi_button_mode: ButtonMode = ButtonMode.FULL
    active_shift_id: Optional[str] = None
    change_shift_mode: ShiftChangeMode = ShiftChangeMode.DISABLED
    rotation: Optional[RotationConfig] = None

    def to_dict(self) -> dict:
        return {
            "late_threshold_minutes": self.late_threshold_minutes,
            "rapid_press_threshold_seconds": self.rapid_press_threshold_seconds,
            "multi_button_mode": self.multi_button_mode.value,
            "active_shift_id": self.active_shift_id,
            "change_shift_mode": self.change_shift_mode.value,
            "rotation": self.rotation.to_dict() if self.rotation else None,
        }


@dataclass(frozen=True)
class PublicHoliday:
    date: date
    name: str
    type: HolidayType = HolidayType.NATIONAL

    def to_dict(self) -> dict:
        return {"date": self.date.isoformat(), "name": self.name, "type": self.type.value}
