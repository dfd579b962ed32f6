from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Optional, Union

from ..core.enums import DayStatus, LegacyStatus
from ..hours.calculator.base import ZERO_BUCKETS, HourBuckets


@dataclass(frozen=True)
class DayOutcome:
    """Single internal record for one classified day.

    `status` is either a computed DayStatus or a user-asserted LegacyStatus;
    `status.adapters` turns it into the two persisted shapes.
    """

    work_date: date
    status: Union[DayStatus, LegacyStatus]
    hours: HourBuckets = ZERO_BUCKETS
    check_in_time: Optional[datetime] = None
    check_out_time: Optional[datetime] = None
    late_minutes: int = 0
    early_minutes: int = 0
    is_holiday_work: bool = False
    is_manual_override: bool = False
    applied_shift_id: Optional[str] = None
    notes: str = ""

    def with_override(self, is_manual_override: bool) -> "DayOutcome":
        return replace(self, is_manual_override=is_manual_override)


@dataclass(frozen=True)
class DailyWorkStatusNew:
    """Status-oriented daily record (hours rounded to 2 decimals)."""

    date: date
    status: DayStatus
    vao_log_time: Optional[datetime]
    ra_log_time: Optional[datetime]
    standard_hours: float = 0.0
    ot_hours: float = 0.0
    total_hours: float = 0.0
    sunday_hours: float = 0.0
    night_hours: float = 0.0
    is_holiday_work: bool = False
    notes: str = ""

    def to_dict(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "status": self.status.value,
            "vao_log_time": self.vao_log_time.isoformat() if self.vao_log_time else None,
            "ra_log_time": self.ra_log_time.isoformat() if self.ra_log_time else None,
            "standard_hours": self.standard_hours,
            "ot_hours": self.ot_hours,
            "total_hours": self.total_hours,
            "sunday_hours": self.sunday_hours,
            "night_hours": self.night_hours,
            "is_holiday_work": self.is_holiday_work,
            "notes": self.notes,
        }


@dataclass(frozen=True)
class DailyWorkStatus:
    """Hour-budget daily record (legacy shape), one per calendar date."""

    status: LegacyStatus
    applied_shift_id_for_day: Optional[str] = None
    vao_log_time: Optional[datetime] = None
    ra_log_time: Optional[datetime] = None
    standard_hours_scheduled: float = 0.0
    ot_hours_scheduled: float = 0.0
    sunday_hours_scheduled: float = 0.0
    night_hours_scheduled: float = 0.0
    total_hours_scheduled: float = 0.0
    late_minutes: int = 0
    early_minutes: int = 0
    is_holiday_work: bool = False
    is_manual_override: bool = False
    notes: str = field(default="")

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "applied_shift_id_for_day": self.applied_shift_id_for_day,
            "vao_log_time": self.vao_log_time.isoformat() if self.vao_log_time else None,
            "ra_log_time": self.ra_log_time.isoformat() if self.ra_log_time else None,
            "standard_hours_scheduled": self.standard_hours_scheduled,
            "ot_hours_scheduled": self.ot_hours_scheduled,
            "sunday_hours_scheduled": self.sunday_hours_scheduled,
            "night_hours_scheduled": self.night_hours_scheduled,
            "total_hours_scheduled": self.total_hours_scheduled,
            "late_minutes": self.late_minutes,
            "early_minutes": self.early_minutes,
            "is_holiday_work": self.is_holiday_work,
            "is_manual_override": self.is_manual_override,
            "notes": self.notes,
        }
