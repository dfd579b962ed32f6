"""Scheduled instants for one calendar instance of a shift.

Shifts only carry wall-clock times; this module anchors them to a date.
A shift is overnight when its end comes before its start on the clock, in
which case office end and shift end both move to the next calendar day.

The engine assumes `start <= office_end <= end` along the clock (the shift
service validates this on entry) and does not reorder malformed shifts.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta, tzinfo as TzInfo
from typing import Optional

from ..common.datetime_utils import minutes_of_day
from ..core.exceptions import ValidationError
from .model import Shift


@dataclass(frozen=True)
class ScheduledTimes:
    start: datetime
    office_end: datetime
    end: datetime
    is_overnight: bool


def _require_times(shift: Shift) -> None:
    if shift is None:
        raise ValidationError("Thiếu ca làm việc")
    for field_name in ("start_time", "office_end_time", "end_time"):
        if getattr(shift, field_name, None) is None:
            raise ValidationError(f"Ca {shift.shift_id!r} thiếu trường {field_name}")


def is_overnight(shift: Shift) -> bool:
    """True when the shift crosses midnight.

    Always computed from the raw times; the stored `is_night_shift` flag may be stale.
    """
    _require_times(shift)
    return minutes_of_day(shift.end_time) < minutes_of_day(shift.start_time)


def build_scheduled_timestamps(
    shift: Shift,
    work_date: date,
    *,
    tzinfo: Optional[TzInfo] = None,
) -> ScheduledTimes:
    overnight = is_overnight(shift)
    end_date = work_date + timedelta(days=1) if overnight else work_date

    return ScheduledTimes(
        start=datetime.combine(work_date, shift.start_time, tzinfo=tzinfo),
        office_end=datetime.combine(end_date, shift.office_end_time, tzinfo=tzinfo),
        end=datetime.combine(end_date, shift.end_time, tzinfo=tzinfo),
        is_overnight=overnight,
    )
