from __future__ import annotations

from datetime import date
from typing import Iterable

from ...core.constants import LEGACY_STANDARD_HOURS_CAP
from ...shifts.model import Shift
from ...shifts.timing import build_scheduled_timestamps
from ..overlap import night_overlap_minutes
from .base import HourBuckets, ShiftHoursCalculator, buckets_from_minutes, is_holiday


def scheduled_hours(shift: Shift) -> float:
    """Start -> office end (crossing midnight when overnight) minus break, not below 0."""
    # Any date works: only the distance between the two instants matters.
    times = build_scheduled_timestamps(shift, date(2000, 1, 3))
    minutes = (times.office_end - times.start).total_seconds() / 60
    minutes -= int(shift.break_minutes or 0)
    return max(minutes, 0.0) / 60


class LegacyShiftCalculator(ShiftHoursCalculator):
    """Whole-shift rule kept for records computed before per-log classification.

    Standard hours are capped at 8, the rest is overtime. Night hours come
    from the same overlap math as the per-log path, applied to the scheduled
    interval and never exceeding the worked total.
    """

    def calculate(self, shift: Shift, work_date: date, holidays: Iterable = ()) -> HourBuckets:
        total_minutes = scheduled_hours(shift) * 60
        cap_minutes = LEGACY_STANDARD_HOURS_CAP * 60

        times = build_scheduled_timestamps(shift, work_date)
        night = night_overlap_minutes(times.start, times.office_end, work_date)

        return buckets_from_minutes(
            work_date=work_date,
            standard_minutes=min(total_minutes, cap_minutes),
            ot_minutes=max(total_minutes - cap_minutes, 0.0),
            night_minutes=min(night, total_minutes),
            holiday=is_holiday(work_date, holidays),
        )
