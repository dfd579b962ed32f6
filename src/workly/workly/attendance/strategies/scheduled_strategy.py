from __future__ import annotations

from ...hours.calculator.base import HourBuckets, buckets_from_minutes
from ...hours.overlap import night_overlap_minutes
from .base import HoursStrategy, WorkedDay


class ScheduledHoursStrategy(HoursStrategy):
    """Full normal day: hours follow the shift boundaries, not the punches."""

    def apportion(self, day: WorkedDay) -> HourBuckets:
        times = day.scheduled
        office_minutes = (times.office_end - times.start).total_seconds() / 60
        ot_minutes = (times.end - times.office_end).total_seconds() / 60

        return buckets_from_minutes(
            work_date=day.work_date,
            standard_minutes=office_minutes - day.break_minutes,
            ot_minutes=ot_minutes,
            night_minutes=night_overlap_minutes(times.start, times.end, day.work_date),
            holiday=day.is_holiday,
        )
