from __future__ import annotations

from ...core.exceptions import ValidationError
from ...hours.calculator.base import HourBuckets, buckets_from_minutes
from ...hours.overlap import night_overlap_minutes
from .base import HoursStrategy, WorkedDay


class ActualHoursStrategy(HoursStrategy):
    """Late and/or early day: hours follow the actual check-in/check-out."""

    def apportion(self, day: WorkedDay) -> HourBuckets:
        if day.check_in is None or day.check_out is None:
            raise ValidationError("Cần cả giờ vào và giờ ra để tính giờ thực tế")

        office_end = day.scheduled.office_end
        standard_end = min(day.check_out, office_end)
        standard_minutes = (standard_end - day.check_in).total_seconds() / 60 - day.break_minutes

        ot_start = max(office_end, day.check_in)
        ot_minutes = (day.check_out - ot_start).total_seconds() / 60

        return buckets_from_minutes(
            work_date=day.work_date,
            standard_minutes=standard_minutes,
            ot_minutes=ot_minutes,
            night_minutes=night_overlap_minutes(day.check_in, day.check_out, day.work_date),
            holiday=day.is_holiday,
        )
