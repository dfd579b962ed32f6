from __future__ import annotations

from ..core.enums import DayStatus, LegacyStatus
from .model import DailyWorkStatus, DailyWorkStatusNew, DayOutcome


def to_status_new(outcome: DayOutcome) -> DailyWorkStatusNew:
    if not isinstance(outcome.status, DayStatus):
        raise ValueError(f"{outcome.status!r} has no DailyWorkStatusNew representation")

    hours = outcome.hours
    return DailyWorkStatusNew(
        date=outcome.work_date,
        status=outcome.status,
        vao_log_time=outcome.check_in_time,
        ra_log_time=outcome.check_out_time,
        standard_hours=hours.standard_hours,
        ot_hours=hours.ot_hours,
        total_hours=hours.total_hours,
        sunday_hours=hours.sunday_hours,
        night_hours=hours.night_hours,
        is_holiday_work=outcome.is_holiday_work,
        notes=outcome.notes,
    )


def to_legacy(outcome: DayOutcome) -> DailyWorkStatus:
    status = outcome.status
    if isinstance(status, DayStatus):
        status = LegacyStatus(status.value)

    hours = outcome.hours
    return DailyWorkStatus(
        status=status,
        applied_shift_id_for_day=outcome.applied_shift_id,
        vao_log_time=outcome.check_in_time,
        ra_log_time=outcome.check_out_time,
        standard_hours_scheduled=hours.standard_hours,
        ot_hours_scheduled=hours.ot_hours,
        sunday_hours_scheduled=hours.sunday_hours,
        night_hours_scheduled=hours.night_hours,
        total_hours_scheduled=hours.total_hours,
        late_minutes=outcome.late_minutes,
        early_minutes=outcome.early_minutes,
        is_holiday_work=outcome.is_holiday_work,
        is_manual_override=outcome.is_manual_override,
        notes=outcome.notes,
    )
