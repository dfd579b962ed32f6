from datetime import date, time

from src.workly.workly.hours.calculator.legacy_calculator import LegacyShiftCalculator, scheduled_hours
from src.workly.workly.settings.model import PublicHoliday
from src.workly.workly.shifts.model import Shift


def _shift(start, office_end, end, break_minutes=0):
    return Shift(
        shift_id="s",
        name="Ca",
        start_time=start,
        office_end_time=office_end,
        end_time=end,
        departure_time=start,
        break_minutes=break_minutes,
    )


def test_scheduled_hours_subtracts_break():
    assert scheduled_hours(_shift(time(8, 0), time(17, 0), time(17, 0), 60)) == 8.0


def test_scheduled_hours_never_negative():
    assert scheduled_hours(_shift(time(8, 0), time(9, 0), time(9, 0), 120)) == 0.0


def test_standard_hours_are_capped_at_eight():
    shift = _shift(time(7, 0), time(19, 0), time(19, 0), 60)

    hours = LegacyShiftCalculator().calculate(shift, date(2025, 1, 6))

    assert hours.standard_hours == 8.0
    assert hours.ot_hours == 3.0
    assert hours.total_hours == 11.0
    assert hours.night_hours == 0.0
    assert hours.sunday_hours == 0.0


def test_night_shift_hours_fall_in_night_window():
    shift = _shift(time(22, 0), time(6, 0), time(6, 0))

    hours = LegacyShiftCalculator().calculate(shift, date(2025, 1, 6))

    assert hours.total_hours == 8.0
    assert hours.night_hours == 8.0


def test_sunday_and_holiday_buckets_follow_work_date():
    shift = _shift(time(8, 0), time(17, 0), time(17, 0), 60)
    sunday = date(2025, 1, 5)

    hours = LegacyShiftCalculator().calculate(shift, sunday, [PublicHoliday(date=sunday, name="Nghỉ bù")])

    assert hours.sunday_hours == 8.0
    assert hours.holiday_hours == 8.0
