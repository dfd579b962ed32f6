from datetime import date, datetime, time, timedelta, timezone

import pytest

from src.workly.workly.core.exceptions import ValidationError
from src.workly.workly.shifts.model import Shift
from src.workly.workly.shifts.timing import build_scheduled_timestamps, is_overnight


def _shift(start, office_end, end, **kw):
    return Shift(
        shift_id="s1",
        name="Ca",
        start_time=start,
        office_end_time=office_end,
        end_time=end,
        departure_time=start,
        **kw,
    )


def test_day_shift_is_anchored_on_work_date():
    shift = _shift(time(8, 0), time(17, 0), time(19, 0))

    times = build_scheduled_timestamps(shift, date(2025, 1, 6))

    assert times.is_overnight is False
    assert times.start == datetime(2025, 1, 6, 8, 0)
    assert times.office_end == datetime(2025, 1, 6, 17, 0)
    assert times.end == datetime(2025, 1, 6, 19, 0)


def test_overnight_shift_moves_office_end_and_end_to_next_day():
    shift = _shift(time(22, 0), time(5, 0), time(6, 0))

    times = build_scheduled_timestamps(shift, date(2025, 1, 6), tzinfo=timezone.utc)

    assert times.is_overnight is True
    assert times.start == datetime(2025, 1, 6, 22, 0, tzinfo=timezone.utc)
    assert times.office_end == datetime(2025, 1, 7, 5, 0, tzinfo=timezone.utc)
    assert times.end == datetime(2025, 1, 7, 6, 0, tzinfo=timezone.utc)
    assert times.end - times.start == timedelta(hours=8)


def test_is_overnight_ignores_stale_flag():
    day_shift = _shift(time(8, 0), time(17, 0), time(17, 0), is_night_shift=True)
    night_shift = _shift(time(22, 0), time(6, 0), time(6, 0), is_night_shift=False)

    assert is_overnight(day_shift) is False
    assert is_overnight(night_shift) is True


def test_missing_time_field_is_rejected():
    shift = _shift(time(8, 0), None, time(17, 0))

    with pytest.raises(ValidationError):
        build_scheduled_timestamps(shift, date(2025, 1, 6))


@pytest.mark.parametrize(
    "work_date",
    [date(2025, 1, 6), date(2025, 1, 31), date(2024, 2, 29), date(2025, 2, 28), date(2025, 12, 31)],
)
@pytest.mark.parametrize(
    "start, office_end, end",
    [
        (time(8, 0), time(17, 0), time(19, 0)),
        (time(22, 0), time(5, 0), time(6, 0)),
        (time(20, 0), time(0, 0), time(4, 0)),
    ],
)
def test_scheduled_instants_are_ordered(work_date, start, office_end, end):
    times = build_scheduled_timestamps(_shift(start, office_end, end), work_date)

    assert times.start <= times.office_end <= times.end
    assert times.start.date() == work_date
    assert (times.end - times.start) < timedelta(days=1)
