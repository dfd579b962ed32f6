from datetime import date, datetime, time

import pytest

from src.workly.workly.attendance.factory import HoursStrategyFactory
from src.workly.workly.attendance.strategies.actual_strategy import ActualHoursStrategy
from src.workly.workly.attendance.strategies.base import WorkedDay
from src.workly.workly.attendance.strategies.scheduled_strategy import ScheduledHoursStrategy
from src.workly.workly.core.enums import DayStatus
from src.workly.workly.core.exceptions import ValidationError
from src.workly.workly.shifts.model import Shift
from src.workly.workly.shifts.timing import build_scheduled_timestamps

SHIFT = Shift(
    shift_id="ot",
    name="Ca có tăng ca",
    start_time=time(8, 0),
    office_end_time=time(17, 0),
    end_time=time(19, 0),
    departure_time=time(7, 30),
    break_minutes=60,
)
WORK_DATE = date(2025, 1, 6)


def _day(check_in=None, check_out=None):
    return WorkedDay(
        work_date=WORK_DATE,
        scheduled=build_scheduled_timestamps(SHIFT, WORK_DATE),
        break_minutes=SHIFT.break_minutes,
        check_in=check_in,
        check_out=check_out,
    )


@pytest.mark.parametrize(
    "status, expected",
    [
        (DayStatus.DU_CONG, ScheduledHoursStrategy),
        (DayStatus.DI_MUON, ActualHoursStrategy),
        (DayStatus.VE_SOM, ActualHoursStrategy),
        (DayStatus.DI_MUON_VE_SOM, ActualHoursStrategy),
    ],
)
def test_factory_picks_strategy_by_status(status, expected):
    assert isinstance(HoursStrategyFactory().for_status(status), expected)


@pytest.mark.parametrize("status", [DayStatus.CHUA_DI, DayStatus.DA_DI_CHUA_VAO, DayStatus.CHUA_RA])
def test_unworked_statuses_have_no_strategy(status):
    assert HoursStrategyFactory().for_status(status) is None


def test_confirmed_rapid_press_uses_schedule():
    assert isinstance(HoursStrategyFactory().for_confirmed_rapid_press(), ScheduledHoursStrategy)


def test_scheduled_strategy_splits_standard_and_ot():
    hours = ScheduledHoursStrategy().apportion(_day())

    assert hours.standard_hours == 8.0
    assert hours.ot_hours == 2.0
    assert hours.total_hours == 10.0


def test_actual_strategy_uses_punches():
    hours = ActualHoursStrategy().apportion(
        _day(datetime(2025, 1, 6, 8, 30), datetime(2025, 1, 6, 18, 0))
    )

    assert hours.standard_hours == 7.5
    assert hours.ot_hours == 1.0
    assert hours.total_hours == 8.5


def test_actual_strategy_requires_both_punches():
    with pytest.raises(ValidationError):
        ActualHoursStrategy().apportion(_day(datetime(2025, 1, 6, 8, 30)))
