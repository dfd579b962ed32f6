from datetime import datetime, time

import pytest

from src.workly.workly.attendance.button import get_current_button_state
from src.workly.workly.attendance.model import AttendanceLog
from src.workly.workly.core.enums import ButtonMode, ButtonState, LogType
from src.workly.workly.shifts.model import Shift

SHIFT = Shift(
    shift_id="day",
    name="Hành chính",
    start_time=time(8, 0),
    office_end_time=time(17, 0),
    end_time=time(17, 0),
    departure_time=time(7, 30),
    break_minutes=60,
)


def at(hour, minute=0):
    return datetime(2025, 1, 6, hour, minute)


def logs(*entries):
    return [AttendanceLog(type=t, time=when) for t, when in entries]


GO = (LogType.GO_WORK, at(7, 45))
IN = (LogType.CHECK_IN, at(8, 2))
OUT = (LogType.CHECK_OUT, at(17, 0))
DONE = (LogType.COMPLETE, at(17, 5))


@pytest.mark.parametrize(
    "day_logs, now, expected",
    [
        ([], at(6, 30), ButtonState.GO_WORK),
        ([GO], at(7, 30), ButtonState.GO_WORK),
        ([], at(8, 10), ButtonState.GO_WORK),
        ([GO], at(7, 0), ButtonState.AWAITING_CHECK_IN),
        ([GO], at(8, 0), ButtonState.CHECK_IN),
        ([GO], at(8, 30), ButtonState.CHECK_IN),
        ([GO], at(8, 45), ButtonState.AWAITING_CHECK_IN),
        ([GO, IN], at(12, 0), ButtonState.WORKING),
        ([GO, IN], at(16, 30), ButtonState.CHECK_OUT),
        ([GO, IN], at(18, 0), ButtonState.CHECK_OUT),
        ([GO, IN], at(19, 0), ButtonState.CHECK_OUT),
        ([GO, IN], at(19, 1), ButtonState.GO_WORK),
        ([GO, IN, OUT], at(17, 30), ButtonState.AWAITING_COMPLETE),
        ([GO, IN, OUT, DONE], at(17, 30), ButtonState.COMPLETED_DAY),
        ([GO, IN, OUT, DONE], at(19, 1), ButtonState.GO_WORK),
    ],
)
def test_full_mode_state(day_logs, now, expected):
    assert get_current_button_state(SHIFT, logs(*day_logs), ButtonMode.FULL, now) == expected


def test_simple_mode_only_has_two_states():
    assert get_current_button_state(SHIFT, [], "simple", at(8, 10)) == ButtonState.GO_WORK
    assert get_current_button_state(SHIFT, logs(GO), "simple", at(8, 10)) == ButtonState.COMPLETED_DAY
    assert get_current_button_state(SHIFT, logs(GO, IN), "simple", at(12, 0)) == ButtonState.COMPLETED_DAY


def test_complete_log_wins_even_without_check_in():
    assert get_current_button_state(SHIFT, logs(GO, DONE), ButtonMode.FULL, at(9, 0)) == ButtonState.COMPLETED_DAY
