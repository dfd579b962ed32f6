"""Multi-function attendance button.

The state is derived from scratch on every call from (shift, logs, now, mode);
nothing is stored between calls.

Full mode:
    go_work -> awaiting_check_in | check_in -> working | check_out
            -> awaiting_complete -> completed_day
Simple mode:
    go_work -> completed_day
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..core.constants import BUTTON_PROXIMITY_GATE
from ..core.enums import ButtonMode, ButtonState
from ..shifts.model import Shift
from .model import AttendanceLog, DayLogs
from .window import shift_instance, starts_new_cycle


def get_current_button_state(
    shift: Shift,
    logs_for_today: Iterable[AttendanceLog],
    mode: ButtonMode | str,
    now: datetime,
    work_date: Optional[date] = None,
) -> ButtonState:
    mode = ButtonMode(mode)

    if starts_new_cycle(shift, now, work_date):
        return ButtonState.GO_WORK

    day = DayLogs.from_logs(logs_for_today)

    if mode == ButtonMode.SIMPLE:
        return ButtonState.COMPLETED_DAY if day.go_work else ButtonState.GO_WORK

    if not day.go_work:
        return ButtonState.GO_WORK
    if day.complete:
        return ButtonState.COMPLETED_DAY

    times = shift_instance(shift, now, work_date)

    if not day.check_in:
        if abs(now - times.start) <= BUTTON_PROXIMITY_GATE:
            return ButtonState.CHECK_IN
        return ButtonState.AWAITING_CHECK_IN

    if not day.check_out:
        if now - times.office_end >= -BUTTON_PROXIMITY_GATE:
            return ButtonState.CHECK_OUT
        return ButtonState.WORKING

    return ButtonState.AWAITING_COMPLETE
