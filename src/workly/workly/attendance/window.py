from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from ..core.constants import ACTIVE_WINDOW_AFTER_END, ACTIVE_WINDOW_BEFORE_START
from ..shifts.model import Shift
from ..shifts.timing import ScheduledTimes, build_scheduled_timestamps


def shift_instance(shift: Shift, now: datetime, work_date: Optional[date] = None) -> ScheduledTimes:
    """The shift instance starting on `work_date`, now's calendar date by default."""
    return build_scheduled_timestamps(shift, work_date or now.date(), tzinfo=now.tzinfo)


def is_within_active_window(shift: Shift, now: datetime, work_date: Optional[date] = None) -> bool:
    """now in [start - 1h, end + 2h] (both ends inclusive)."""
    times = shift_instance(shift, now, work_date)
    return times.start - ACTIVE_WINDOW_BEFORE_START <= now <= times.end + ACTIVE_WINDOW_AFTER_END


def should_reset_button(shift: Shift, now: datetime, work_date: Optional[date] = None) -> bool:
    """now in (start - 1h, start): the button snaps back to "go to work"."""
    times = shift_instance(shift, now, work_date)
    return times.start - ACTIVE_WINDOW_BEFORE_START < now < times.start


def starts_new_cycle(shift: Shift, now: datetime, work_date: Optional[date] = None) -> bool:
    """Outside the active window or inside the reset hour: the day's logs no longer hold."""
    return not is_within_active_window(shift, now, work_date) or should_reset_button(shift, now, work_date)
