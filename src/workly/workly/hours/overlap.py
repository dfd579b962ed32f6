"""Interval-overlap math shared by every hour bucket calculation.

All helpers are total: empty, negative or disjoint intervals give 0.
"""

from __future__ import annotations

from datetime import date, datetime, timedelta

from ..core.constants import NIGHT_WINDOW_END, NIGHT_WINDOW_START


def overlap_minutes(a_start: datetime, a_end: datetime, b_start: datetime, b_end: datetime) -> float:
    """max(0, min(ends) - max(starts)) in minutes."""
    latest_start = max(a_start, b_start)
    earliest_end = min(a_end, b_end)
    seconds = (earliest_end - latest_start).total_seconds()
    return max(seconds, 0.0) / 60


def night_windows(work_date: date, *, tzinfo=None) -> tuple[tuple[datetime, datetime], tuple[datetime, datetime]]:
    """[22:00, 24:00) on work_date and [00:00, 06:00) on the next day."""
    next_day = work_date + timedelta(days=1)
    midnight = datetime.combine(next_day, datetime.min.time(), tzinfo=tzinfo)
    return (
        (datetime.combine(work_date, NIGHT_WINDOW_START, tzinfo=tzinfo), midnight),
        (midnight, datetime.combine(next_day, NIGHT_WINDOW_END, tzinfo=tzinfo)),
    )


def night_overlap_minutes(interval_start: datetime, interval_end: datetime, work_date: date) -> float:
    """Minutes of [interval_start, interval_end) that fall in the night window of work_date."""
    if interval_end <= interval_start:
        return 0.0

    evening, early_morning = night_windows(work_date, tzinfo=interval_start.tzinfo)
    return overlap_minutes(interval_start, interval_end, *evening) + overlap_minutes(
        interval_start, interval_end, *early_morning
    )
