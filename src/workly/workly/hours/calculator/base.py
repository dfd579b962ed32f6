from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from ...core.constants import HOURS_PRECISION
from ...shifts.model import Shift


@dataclass(frozen=True)
class HourBuckets:
    standard_hours: float = 0.0
    ot_hours: float = 0.0
    total_hours: float = 0.0
    sunday_hours: float = 0.0
    night_hours: float = 0.0
    holiday_hours: float = 0.0

    def rounded(self) -> "HourBuckets":
        return HourBuckets(
            standard_hours=round(self.standard_hours, HOURS_PRECISION),
            ot_hours=round(self.ot_hours, HOURS_PRECISION),
            total_hours=round(self.total_hours, HOURS_PRECISION),
            sunday_hours=round(self.sunday_hours, HOURS_PRECISION),
            night_hours=round(self.night_hours, HOURS_PRECISION),
            holiday_hours=round(self.holiday_hours, HOURS_PRECISION),
        )


ZERO_BUCKETS = HourBuckets()


def is_sunday(work_date: date) -> bool:
    # date.weekday(): Monday=0 .. Sunday=6
    return work_date.weekday() == 6


def is_holiday(work_date: date, holidays: Iterable) -> bool:
    """`holidays` holds PublicHoliday records or plain dates."""
    for h in holidays or ():
        day = getattr(h, "date", h)
        if day == work_date:
            return True
    return False


def buckets_from_minutes(
    *,
    work_date: date,
    standard_minutes: float,
    ot_minutes: float,
    night_minutes: float,
    holiday: bool,
) -> HourBuckets:
    """Turn raw minutes into hour buckets, rounded once at the end.

    Sunday and holiday buckets follow the nominal work date, not the
    calendar day the minutes actually fall on.
    """
    standard = max(standard_minutes, 0.0) / 60
    ot = max(ot_minutes, 0.0) / 60
    total = standard + ot
    return HourBuckets(
        standard_hours=standard,
        ot_hours=ot,
        total_hours=total,
        sunday_hours=total if is_sunday(work_date) else 0.0,
        night_hours=max(night_minutes, 0.0) / 60,
        holiday_hours=total if holiday else 0.0,
    ).rounded()


class ShiftHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for whole-shift hours)."""

    @abstractmethod
    def calculate(self, shift: Shift, work_date: date, holidays: Iterable = ()) -> HourBuckets:
        raise NotImplementedError
