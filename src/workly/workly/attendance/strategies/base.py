from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ...hours.calculator.base import HourBuckets
from ...shifts.timing import ScheduledTimes


@dataclass(frozen=True)
class WorkedDay:
    """Everything an hours strategy needs about one day."""

    work_date: date
    scheduled: ScheduledTimes
    break_minutes: int
    check_in: Optional[datetime] = None
    check_out: Optional[datetime] = None
    is_holiday: bool = False


class HoursStrategy(ABC):
    """Strategy Pattern: encapsulate which boundaries the worked hours come from."""

    @abstractmethod
    def apportion(self, day: WorkedDay) -> HourBuckets:
        raise NotImplementedError
