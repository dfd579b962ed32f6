from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayStatus
from .strategies.actual_strategy import ActualHoursStrategy
from .strategies.base import HoursStrategy
from .strategies.scheduled_strategy import ScheduledHoursStrategy


@dataclass
class HoursStrategyFactory:
    """Factory Pattern: choose which boundaries feed the hour buckets."""

    def for_status(self, status: DayStatus) -> HoursStrategy | None:
        if not status.is_worked:
            return None
        if status == DayStatus.DU_CONG:
            return ScheduledHoursStrategy()
        return ActualHoursStrategy()

    def for_confirmed_rapid_press(self) -> HoursStrategy:
        return ScheduledHoursStrategy()
