from __future__ import annotations

import logging
from datetime import date, timedelta

from ..core.enums import LegacyStatus
from ..hours.calculator.base import is_sunday
from .model import DailyWorkStatus
from .repository import DailyStatusRepository

logger = logging.getLogger(__name__)


class DayOffService:
    """Mark Sundays as ordinary days off (automatic, not a manual override)."""

    def __init__(self, statuses: DailyStatusRepository):
        self._statuses = statuses

    @staticmethod
    def day_off_status() -> DailyWorkStatus:
        return DailyWorkStatus(status=LegacyStatus.DAY_OFF, is_manual_override=False)

    def set_sundays_as_day_off(self, start: date, end: date) -> list[date]:
        """Only days without a status, or still pending, are touched."""
        marked: list[date] = []
        current = start
        while current <= end:
            if is_sunday(current):
                existing = self._statuses.get_daily_work_status_for_date(current)
                if existing is None or existing.status == LegacyStatus.PENDING:
                    self._statuses.set_daily_work_status_for_date(current, self.day_off_status())
                    marked.append(current)
            current += timedelta(days=1)

        logger.info("marked %d Sundays as day off between %s and %s", len(marked), start, end)
        return marked
