from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol

from .model import DailyWorkStatus


class DailyStatusRepository(Protocol):
    def get_daily_work_status_for_date(self, work_date: date) -> Optional[DailyWorkStatus]:
        raise NotImplementedError

    def set_daily_work_status_for_date(self, work_date: date, status: DailyWorkStatus) -> None:
        raise NotImplementedError

    def delete_daily_work_status_for_date(self, work_date: date) -> bool:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date) -> Mapping[date, DailyWorkStatus]:
        """Stored statuses with start <= date <= end, keyed by date."""

        raise NotImplementedError
