from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional

from ..attendance.repository import AttendanceLogRepository
from ..core.enums import RECALCULATE_LABELS, LegacyStatus
from ..core.exceptions import ValidationError
from ..settings.repository import SettingsRepository
from ..shifts.service import ShiftService
from .manual import ManualOverrideResolver
from .model import DailyWorkStatus
from .repository import DailyStatusRepository

logger = logging.getLogger(__name__)


class DayStatusService:
    """Manual overrides and recomputation, persisted through the repositories."""

    def __init__(
        self,
        statuses: DailyStatusRepository,
        logs: AttendanceLogRepository,
        settings: SettingsRepository,
        shift_service: ShiftService,
        *,
        resolver: ManualOverrideResolver | None = None,
    ):
        self._statuses = statuses
        self._logs = logs
        self._settings = settings
        self._shift_service = shift_service
        self._resolver = resolver or ManualOverrideResolver()

    def get_status(self, work_date: date) -> Optional[DailyWorkStatus]:
        return self._statuses.get_daily_work_status_for_date(work_date)

    def set_manual_status(
        self,
        work_date: date,
        status: LegacyStatus | str,
        *,
        shift_id: Optional[str] = None,
    ) -> DailyWorkStatus:
        try:
            status = LegacyStatus(status)
        except ValueError:
            raise ValidationError(f"Trạng thái không hợp lệ: {status!r}")

        if status in RECALCULATE_LABELS:
            return self.recalculate_from_logs(work_date)

        shift = self._shift_service.get_shift(shift_id) if shift_id else self._shift_service.get_shift_for_date(work_date)
        record = self._resolver.set_manual_status(work_date, status, shift)
        self._statuses.set_daily_work_status_for_date(work_date, record)
        logger.info("manual status %s set for %s", status.value, work_date)
        return record

    def recalculate_from_logs(self, work_date: date) -> DailyWorkStatus:
        shift = self._shift_service.require_shift_for_date(work_date)
        logs = self._logs.get_attendance_logs_for_date(work_date)
        record = self._resolver.recalculate_from_logs(
            work_date,
            logs,
            shift,
            self._settings.get_public_holidays(),
            self._settings.get_user_settings(),
        )
        self._statuses.set_daily_work_status_for_date(work_date, record)
        logger.info("status for %s recalculated from %d logs: %s", work_date, len(logs), record.status.value)
        return record

    def clear_manual_and_recalculate(self, work_date: date) -> DailyWorkStatus:
        return self.recalculate_from_logs(work_date)

    def update_attendance_time(self, work_date: date, check_in: datetime, check_out: datetime) -> DailyWorkStatus:
        shift = self._shift_service.require_shift_for_date(work_date)
        logs, record = self._resolver.update_attendance_time(
            work_date,
            shift,
            check_in,
            check_out,
            self._settings.get_public_holidays(),
            self._settings.get_user_settings(),
        )
        self._logs.set_attendance_logs_for_date(work_date, logs)
        self._statuses.set_daily_work_status_for_date(work_date, record)
        logger.info("attendance time for %s replaced (%s -> %s)", work_date, check_in, check_out)
        return record

    def reset_day(self, work_date: date) -> None:
        self._logs.clear_attendance_logs_for_date(work_date)
        self._statuses.delete_daily_work_status_for_date(work_date)
        logger.info("daily status reset for %s", work_date)
