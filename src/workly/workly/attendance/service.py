from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from ..common.datetime_utils import format_hhmm, now_local
from ..core.enums import ButtonState, LogType
from ..core.exceptions import ValidationError
from ..settings.repository import SettingsRepository
from ..shifts.model import Shift
from ..shifts.service import ShiftService, is_work_day
from ..shifts.timing import is_overnight
from ..status.adapters import to_legacy
from ..status.model import DailyWorkStatus
from ..status.repository import DailyStatusRepository
from .button import get_current_button_state
from .classifier import AttendanceClassifier
from .model import AttendanceLog, DayLogs
from .repository import AttendanceLogRepository
from .window import is_within_active_window, should_reset_button, starts_new_cycle

logger = logging.getLogger(__name__)

# Which log a press writes, per button state.
PRESS_ACTIONS: dict[ButtonState, LogType] = {
    ButtonState.GO_WORK: LogType.GO_WORK,
    ButtonState.AWAITING_CHECK_IN: LogType.CHECK_IN,
    ButtonState.CHECK_IN: LogType.CHECK_IN,
    ButtonState.WORKING: LogType.CHECK_OUT,
    ButtonState.CHECK_OUT: LogType.CHECK_OUT,
    ButtonState.AWAITING_COMPLETE: LogType.COMPLETE,
}


class WorkService:
    """Orchestrates the engine: reads the collaborators, runs the engine, writes the result."""

    def __init__(
        self,
        logs: AttendanceLogRepository,
        statuses: DailyStatusRepository,
        settings: SettingsRepository,
        shift_service: ShiftService,
        *,
        classifier: AttendanceClassifier | None = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._logs = logs
        self._statuses = statuses
        self._settings = settings
        self._shift_service = shift_service
        self._classifier = classifier or AttendanceClassifier()
        self._clock = clock

    def resolve_work_date(self, now: datetime) -> date:
        """The date whose shift instance `now` belongs to.

        An overnight instance started yesterday keeps the button until its
        active window closes or its day is completed; otherwise it is today.
        """
        today = now.date()
        yesterday = today - timedelta(days=1)
        shift = self._shift_service.get_shift_for_date(yesterday)
        if not shift or not is_overnight(shift) or not is_work_day(shift, yesterday):
            return today
        if not is_within_active_window(shift, now, yesterday):
            return today

        day = DayLogs.from_logs(self._logs.get_attendance_logs_for_date(yesterday))
        if day.go_work and not day.complete:
            return yesterday
        return today

    def get_button_state(self, *, now: datetime | None = None) -> Optional[ButtonState]:
        """None means "no button": there is no active shift to track."""
        now = now or self._clock()
        work_date = self.resolve_work_date(now)
        shift = self._shift_service.get_shift_for_date(work_date)
        if not shift:
            return None

        if not is_work_day(shift, work_date):
            return ButtonState.COMPLETED_DAY

        settings = self._settings.get_user_settings()
        logs = self._logs.get_attendance_logs_for_date(work_date)
        return get_current_button_state(shift, logs, settings.multi_button_mode, now, work_date)

    def handle_button_press(self, state: ButtonState | str, *, now: datetime | None = None) -> Optional[DailyWorkStatus]:
        """Write the log the state implies, then classify and store the day.

        The day is classified before the log is stored: a RapidPressDetected
        propagates with the stored logs untouched. A go_work press outside
        the active window (or inside the reset hour) opens a new cycle and
        drops the date's earlier logs and status first.
        """
        now = now or self._clock()
        state = ButtonState(state)
        log_type = PRESS_ACTIONS.get(state)
        if log_type is None:
            logger.info("no action for button state %s", state.value)
            return None

        work_date = self.resolve_work_date(now)
        shift = self._shift_service.require_shift_for_date(work_date)
        existing = list(self._logs.get_attendance_logs_for_date(work_date))
        if existing and self._opens_new_cycle(state, shift, now, work_date):
            logger.info("go_work at %s opens a new cycle for %s", now.isoformat(), work_date)
            self.reset_daily_status(work_date)
            existing = []

        if getattr(DayLogs.from_logs(existing), log_type.value) is not None:
            raise ValidationError(f"Đã ghi nhận {log_type.value} cho hôm nay rồi")

        new_log = AttendanceLog(type=log_type, time=now)
        outcome = self._classifier.evaluate(
            work_date,
            existing + [new_log],
            shift,
            self._settings.get_user_settings(),
            self._settings.get_public_holidays(),
        )

        self._logs.add_attendance_log(work_date, new_log)
        record = to_legacy(outcome)
        self._statuses.set_daily_work_status_for_date(work_date, record)
        logger.info("%s logged at %s, day status %s", log_type.value, now.isoformat(), record.status.value)
        return record

    @staticmethod
    def _opens_new_cycle(state: ButtonState, shift: Shift, now: datetime, work_date: date) -> bool:
        return state == ButtonState.GO_WORK and starts_new_cycle(shift, now, work_date)

    def confirm_rapid_press(
        self,
        work_date: date,
        check_in: datetime,
        check_out: datetime,
    ) -> DailyWorkStatus:
        """The user accepted a rapid press: store the check-out and count a full day.

        The pair must match what was signalled: the stored check-in, and a
        check-out not before it. Nothing is written otherwise.
        """
        if check_out < check_in:
            raise ValidationError("Giờ ra không thể nhỏ hơn giờ vào")

        shift = self._shift_service.require_shift_for_date(work_date)
        logs = list(self._logs.get_attendance_logs_for_date(work_date))
        day = DayLogs.from_logs(logs)
        if day.check_in_time is None or day.check_in_time != check_in:
            raise ValidationError("Giờ vào không khớp với nhật ký chấm công")
        if day.check_out_time is not None and day.check_out_time != check_out:
            raise ValidationError("Giờ ra không khớp với nhật ký chấm công")

        if day.check_out is None:
            out_log = AttendanceLog(type=LogType.CHECK_OUT, time=check_out)
            self._logs.add_attendance_log(work_date, out_log)
            logs.append(out_log)

        outcome = self._classifier.evaluate_confirmed(
            work_date, logs, shift, check_in, check_out, self._settings.get_public_holidays()
        )
        record = to_legacy(outcome)
        self._statuses.set_daily_work_status_for_date(work_date, record)
        logger.info("rapid press confirmed for %s", work_date)
        return record

    def reset_daily_status(self, work_date: date) -> None:
        self._logs.clear_attendance_logs_for_date(work_date)
        self._statuses.delete_daily_work_status_for_date(work_date)
        logger.info("daily status reset for %s", work_date)

    def perform_auto_reset_if_needed(self, *, now: datetime | None = None) -> bool:
        """Clear today's logs when inside the pre-shift reset hour."""
        now = now or self._clock()
        shift = self._shift_service.get_active_shift()
        if not shift:
            return False

        if should_reset_button(shift, now) and self._logs.get_attendance_logs_for_date(now.date()):
            logger.info("auto reset for %s at %s", now.date(), now.strftime("%H:%M"))
            self.reset_daily_status(now.date())
            return True
        return False

    def get_time_display_info(self, *, now: datetime | None = None) -> dict:
        now = now or self._clock()
        shift = self._shift_service.get_active_shift()
        if not shift:
            return {"current_time": now.strftime("%H:%M"), "shift_info": None, "work_status": None, "next_action": None}

        work_date = self.resolve_work_date(now)
        status = self._statuses.get_daily_work_status_for_date(work_date)
        state = self.get_button_state(now=now)
        return {
            "current_time": now.strftime("%H:%M"),
            "work_date": work_date.isoformat(),
            "shift_info": {
                "name": shift.name,
                "start_time": format_hhmm(shift.start_time),
                "end_time": format_hhmm(shift.end_time),
                "departure_time": format_hhmm(shift.departure_time),
            },
            "work_status": status.to_dict() if status else None,
            "next_action": state.value if state else None,
            "logs": [
                {"type": log.type.value, "time": log.time.strftime("%H:%M")}
                for log in self._logs.get_attendance_logs_for_date(work_date)
            ],
        }
