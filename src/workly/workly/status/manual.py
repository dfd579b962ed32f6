from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Optional

from ..attendance.classifier import AttendanceClassifier
from ..attendance.model import AttendanceLog
from ..core.constants import MANUAL_EDIT_MARGIN, MANUAL_EDIT_MAX_DURATION, MANUAL_EDIT_MIN_DURATION
from ..core.enums import RECALCULATE_LABELS, LegacyStatus, LogType, TimeEditReason
from ..core.exceptions import RapidPressDetected, TimeEditError, ValidationError
from ..settings.model import UserSettings
from ..shifts.model import Shift
from ..shifts.timing import build_scheduled_timestamps
from .adapters import to_legacy
from .model import DailyWorkStatus, DayOutcome


class ManualOverrideResolver:
    """Apply / clear user-asserted statuses, bypassing the classifier."""

    def __init__(self, classifier: AttendanceClassifier | None = None):
        self._classifier = classifier or AttendanceClassifier()

    def set_manual_status(
        self,
        work_date: date,
        status: LegacyStatus | str,
        shift: Optional[Shift] = None,
    ) -> DailyWorkStatus:
        """A manual status always means zero hours, whatever logs exist."""
        try:
            status = LegacyStatus(status)
        except ValueError:
            raise ValidationError(f"Trạng thái không hợp lệ: {status!r}")
        if status in RECALCULATE_LABELS:
            raise ValidationError(f"{status.value} không phải trạng thái lưu được, hãy tính lại từ chấm công")

        outcome = DayOutcome(
            work_date=work_date,
            status=status,
            is_holiday_work=status == LegacyStatus.NGHI_LE,
            is_manual_override=True,
            applied_shift_id=shift.shift_id if shift else None,
        )
        return to_legacy(outcome)

    def recalculate_from_logs(
        self,
        work_date: date,
        logs: Iterable[AttendanceLog],
        shift: Shift,
        holidays: Iterable = (),
        settings: Optional[UserSettings] = None,
    ) -> DailyWorkStatus:
        """Back to "computed" provenance.

        Logs already on record were accepted once, so a rapid press found
        here resolves as a confirmed one instead of asking again.
        """
        logs = list(logs or ())
        settings = settings or UserSettings()
        try:
            outcome = self._classifier.evaluate(work_date, logs, shift, settings, holidays)
        except RapidPressDetected as e:
            outcome = self._classifier.evaluate_confirmed(
                work_date,
                logs,
                shift,
                e.signal.check_in_time,
                e.signal.check_out_time,
                holidays,
            )
        return to_legacy(outcome.with_override(False))

    def clear_manual_and_recalculate(
        self,
        work_date: date,
        logs: Iterable[AttendanceLog],
        shift: Shift,
        holidays: Iterable = (),
        settings: Optional[UserSettings] = None,
    ) -> DailyWorkStatus:
        return self.recalculate_from_logs(work_date, logs, shift, holidays, settings)

    @staticmethod
    def validate_time_edit(work_date: date, shift: Shift, check_in: datetime, check_out: datetime) -> None:
        if check_out <= check_in:
            raise TimeEditError(TimeEditReason.ORDER, "Thời gian ra phải sau thời gian vào")

        duration = check_out - check_in
        if duration < MANUAL_EDIT_MIN_DURATION:
            raise TimeEditError(TimeEditReason.TOO_SHORT, "Thời gian làm việc quá ngắn (tối thiểu 1 giờ)")
        if duration > MANUAL_EDIT_MAX_DURATION:
            raise TimeEditError(TimeEditReason.TOO_LONG, "Thời gian làm việc quá dài (tối đa 16 giờ)")

        times = build_scheduled_timestamps(shift, work_date, tzinfo=check_in.tzinfo)
        if check_in < times.start - MANUAL_EDIT_MARGIN or check_out > times.end + MANUAL_EDIT_MARGIN:
            raise TimeEditError(TimeEditReason.OUTSIDE_SHIFT, "Thời gian chấm công quá xa khung giờ của ca")

    @staticmethod
    def synthetic_logs(check_in: datetime, check_out: datetime) -> list[AttendanceLog]:
        return [
            AttendanceLog(type=LogType.CHECK_IN, time=check_in),
            AttendanceLog(type=LogType.CHECK_OUT, time=check_out),
        ]

    def update_attendance_time(
        self,
        work_date: date,
        shift: Shift,
        check_in: datetime,
        check_out: datetime,
        holidays: Iterable = (),
        settings: Optional[UserSettings] = None,
    ) -> tuple[list[AttendanceLog], DailyWorkStatus]:
        """Validate an edit and compute the day from the replacement log pair."""
        if (check_in.tzinfo is None) != (check_out.tzinfo is None):
            raise ValidationError("Giờ vào và giờ ra phải cùng kiểu múi giờ")
        self.validate_time_edit(work_date, shift, check_in, check_out)

        logs = self.synthetic_logs(check_in, check_out)
        return logs, self.recalculate_from_logs(work_date, logs, shift, holidays, settings)
