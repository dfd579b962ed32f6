"""Daily attendance classification.

Turns one day's punch logs into a status record against the shift schedule:

* a `complete` log always wins and yields DU_CONG; with no punches on
  record its hours come from the whole-shift calculator;
* check-in and check-out closer than the rapid-press threshold raise
  RapidPressDetected: the caller must ask the user, then call
  `classify_day_confirmed`;
* otherwise late / early are derived from the schedule and the hours are
  apportioned by the strategy the factory picks for the status.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, Optional

from ..core.constants import EARLY_LEAVE_TOLERANCE, RAPID_PRESS_CONFIRMED_NOTE
from ..core.enums import DayStatus
from ..core.exceptions import RapidPressDetected, RapidPressSignal, ValidationError
from ..hours.calculator.base import ZERO_BUCKETS, ShiftHoursCalculator, is_holiday
from ..hours.calculator.legacy_calculator import LegacyShiftCalculator
from ..settings.model import UserSettings
from ..shifts.model import Shift
from ..shifts.timing import ScheduledTimes, build_scheduled_timestamps
from ..status.adapters import to_status_new
from ..status.model import DailyWorkStatusNew, DayOutcome
from .factory import HoursStrategyFactory
from .model import AttendanceLog, DayLogs
from .strategies.base import WorkedDay

logger = logging.getLogger(__name__)


def _whole_minutes(delta: timedelta) -> int:
    return max(int(delta.total_seconds() // 60), 0)


def decide_status(is_late: bool, is_early: bool) -> DayStatus:
    if is_late and is_early:
        return DayStatus.DI_MUON_VE_SOM
    if is_late:
        return DayStatus.DI_MUON
    if is_early:
        return DayStatus.VE_SOM
    return DayStatus.DU_CONG


class AttendanceClassifier:
    def __init__(
        self,
        *,
        strategy_factory: HoursStrategyFactory | None = None,
        whole_shift_calculator: ShiftHoursCalculator | None = None,
    ):
        self._factory = strategy_factory or HoursStrategyFactory()
        self._whole_shift = whole_shift_calculator or LegacyShiftCalculator()

    def evaluate(
        self,
        work_date: date,
        logs: Iterable[AttendanceLog],
        shift: Shift,
        settings: UserSettings,
        holidays: Iterable = (),
    ) -> DayOutcome:
        day = DayLogs.from_logs(logs)
        holidays = tuple(holidays or ())
        times = build_scheduled_timestamps(shift, work_date, tzinfo=day.reference_tz())
        holiday = is_holiday(work_date, holidays)

        check_in = day.check_in_time
        check_out = day.check_out_time
        late_minutes = 0
        early_minutes = 0

        if day.complete:
            status = DayStatus.DU_CONG
        elif check_in and check_out:
            self._guard_rapid_press(check_in, check_out, settings)

            late_limit = times.start + timedelta(minutes=int(settings.late_threshold_minutes))
            is_late = check_in > late_limit
            is_early = check_out < times.office_end - EARLY_LEAVE_TOLERANCE
            status = decide_status(is_late, is_early)
            if is_late:
                late_minutes = _whole_minutes(check_in - times.start)
            if is_early:
                early_minutes = _whole_minutes(times.office_end - check_out)
        elif check_in:
            status = DayStatus.CHUA_RA
        elif day.go_work:
            status = DayStatus.DA_DI_CHUA_VAO
        else:
            status = DayStatus.CHUA_DI

        hours = ZERO_BUCKETS
        strategy = self._factory.for_status(status)
        if day.complete and not (check_in and check_out):
            hours = self._whole_shift.calculate(shift, work_date, holidays)
        elif strategy is not None:
            hours = strategy.apportion(
                WorkedDay(
                    work_date=work_date,
                    scheduled=times,
                    break_minutes=int(shift.break_minutes or 0),
                    check_in=check_in,
                    check_out=check_out,
                    is_holiday=holiday,
                )
            )

        logger.debug("classified %s as %s (shift=%s)", work_date, status.value, shift.shift_id)
        return DayOutcome(
            work_date=work_date,
            status=status,
            hours=hours,
            check_in_time=check_in,
            check_out_time=check_out,
            late_minutes=late_minutes,
            early_minutes=early_minutes,
            is_holiday_work=holiday,
            applied_shift_id=shift.shift_id,
        )

    def evaluate_confirmed(
        self,
        work_date: date,
        logs: Iterable[AttendanceLog],
        shift: Shift,
        confirmed_check_in: datetime,
        confirmed_check_out: datetime,
        holidays: Iterable = (),
    ) -> DayOutcome:
        """The user accepted a rapid press: count a full scheduled day."""
        times: ScheduledTimes = build_scheduled_timestamps(shift, work_date, tzinfo=confirmed_check_in.tzinfo)
        holiday = is_holiday(work_date, holidays)

        hours = self._factory.for_confirmed_rapid_press().apportion(
            WorkedDay(
                work_date=work_date,
                scheduled=times,
                break_minutes=int(shift.break_minutes or 0),
                check_in=confirmed_check_in,
                check_out=confirmed_check_out,
                is_holiday=holiday,
            )
        )

        logger.debug("rapid press confirmed for %s (%d logs on record)", work_date, len(list(logs or ())))
        return DayOutcome(
            work_date=work_date,
            status=DayStatus.DU_CONG,
            hours=hours,
            check_in_time=confirmed_check_in,
            check_out_time=confirmed_check_out,
            is_holiday_work=holiday,
            applied_shift_id=shift.shift_id,
            notes=RAPID_PRESS_CONFIRMED_NOTE,
        )

    def classify_day(
        self,
        work_date: date,
        logs: Iterable[AttendanceLog],
        shift: Shift,
        settings: UserSettings,
        holidays: Iterable = (),
    ) -> DailyWorkStatusNew:
        return to_status_new(self.evaluate(work_date, logs, shift, settings, holidays))

    def classify_day_confirmed(
        self,
        work_date: date,
        logs: Iterable[AttendanceLog],
        shift: Shift,
        confirmed_check_in: datetime,
        confirmed_check_out: datetime,
        holidays: Iterable = (),
    ) -> DailyWorkStatusNew:
        return to_status_new(
            self.evaluate_confirmed(work_date, logs, shift, confirmed_check_in, confirmed_check_out, holidays)
        )

    @staticmethod
    def _guard_rapid_press(check_in: datetime, check_out: datetime, settings: UserSettings) -> None:
        if check_out < check_in:
            raise ValidationError("Giờ ra không thể nhỏ hơn giờ vào")

        duration = (check_out - check_in).total_seconds()
        threshold = int(settings.rapid_press_threshold_seconds)
        if duration < threshold:
            raise RapidPressDetected(
                RapidPressSignal(
                    actual_duration_seconds=int(duration),
                    threshold_seconds=threshold,
                    check_in_time=check_in,
                    check_out_time=check_out,
                )
            )


_default = AttendanceClassifier()


def classify_day(
    work_date: date,
    logs: Iterable[AttendanceLog],
    shift: Shift,
    settings: UserSettings,
    holidays: Iterable = (),
) -> DailyWorkStatusNew:
    return _default.classify_day(work_date, logs, shift, settings, holidays)


def classify_day_confirmed(
    work_date: date,
    logs: Iterable[AttendanceLog],
    shift: Shift,
    confirmed_check_in: datetime,
    confirmed_check_out: datetime,
    holidays: Optional[Iterable] = None,
) -> DailyWorkStatusNew:
    return _default.classify_day_confirmed(
        work_date, logs, shift, confirmed_check_in, confirmed_check_out, holidays or ()
    )
