from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import minutes_of_day, parse_hhmm
from ..common.validators import require_non_empty, require_non_negative, require_weekdays
from ..core.enums import ShiftChangeMode
from ..core.exceptions import NoActiveShiftError, ValidationError
from ..settings.model import RotationConfig
from ..settings.repository import SettingsRepository
from ..status.repository import DailyStatusRepository
from .model import Shift
from .repository import ShiftRepository
from .timing import is_overnight

logger = logging.getLogger(__name__)


def weekday_index(day: date) -> int:
    """0=Sunday .. 6=Saturday."""
    return day.isoweekday() % 7


def is_work_day(shift: Shift, day: date) -> bool:
    return weekday_index(day) in shift.work_days


def validate_shift_times(start: time, office_end: time, end: time) -> None:
    """start <= office_end <= end along the clock, starting at start.

    An overnight shift (end before start) must also have its office end after
    midnight: office end and shift end share the next-day anchor.
    """
    s, o, e = minutes_of_day(start), minutes_of_day(office_end), minutes_of_day(end)
    if s == e:
        raise ValidationError("Giờ bắt đầu và giờ kết thúc ca không được trùng nhau")

    if e > s:
        if not s <= o <= e:
            raise ValidationError("Giờ hết giờ hành chính phải nằm giữa giờ bắt đầu và giờ kết thúc ca")
        return

    if o > e and o >= s:
        raise ValidationError("Ca qua đêm: giờ hết giờ hành chính phải sau nửa đêm và trước giờ kết thúc ca")
    if o > e:
        raise ValidationError("Giờ hết giờ hành chính phải nằm giữa giờ bắt đầu và giờ kết thúc ca")


def _without_shift(rotation: RotationConfig, shift_id: str) -> RotationConfig:
    remaining = tuple(s for s in rotation.shift_ids if s != shift_id)
    index = min(rotation.current_index, max(len(remaining) - 1, 0))
    return replace(rotation, shift_ids=remaining, current_index=index)


class ShiftService:
    def __init__(
        self,
        shifts: ShiftRepository,
        settings: SettingsRepository,
        statuses: DailyStatusRepository | None = None,
    ):
        self._shifts = shifts
        self._settings = settings
        self._statuses = statuses

    def list_shifts(self) -> Sequence[Shift]:
        return self._shifts.list_all()

    def get_shift(self, shift_id: str) -> Shift:
        shift = self._shifts.get_by_id(shift_id)
        if not shift:
            raise ValidationError("Ca làm việc không tồn tại")
        return shift

    @staticmethod
    def build_shift(payload: dict, *, shift_id: str) -> Shift:
        name = require_non_empty(payload.get("name", ""), "Tên ca")
        start = parse_hhmm(payload.get("start_time"), "Giờ bắt đầu")
        office_end = parse_hhmm(payload.get("office_end_time") or payload.get("end_time"), "Giờ hết hành chính")
        end = parse_hhmm(payload.get("end_time"), "Giờ kết thúc")
        departure = parse_hhmm(payload.get("departure_time") or payload.get("start_time"), "Giờ khởi hành")
        break_minutes = require_non_negative(payload.get("break_minutes", 0), "Thời gian nghỉ")
        work_days = require_weekdays(payload.get("work_days", (1, 2, 3, 4, 5)))

        validate_shift_times(start, office_end, end)

        shift = Shift(
            shift_id=shift_id,
            name=name,
            start_time=start,
            office_end_time=office_end,
            end_time=end,
            departure_time=departure,
            break_minutes=break_minutes,
            work_days=work_days,
            show_punch=bool(payload.get("show_punch", False)),
        )
        # The cached flag is refreshed on every write.
        return replace(shift, is_night_shift=is_overnight(shift))

    def create_shift(self, payload: dict) -> Shift:
        shift_id = (payload.get("id") or "").strip() or f"shift_{uuid.uuid4().hex[:12]}"
        if self._shifts.get_by_id(shift_id):
            raise ValidationError("Mã ca làm việc đã tồn tại")

        shift = self.build_shift(payload, shift_id=shift_id)
        self._shifts.save(shift)
        logger.info("created shift %s (%s)", shift.shift_id, shift.name)
        return shift

    def update_shift(self, shift_id: str, payload: dict) -> Shift:
        current = self.get_shift(shift_id)
        merged = {**current.to_dict(), **(payload or {})}
        shift = self.build_shift(merged, shift_id=current.shift_id)
        self._shifts.save(shift)
        logger.info("updated shift %s", shift.shift_id)
        return shift

    def delete_shift(self, shift_id: str) -> None:
        if not self._shifts.delete(shift_id):
            raise ValidationError("Xóa ca làm việc thất bại")

        settings = self._settings.get_user_settings()
        if settings.active_shift_id == shift_id:
            settings = replace(settings, active_shift_id=None)
            logger.info("deleted shift %s was active, active shift cleared", shift_id)
        if settings.rotation and shift_id in settings.rotation.shift_ids:
            settings = replace(settings, rotation=_without_shift(settings.rotation, shift_id))
        self._settings.set_user_settings(settings)

    def set_active_shift(self, shift_id: Optional[str]) -> None:
        if shift_id is not None:
            self.get_shift(shift_id)
        settings = self._settings.get_user_settings()
        self._settings.set_user_settings(replace(settings, active_shift_id=shift_id))

    def get_active_shift(self) -> Optional[Shift]:
        shift_id = self._settings.get_user_settings().active_shift_id
        if not shift_id:
            return None
        return self._shifts.get_by_id(shift_id)

    def get_shift_for_date(self, work_date: date) -> Optional[Shift]:
        """A day's applied shift wins over the globally active one."""
        if self._statuses:
            status = self._statuses.get_daily_work_status_for_date(work_date)
            if status and status.applied_shift_id_for_day:
                shift = self._shifts.get_by_id(status.applied_shift_id_for_day)
                if shift:
                    return shift
        return self.get_active_shift()

    def require_shift_for_date(self, work_date: date) -> Shift:
        shift = self.get_shift_for_date(work_date)
        if not shift:
            raise NoActiveShiftError("Không có ca làm việc đang hoạt động")
        return shift

    def check_and_rotate(self, now: datetime) -> Optional[Shift]:
        """Advance to the next rotation shift once the rotation period has passed.

        Returns the newly active shift, or None when nothing rotated. A
        rotation that was never applied rotates right away.
        """
        settings = self._settings.get_user_settings()
        rotation = settings.rotation
        if settings.change_shift_mode != ShiftChangeMode.ROTATE or rotation is None:
            logger.debug("shift rotation disabled")
            return None
        if not rotation.shift_ids:
            logger.warning("shift rotation enabled without rotation shifts")
            return None
        if rotation.last_applied and now - rotation.last_applied < timedelta(days=rotation.frequency.days):
            return None

        next_index = (rotation.current_index + 1) % len(rotation.shift_ids)
        shift = self.get_shift(rotation.shift_ids[next_index])
        self._settings.set_user_settings(
            replace(
                settings,
                active_shift_id=shift.shift_id,
                rotation=replace(rotation, current_index=next_index, last_applied=now),
            )
        )
        logger.info("rotated active shift to %s", shift.shift_id)
        return shift
