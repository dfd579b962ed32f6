from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional, Sequence

from ..common.datetime_utils import parse_instant, parse_iso_date
from ..common.validators import require_choice, require_non_empty, require_non_negative
from ..core.enums import ButtonMode, HolidayType, RotationFrequency, ShiftChangeMode
from ..core.exceptions import ValidationError
from ..shifts.repository import ShiftRepository
from .model import PublicHoliday, RotationConfig, UserSettings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Reads and writes the user settings row and the holiday list.

    `active_shift_id` is owned by the shift service and is not writable here.
    """

    def __init__(self, settings: SettingsRepository, shifts: Optional[ShiftRepository] = None):
        self._settings = settings
        self._shifts = shifts

    def get_settings(self) -> UserSettings:
        return self._settings.get_user_settings()

    def update_settings(self, payload: dict) -> UserSettings:
        payload = payload or {}
        current = self._settings.get_user_settings()
        changes = {}

        if "late_threshold_minutes" in payload:
            changes["late_threshold_minutes"] = require_non_negative(
                payload["late_threshold_minutes"], "Ngưỡng đi muộn"
            )
        if "rapid_press_threshold_seconds" in payload:
            changes["rapid_press_threshold_seconds"] = require_non_negative(
                payload["rapid_press_threshold_seconds"], "Ngưỡng bấm nhanh"
            )
        if "multi_button_mode" in payload:
            changes["multi_button_mode"] = require_choice(ButtonMode, payload["multi_button_mode"], "Chế độ nút")
        if "change_shift_mode" in payload:
            changes["change_shift_mode"] = require_choice(
                ShiftChangeMode, payload["change_shift_mode"], "Chế độ đổi ca"
            )
        if "rotation" in payload:
            changes["rotation"] = self._build_rotation(payload["rotation"], current.rotation)

        updated = replace(current, **changes)
        if updated.change_shift_mode == ShiftChangeMode.ROTATE and not (updated.rotation and updated.rotation.shift_ids):
            raise ValidationError("Chế độ xoay ca cần ít nhất một ca trong danh sách xoay vòng")

        self._settings.set_user_settings(updated)
        logger.info("settings updated: %s", ", ".join(sorted(changes)) or "no changes")
        return updated

    def _build_rotation(self, raw: Optional[dict], current: Optional[RotationConfig]) -> Optional[RotationConfig]:
        if raw is None:
            return None
        if not isinstance(raw, dict):
            raise ValidationError("Cấu hình xoay ca không hợp lệ")

        base = current.to_dict() if current else {}
        merged = {**base, **raw}

        shift_ids = tuple(require_non_empty(str(s), "Mã ca xoay vòng") for s in merged.get("shift_ids") or ())
        if self._shifts is not None:
            for shift_id in shift_ids:
                if not self._shifts.get_by_id(shift_id):
                    raise ValidationError(f"Ca xoay vòng không tồn tại: {shift_id}")

        index = require_non_negative(merged.get("current_index", 0), "Vị trí ca xoay vòng")
        if shift_ids and index >= len(shift_ids):
            raise ValidationError("Vị trí ca xoay vòng vượt quá danh sách ca")

        last_applied = merged.get("last_applied")
        return RotationConfig(
            shift_ids=shift_ids,
            frequency=require_choice(
                RotationFrequency, merged.get("frequency", RotationFrequency.WEEKLY.value), "Tần suất xoay ca"
            ),
            last_applied=parse_instant(last_applied) if last_applied else None,
            current_index=index,
        )

    def get_holidays(self) -> Sequence[PublicHoliday]:
        return sorted(self._settings.get_public_holidays(), key=lambda h: h.date)

    def set_holidays(self, items: Iterable[dict]) -> Sequence[PublicHoliday]:
        """Replace the whole holiday list; dates must be unique."""
        holidays = []
        seen = set()
        for item in items or ():
            if not isinstance(item, dict):
                raise ValidationError("Ngày lễ không hợp lệ")
            day = parse_iso_date(item.get("date"))
            if day in seen:
                raise ValidationError(f"Ngày lễ bị trùng: {day.isoformat()}")
            seen.add(day)
            holidays.append(
                PublicHoliday(
                    date=day,
                    name=require_non_empty(item.get("name", ""), "Tên ngày lễ"),
                    type=require_choice(HolidayType, item.get("type", HolidayType.NATIONAL.value), "Loại ngày lễ"),
                )
            )

        holidays.sort(key=lambda h: h.date)
        self._settings.set_public_holidays(holidays)
        logger.info("public holidays replaced (%d entries)", len(holidays))
        return holidays
