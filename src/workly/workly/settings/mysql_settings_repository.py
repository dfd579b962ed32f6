from __future__ import annotations

from typing import Sequence

from ..core.enums import ButtonMode, HolidayType, RotationFrequency, ShiftChangeMode
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, instant_from_db, instant_to_db
from .model import PublicHoliday, RotationConfig, UserSettings
from .repository import SettingsRepository

# Single-user app: one settings row.
_SETTINGS_ID = 1

_SETTINGS_COLUMNS = """
    late_threshold_minutes, rapid_press_threshold_seconds, multi_button_mode, active_shift_id,
    change_shift_mode, rotation_shift_ids, rotation_frequency, rotation_last_applied, rotation_index
"""


def _rotation_from_row(r: dict) -> RotationConfig | None:
    if not r.get("rotation_frequency"):
        return None
    return RotationConfig(
        shift_ids=tuple(s for s in str(r.get("rotation_shift_ids") or "").split(",") if s.strip()),
        frequency=RotationFrequency(r["rotation_frequency"]),
        last_applied=instant_from_db(r.get("rotation_last_applied")),
        current_index=int(r.get("rotation_index") or 0),
    )


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_user_settings(self) -> UserSettings:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SETTINGS_COLUMNS} FROM user_settings WHERE settings_id=%s", (_SETTINGS_ID,))
            r = fetchone(cur)
            if not r:
                return UserSettings()
            return UserSettings(
                late_threshold_minutes=int(r["late_threshold_minutes"]),
                rapid_press_threshold_seconds=int(r["rapid_press_threshold_seconds"]),
                multi_button_mode=ButtonMode(r["multi_button_mode"]),
                active_shift_id=r.get("active_shift_id"),
                change_shift_mode=ShiftChangeMode(r.get("change_shift_mode") or ShiftChangeMode.DISABLED.value),
                rotation=_rotation_from_row(r),
            )

    def set_user_settings(self, settings: UserSettings) -> None:
        rotation = settings.rotation
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO user_settings (settings_id, {_SETTINGS_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    late_threshold_minutes=VALUES(late_threshold_minutes),
                    rapid_press_threshold_seconds=VALUES(rapid_press_threshold_seconds),
                    multi_button_mode=VALUES(multi_button_mode),
                    active_shift_id=VALUES(active_shift_id),
                    change_shift_mode=VALUES(change_shift_mode),
                    rotation_shift_ids=VALUES(rotation_shift_ids),
                    rotation_frequency=VALUES(rotation_frequency),
                    rotation_last_applied=VALUES(rotation_last_applied),
                    rotation_index=VALUES(rotation_index)
                """,
                (
                    _SETTINGS_ID,
                    settings.late_threshold_minutes,
                    settings.rapid_press_threshold_seconds,
                    settings.multi_button_mode.value,
                    settings.active_shift_id,
                    settings.change_shift_mode.value,
                    ",".join(rotation.shift_ids) if rotation else None,
                    rotation.frequency.value if rotation else None,
                    instant_to_db(rotation.last_applied) if rotation else None,
                    rotation.current_index if rotation else 0,
                ),
            )

    def get_public_holidays(self) -> Sequence[PublicHoliday]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT holiday_date, name, holiday_type FROM public_holidays ORDER BY holiday_date")
            return [
                PublicHoliday(date=r["holiday_date"], name=r["name"], type=HolidayType(r["holiday_type"]))
                for r in fetchall(cur)
            ]

    def set_public_holidays(self, holidays: Sequence[PublicHoliday]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM public_holidays")
            for h in holidays:
                cur.execute(
                    "INSERT INTO public_holidays (holiday_date, name, holiday_type) VALUES (%s, %s, %s)",
                    (h.date, h.name, h.type.value),
                )
