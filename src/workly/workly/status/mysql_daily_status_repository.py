from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.enums import LegacyStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, instant_from_db, instant_to_db
from .model import DailyWorkStatus
from .repository import DailyStatusRepository

_COLUMNS = """
    work_date, status, applied_shift_id, vao_log_time, ra_log_time,
    standard_hours, ot_hours, sunday_hours, night_hours, total_hours,
    late_minutes, early_minutes, is_holiday_work, is_manual_override, notes
"""


def _to_status(r: dict) -> DailyWorkStatus:
    return DailyWorkStatus(
        status=LegacyStatus(r["status"]),
        applied_shift_id_for_day=r.get("applied_shift_id"),
        vao_log_time=instant_from_db(r.get("vao_log_time")),
        ra_log_time=instant_from_db(r.get("ra_log_time")),
        standard_hours_scheduled=float(r.get("standard_hours") or 0),
        ot_hours_scheduled=float(r.get("ot_hours") or 0),
        sunday_hours_scheduled=float(r.get("sunday_hours") or 0),
        night_hours_scheduled=float(r.get("night_hours") or 0),
        total_hours_scheduled=float(r.get("total_hours") or 0),
        late_minutes=int(r.get("late_minutes") or 0),
        early_minutes=int(r.get("early_minutes") or 0),
        is_holiday_work=bool(r.get("is_holiday_work")),
        is_manual_override=bool(r.get("is_manual_override")),
        notes=r.get("notes") or "",
    )


class MySQLDailyStatusRepository(DailyStatusRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_daily_work_status_for_date(self, work_date: date) -> Optional[DailyWorkStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM daily_work_status WHERE work_date=%s", (work_date,))
            r = fetchone(cur)
            return _to_status(r) if r else None

    def set_daily_work_status_for_date(self, work_date: date, status: DailyWorkStatus) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                REPLACE INTO daily_work_status (
                    work_date, status, applied_shift_id, vao_log_time, ra_log_time,
                    standard_hours, ot_hours, sunday_hours, night_hours, total_hours,
                    late_minutes, early_minutes, is_holiday_work, is_manual_override, notes
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                """,
                (
                    work_date,
                    status.status.value,
                    status.applied_shift_id_for_day,
                    instant_to_db(status.vao_log_time),
                    instant_to_db(status.ra_log_time),
                    status.standard_hours_scheduled,
                    status.ot_hours_scheduled,
                    status.sunday_hours_scheduled,
                    status.night_hours_scheduled,
                    status.total_hours_scheduled,
                    status.late_minutes,
                    status.early_minutes,
                    int(status.is_holiday_work),
                    int(status.is_manual_override),
                    status.notes or None,
                ),
            )

    def delete_daily_work_status_for_date(self, work_date: date) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM daily_work_status WHERE work_date=%s", (work_date,))
            return cur.rowcount > 0

    def list_range(self, *, start: date, end: date) -> dict[date, DailyWorkStatus]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM daily_work_status
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date
                """,
                (start, end),
            )
            return {r["work_date"]: _to_status(r) for r in fetchall(cur)}
