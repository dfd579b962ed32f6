from __future__ import annotations

from datetime import date
from typing import Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, instant_from_db, instant_to_db
from .model import AttendanceLog
from .repository import AttendanceLogRepository


class MySQLAttendanceLogRepository(AttendanceLogRepository):
    """Logs are kept as ISO-8601 text so the UTC offset of each press survives."""

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_attendance_logs_for_date(self, work_date: date) -> Sequence[AttendanceLog]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_type, log_time
                FROM attendance_logs
                WHERE work_date=%s
                ORDER BY log_id
                """,
                (work_date,),
            )
            return [
                AttendanceLog.from_dict({"type": r["log_type"], "time": instant_from_db(r["log_time"])})
                for r in fetchall(cur)
            ]

    def set_attendance_logs_for_date(self, work_date: date, logs: Sequence[AttendanceLog]) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_logs WHERE work_date=%s", (work_date,))
            for log in logs:
                cur.execute(
                    "INSERT INTO attendance_logs (work_date, log_type, log_time) VALUES (%s, %s, %s)",
                    (work_date, log.type.value, instant_to_db(log.time)),
                )

    def add_attendance_log(self, work_date: date, log: AttendanceLog) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO attendance_logs (work_date, log_type, log_time) VALUES (%s, %s, %s)",
                (work_date, log.type.value, instant_to_db(log.time)),
            )

    def clear_attendance_logs_for_date(self, work_date: date) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM attendance_logs WHERE work_date=%s", (work_date,))
