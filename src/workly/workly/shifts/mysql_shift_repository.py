from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time
from .model import Shift
from .repository import ShiftRepository

_COLUMNS = """
    shift_id, name, start_time, office_end_time, end_time, departure_time,
    break_minutes, is_night_shift, work_days, show_punch
"""


def _to_shift(r: dict) -> Shift:
    work_days = tuple(int(d) for d in str(r.get("work_days") or "").split(",") if d.strip())
    return Shift(
        shift_id=str(r["shift_id"]),
        name=r["name"],
        start_time=normalize_mysql_time(r["start_time"]),
        office_end_time=normalize_mysql_time(r["office_end_time"]),
        end_time=normalize_mysql_time(r["end_time"]),
        departure_time=normalize_mysql_time(r["departure_time"]),
        break_minutes=int(r.get("break_minutes") or 0),
        is_night_shift=bool(r.get("is_night_shift")),
        work_days=work_days,
        show_punch=bool(r.get("show_punch")),
    )


class MySQLShiftRepository(ShiftRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts ORDER BY shift_id")
            return [_to_shift(r) for r in fetchall(cur)]

    def get_by_id(self, shift_id: str) -> Optional[Shift]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM shifts WHERE shift_id=%s", (shift_id,))
            r = fetchone(cur)
            return _to_shift(r) if r else None

    def save(self, shift: Shift) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO shifts (
                    shift_id, name, start_time, office_end_time, end_time, departure_time,
                    break_minutes, is_night_shift, work_days, show_punch
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name),
                    start_time=VALUES(start_time),
                    office_end_time=VALUES(office_end_time),
                    end_time=VALUES(end_time),
                    departure_time=VALUES(departure_time),
                    break_minutes=VALUES(break_minutes),
                    is_night_shift=VALUES(is_night_shift),
                    work_days=VALUES(work_days),
                    show_punch=VALUES(show_punch)
                """,
                (
                    shift.shift_id,
                    shift.name,
                    shift.start_time,
                    shift.office_end_time,
                    shift.end_time,
                    shift.departure_time,
                    shift.break_minutes,
                    int(shift.is_night_shift),
                    ",".join(str(d) for d in shift.work_days),
                    int(shift.show_punch),
                ),
            )

    def delete(self, shift_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM shifts WHERE shift_id=%s", (shift_id,))
            return cur.rowcount > 0
