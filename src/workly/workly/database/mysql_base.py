from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, time, timedelta
from typing import Any, Dict, List, Optional

from ..common.datetime_utils import parse_instant
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Short-lived connection + cursor; commit on success, rollback on error."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        logger.exception("database operation failed, rolling back")
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    return list(cur.fetchall() or [])


def instant_to_db(value: Optional[datetime]) -> Optional[str]:
    """Instants go to VARCHAR columns as ISO-8601 so the UTC offset is kept."""
    return value.isoformat() if value else None


def instant_from_db(value: Any) -> Optional[datetime]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    return parse_instant(str(value))


def normalize_mysql_time(value: Any) -> Optional[time]:
    """Normalize MySQL TIME values.

    mysql-connector may hand back datetime.time, datetime.timedelta
    (TIME is a duration in MySQL) or an 'HH:MM[:SS]' string.
    """

    if value is None:
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        # Shift times are wall-clock: wrap anything outside 00:00..23:59.
        total = int(value.total_seconds()) % 86400
        return time(total // 3600, (total % 3600) // 60, total % 60)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        return time(int(parts[0]), int(parts[1]), int(parts[2]) if len(parts) >= 3 and parts[2] else 0)

    raise TypeError(f"Unsupported MySQL TIME value type: {type(value)!r}")
