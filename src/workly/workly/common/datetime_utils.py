from __future__ import annotations

from datetime import date, datetime, time

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        raise ValidationError(f"Ngày không hợp lệ (YYYY-MM-DD): {value!r}")


def parse_hhmm(value: str, field_name: str = "Giờ") -> time:
    """Parse an "HH:MM" wall-clock string."""
    try:
        return datetime.strptime((value or "").strip(), "%H:%M").time()
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} không hợp lệ (HH:MM): {value!r}")


def parse_instant(value: str) -> datetime:
    """Parse an ISO-8601 timestamp; a trailing 'Z' is accepted."""
    v = (value or "").strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(v)
    except ValueError:
        raise ValidationError(f"Thời điểm không hợp lệ (ISO-8601): {value!r}")


def format_hhmm(value: time) -> str:
    return value.strftime("%H:%M")


def minutes_of_day(value: time) -> int:
    return value.hour * 60 + value.minute


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def align_awareness(reference: datetime, value: datetime) -> datetime:
    """`reference` converted so it compares with `value`; naive means local time."""
    if (reference.tzinfo is None) == (value.tzinfo is None):
        return reference
    if reference.tzinfo is None:
        return reference.astimezone()
    return reference.astimezone().replace(tzinfo=None)
