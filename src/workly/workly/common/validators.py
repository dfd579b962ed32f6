from __future__ import annotations

from typing import Iterable

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} không hợp lệ")
    return value.strip()


def require_non_negative(value: int, field_name: str) -> int:
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} phải là số nguyên")
    if number < 0:
        raise ValidationError(f"{field_name} không được âm")
    return number


def require_weekdays(values: Iterable[int], field_name: str = "Ngày làm việc") -> tuple[int, ...]:
    days = []
    for v in values or ():
        try:
            day = int(v)
        except (TypeError, ValueError):
            raise ValidationError(f"{field_name} không hợp lệ: {v!r}")
        if not 0 <= day <= 6:
            raise ValidationError(f"{field_name} phải trong khoảng 0..6")
        if day not in days:
            days.append(day)
    return tuple(sorted(days))


def require_max_length(value: str, max_length: int, field_name: str) -> str:
    value = require_non_empty(value, field_name)
    if len(value) > max_length:
        raise ValidationError(f"{field_name} không được vượt quá {max_length} ký tự")
    return value


def require_choice(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"{field_name} không hợp lệ: {value!r}")
