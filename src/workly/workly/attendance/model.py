from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import parse_instant
from ..core.enums import LogType
from ..core.exceptions import ValidationError


@dataclass(frozen=True)
class AttendanceLog:
    """Thực thể miền (domain): Một lần bấm chấm công."""

    type: LogType
    time: datetime

    @classmethod
    def from_dict(cls, raw: dict) -> "AttendanceLog":
        try:
            log_type = LogType(raw["type"])
        except (KeyError, ValueError):
            raise ValidationError(f"Loại log không hợp lệ: {raw.get('type')!r}")
        value = raw.get("time")
        when = value if isinstance(value, datetime) else parse_instant(value)
        return cls(type=log_type, time=when)

    def to_dict(self) -> dict:
        return {"type": self.type.value, "time": self.time.isoformat()}


@dataclass(frozen=True)
class DayLogs:
    """Read-model: the first log of each type for one day."""

    go_work: Optional[AttendanceLog] = None
    check_in: Optional[AttendanceLog] = None
    punch: Optional[AttendanceLog] = None
    check_out: Optional[AttendanceLog] = None
    complete: Optional[AttendanceLog] = None

    @classmethod
    def from_logs(cls, logs: Iterable[AttendanceLog]) -> "DayLogs":
        found: dict[str, AttendanceLog] = {}
        for log in logs or ():
            found.setdefault(log.type.value, log)
        return cls(**found)

    @property
    def check_in_time(self) -> Optional[datetime]:
        return self.check_in.time if self.check_in else None

    @property
    def check_out_time(self) -> Optional[datetime]:
        return self.check_out.time if self.check_out else None

    def reference_tz(self):
        """tzinfo of the first available log, used to anchor scheduled instants."""
        for log in (self.go_work, self.check_in, self.punch, self.check_out, self.complete):
            if log is not None:
                return log.time.tzinfo
        return None
