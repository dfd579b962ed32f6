from __future__ import annotations

from datetime import date
from typing import Protocol, Sequence

from .model import AttendanceLog


class AttendanceLogRepository(Protocol):
    def get_attendance_logs_for_date(self, work_date: date) -> Sequence[AttendanceLog]:
        raise NotImplementedError

    def set_attendance_logs_for_date(self, work_date: date, logs: Sequence[AttendanceLog]) -> None:
        raise NotImplementedError

    def add_attendance_log(self, work_date: date, log: AttendanceLog) -> None:
        raise NotImplementedError

    def clear_attendance_logs_for_date(self, work_date: date) -> None:
        raise NotImplementedError
