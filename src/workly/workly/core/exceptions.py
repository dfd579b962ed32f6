from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .enums import TimeEditReason


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NoActiveShiftError(DomainError):
    """Raised when an operation needs a shift and none is available."""


class TimeEditError(ValidationError):
    """Raised when a manual check-in/check-out edit is rejected."""

    def __init__(self, reason: TimeEditReason, message: str):
        super().__init__(message)
        self.reason = reason


@dataclass(frozen=True)
class RapidPressSignal:
    actual_duration_seconds: int
    threshold_seconds: int
    check_in_time: datetime
    check_out_time: datetime

    def to_dict(self) -> dict:
        return {
            "actual_duration_seconds": self.actual_duration_seconds,
            "threshold_seconds": self.threshold_seconds,
            "check_in_time": self.check_in_time.isoformat(),
            "check_out_time": self.check_out_time.isoformat(),
        }


class RapidPressDetected(Exception):
    """Check-in and check-out too close together: the user must confirm.

    Not a DomainError: callers must tell it apart from real failures.
    """

    def __init__(self, signal: RapidPressSignal):
        super().__init__(
            f"Bấm nhanh: {signal.actual_duration_seconds}s < {signal.threshold_seconds}s"
        )
        self.signal = signal
