from __future__ import annotations

from enum import Enum


class LogType(str, Enum):
    """Loại log chấm công, theo thứ tự tiến trình trong một ngày."""

    GO_WORK = "go_work"
    CHECK_IN = "check_in"
    PUNCH = "punch"
    CHECK_OUT = "check_out"
    COMPLETE = "complete"


class ButtonMode(str, Enum):
    FULL = "full"
    SIMPLE = "simple"


class ButtonState(str, Enum):
    """Trạng thái của nút chấm công đa năng."""

    GO_WORK = "go_work"
    AWAITING_CHECK_IN = "awaiting_check_in"
    CHECK_IN = "check_in"
    WORKING = "working"
    CHECK_OUT = "check_out"
    AWAITING_COMPLETE = "awaiting_complete"
    COMPLETED_DAY = "completed_day"


class DayStatus(str, Enum):
    """Trạng thái ngày tính từ log chấm công (mô hình mới)."""

    DU_CONG = "DU_CONG"
    DI_MUON = "DI_MUON"
    VE_SOM = "VE_SOM"
    DI_MUON_VE_SOM = "DI_MUON_VE_SOM"
    CHUA_DI = "CHUA_DI"
    DA_DI_CHUA_VAO = "DA_DI_CHUA_VAO"
    CHUA_RA = "CHUA_RA"

    @property
    def is_worked(self) -> bool:
        return self in WORKED_STATUSES


WORKED_STATUSES = frozenset(
    {DayStatus.DU_CONG, DayStatus.DI_MUON, DayStatus.VE_SOM, DayStatus.DI_MUON_VE_SOM}
)


class LegacyStatus(str, Enum):
    """Trạng thái lưu trong bản ghi DailyWorkStatus (mô hình cũ)."""

    # automatic
    COMPLETED = "completed"
    LATE = "late"
    EARLY = "early"
    ABSENT = "absent"
    PENDING = "pending"
    DAY_OFF = "day_off"

    # manual
    MANUAL_PRESENT = "manual_present"
    MANUAL_ABSENT = "manual_absent"
    MANUAL_HOLIDAY = "manual_holiday"
    MANUAL_COMPLETED = "manual_completed"
    MANUAL_REVIEW = "manual_review"

    # extended manual-leave vocabulary
    NGHI_PHEP = "NGHI_PHEP"
    NGHI_BENH = "NGHI_BENH"
    NGHI_LE = "NGHI_LE"
    VANG_MAT = "VANG_MAT"
    CONG_TAC = "CONG_TAC"
    DU_CONG = "DU_CONG"
    RV = "RV"

    # transitional labels, mirror DayStatus
    DI_MUON = "DI_MUON"
    VE_SOM = "VE_SOM"
    DI_MUON_VE_SOM = "DI_MUON_VE_SOM"
    CHUA_DI = "CHUA_DI"
    DA_DI_CHUA_VAO = "DA_DI_CHUA_VAO"
    CHUA_RA = "CHUA_RA"

    # control labels
    TINH_THEO_CHAM_CONG = "TINH_THEO_CHAM_CONG"
    THIEU_LOG = "THIEU_LOG"
    XOA_TRANG_THAI_THU_CONG = "XOA_TRANG_THAI_THU_CONG"


# Labels that trigger a recalculation instead of being stored.
RECALCULATE_LABELS = frozenset({LegacyStatus.TINH_THEO_CHAM_CONG, LegacyStatus.XOA_TRANG_THAI_THU_CONG})


class TimeEditReason(str, Enum):
    ORDER = "ORDER"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    OUTSIDE_SHIFT = "OUTSIDE_SHIFT"


class HolidayType(str, Enum):
    NATIONAL = "national"
    REGIONAL = "regional"


class ShiftChangeMode(str, Enum):
    ASK_WEEKLY = "ask_weekly"
    ROTATE = "rotate"
    DISABLED = "disabled"


class RotationFrequency(str, Enum):
    WEEKLY = "weekly"
    BIWEEKLY = "biweekly"
    TRIWEEKLY = "triweekly"
    MONTHLY = "monthly"

    @property
    def days(self) -> int:
        return ROTATION_PERIOD_DAYS[self]


ROTATION_PERIOD_DAYS = {
    RotationFrequency.WEEKLY: 7,
    RotationFrequency.BIWEEKLY: 14,
    RotationFrequency.TRIWEEKLY: 21,
    RotationFrequency.MONTHLY: 30,
}
