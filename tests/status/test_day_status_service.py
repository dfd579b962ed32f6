from datetime import date, datetime, time

import pytest

from src.workly.workly.attendance.model import AttendanceLog
from src.workly.workly.core.enums import LegacyStatus, LogType
from src.workly.workly.core.exceptions import NoActiveShiftError
from src.workly.workly.settings.model import UserSettings
from src.workly.workly.shifts.model import Shift
from src.workly.workly.shifts.service import ShiftService
from src.workly.workly.status.service import DayStatusService
from src.workly.workly.storage.memory import InMemoryStore

MONDAY = date(2025, 1, 6)

SHIFT = Shift(
    shift_id="day",
    name="Hành chính",
    start_time=time(8, 0),
    office_end_time=time(17, 0),
    end_time=time(17, 0),
    departure_time=time(7, 30),
    break_minutes=60,
)


def at(hour, minute=0):
    return datetime(2025, 1, 6, hour, minute)


def _service(*, with_shift=True):
    store = InMemoryStore()
    if with_shift:
        store.save(SHIFT)
        store.set_user_settings(UserSettings(active_shift_id="day"))
    service = DayStatusService(store, store, store, ShiftService(store, store, store))
    return store, service


def _log_full_day(store):
    store.set_attendance_logs_for_date(
        MONDAY,
        [
            AttendanceLog(type=LogType.CHECK_IN, time=at(8, 0)),
            AttendanceLog(type=LogType.CHECK_OUT, time=at(17, 0)),
        ],
    )


def test_manual_status_is_stored_and_logs_kept():
    store, service = _service()
    _log_full_day(store)

    record = service.set_manual_status(MONDAY, "CONG_TAC")

    assert store.get_daily_work_status_for_date(MONDAY) == record
    assert record.is_manual_override is True
    assert record.total_hours_scheduled == 0.0
    assert len(store.get_attendance_logs_for_date(MONDAY)) == 2


@pytest.mark.parametrize("label", ["TINH_THEO_CHAM_CONG", "XOA_TRANG_THAI_THU_CONG"])
def test_control_labels_recalculate_from_logs(label):
    store, service = _service()
    _log_full_day(store)
    service.set_manual_status(MONDAY, LegacyStatus.NGHI_BENH)

    record = service.set_manual_status(MONDAY, label)

    assert record.status == LegacyStatus.DU_CONG
    assert record.is_manual_override is False
    assert record.total_hours_scheduled == 8.0
    assert service.get_status(MONDAY) == record


def test_manual_status_works_without_shift():
    _, service = _service(with_shift=False)

    record = service.set_manual_status(MONDAY, "NGHI_PHEP")

    assert record.applied_shift_id_for_day is None


def test_recalculate_without_shift_fails():
    _, service = _service(with_shift=False)

    with pytest.raises(NoActiveShiftError):
        service.recalculate_from_logs(MONDAY)


def test_update_attendance_time_replaces_logs():
    store, service = _service()
    _log_full_day(store)
    store.add_attendance_log(MONDAY, AttendanceLog(type=LogType.GO_WORK, time=at(7, 40)))

    record = service.update_attendance_time(MONDAY, at(9, 0), at(17, 0))

    logs = store.get_attendance_logs_for_date(MONDAY)
    assert [(log.type, log.time) for log in logs] == [(LogType.CHECK_IN, at(9, 0)), (LogType.CHECK_OUT, at(17, 0))]
    assert record.status == LegacyStatus.DI_MUON
    assert record.late_minutes == 60


def test_reset_day_clears_everything():
    store, service = _service()
    _log_full_day(store)
    service.recalculate_from_logs(MONDAY)

    service.reset_day(MONDAY)

    assert store.get_attendance_logs_for_date(MONDAY) == []
    assert service.get_status(MONDAY) is None
