from datetime import date, time

import pytest

from src.workly.workly.core.enums import LegacyStatus
from src.workly.workly.core.exceptions import NoActiveShiftError, ValidationError
from src.workly.workly.shifts.service import ShiftService, is_work_day, weekday_index
from src.workly.workly.status.model import DailyWorkStatus
from src.workly.workly.storage.memory import InMemoryStore


def _service():
    store = InMemoryStore()
    return store, ShiftService(store, store, store)


def _payload(**overrides):
    payload = {
        "name": "Ca hành chính",
        "start_time": "08:00",
        "office_end_time": "17:00",
        "end_time": "17:00",
        "departure_time": "07:30",
        "break_minutes": 60,
        "work_days": [1, 2, 3, 4, 5],
    }
    payload.update(overrides)
    return payload


def test_create_shift_generates_id_and_parses_times():
    store, service = _service()

    shift = service.create_shift(_payload())

    assert shift.shift_id.startswith("shift_")
    assert shift.start_time == time(8, 0)
    assert shift.break_minutes == 60
    assert shift.is_night_shift is False
    assert store.get_by_id(shift.shift_id) == shift


def test_create_overnight_shift_sets_night_flag():
    _, service = _service()

    shift = service.create_shift(_payload(start_time="22:00", office_end_time="06:00", end_time="06:00"))

    assert shift.is_night_shift is True


def test_create_shift_rejects_duplicate_id():
    _, service = _service()
    service.create_shift(_payload(id="day"))

    with pytest.raises(ValidationError):
        service.create_shift(_payload(id="day"))


@pytest.mark.parametrize(
    "overrides",
    [
        {"end_time": "08:00", "office_end_time": "08:00"},
        {"office_end_time": "18:00"},
        {"start_time": "22:00", "office_end_time": "23:00", "end_time": "06:00"},
        {"break_minutes": -5},
        {"work_days": [1, 7]},
        {"start_time": "8h"},
        {"name": "  "},
    ],
)
def test_invalid_shift_payload_is_rejected(overrides):
    _, service = _service()

    with pytest.raises(ValidationError):
        service.create_shift(_payload(**overrides))


def test_office_end_defaults_to_end_time():
    _, service = _service()
    payload = _payload(end_time="18:00")
    del payload["office_end_time"]

    shift = service.create_shift(payload)

    assert shift.office_end_time == time(18, 0)


def test_update_shift_recomputes_night_flag():
    _, service = _service()
    shift = service.create_shift(_payload(id="s"))

    updated = service.update_shift("s", {"start_time": "22:00", "office_end_time": "06:00", "end_time": "06:00"})

    assert updated.is_night_shift is True
    assert updated.name == shift.name


def test_delete_active_shift_clears_pointer():
    store, service = _service()
    service.create_shift(_payload(id="s"))
    service.set_active_shift("s")

    service.delete_shift("s")

    assert store.get_user_settings().active_shift_id is None
    assert service.get_active_shift() is None


def test_delete_unknown_shift_fails():
    _, service = _service()

    with pytest.raises(ValidationError):
        service.delete_shift("missing")


def test_set_active_shift_requires_existing_shift():
    _, service = _service()

    with pytest.raises(ValidationError):
        service.set_active_shift("missing")


def test_applied_shift_for_day_wins_over_active_shift():
    store, service = _service()
    service.create_shift(_payload(id="day"))
    service.create_shift(_payload(id="night", start_time="22:00", office_end_time="06:00", end_time="06:00"))
    service.set_active_shift("day")
    store.set_daily_work_status_for_date(
        date(2025, 1, 7),
        DailyWorkStatus(status=LegacyStatus.PENDING, applied_shift_id_for_day="night"),
    )

    assert service.get_shift_for_date(date(2025, 1, 6)).shift_id == "day"
    assert service.get_shift_for_date(date(2025, 1, 7)).shift_id == "night"


def test_require_shift_for_date_without_active_shift():
    _, service = _service()

    with pytest.raises(NoActiveShiftError):
        service.require_shift_for_date(date(2025, 1, 6))


def test_work_day_uses_sunday_zero_indexing():
    _, service = _service()
    shift = service.create_shift(_payload())

    assert weekday_index(date(2025, 1, 5)) == 0  # Sunday
    assert weekday_index(date(2025, 1, 11)) == 6  # Saturday
    assert is_work_day(shift, date(2025, 1, 6)) is True
    assert is_work_day(shift, date(2025, 1, 5)) is False
    assert shift.days_applied == ("Mon", "Tue", "Wed", "Thu", "Fri")
