from datetime import datetime

import pytest

from src.workly.workly.core.enums import RotationFrequency, ShiftChangeMode
from src.workly.workly.core.exceptions import ValidationError
from src.workly.workly.settings.model import RotationConfig, UserSettings
from src.workly.workly.shifts.service import ShiftService
from src.workly.workly.storage.memory import InMemoryStore


def _payload(**overrides):
    payload = {
        "name": "Ca",
        "start_time": "08:00",
        "office_end_time": "17:00",
        "end_time": "17:00",
        "departure_time": "07:30",
    }
    payload.update(overrides)
    return payload


def _rotating_service(*, last_applied=None, current_index=0, frequency=RotationFrequency.WEEKLY):
    store = InMemoryStore()
    service = ShiftService(store, store, store)
    for shift_id in ("morning", "afternoon", "night"):
        service.create_shift(_payload(id=shift_id, name=shift_id))
    store.set_user_settings(
        UserSettings(
            active_shift_id="morning",
            change_shift_mode=ShiftChangeMode.ROTATE,
            rotation=RotationConfig(
                shift_ids=("morning", "afternoon", "night"),
                frequency=frequency,
                last_applied=last_applied,
                current_index=current_index,
            ),
        )
    )
    return store, service


def test_first_rotation_applies_immediately():
    store, service = _rotating_service()
    now = datetime(2025, 1, 6, 6, 0)

    shift = service.check_and_rotate(now)

    assert shift.shift_id == "afternoon"
    settings = store.get_user_settings()
    assert settings.active_shift_id == "afternoon"
    assert settings.rotation.current_index == 1
    assert settings.rotation.last_applied == now


def test_rotation_waits_for_the_period():
    store, service = _rotating_service(last_applied=datetime(2025, 1, 6, 6, 0))

    assert service.check_and_rotate(datetime(2025, 1, 13, 5, 59)) is None
    assert store.get_user_settings().active_shift_id == "morning"

    assert service.check_and_rotate(datetime(2025, 1, 13, 6, 0)).shift_id == "afternoon"


def test_rotation_wraps_around():
    store, service = _rotating_service(last_applied=datetime(2025, 1, 1), current_index=2)

    shift = service.check_and_rotate(datetime(2025, 2, 1))

    assert shift.shift_id == "morning"
    assert store.get_user_settings().rotation.current_index == 0


@pytest.mark.parametrize(
    "frequency, days",
    [
        (RotationFrequency.WEEKLY, 7),
        (RotationFrequency.BIWEEKLY, 14),
        (RotationFrequency.TRIWEEKLY, 21),
        (RotationFrequency.MONTHLY, 30),
    ],
)
def test_rotation_period_per_frequency(frequency, days):
    _, service = _rotating_service(last_applied=datetime(2025, 1, 1), frequency=frequency)

    assert frequency.days == days
    assert service.check_and_rotate(datetime(2025, 1, days)) is None
    assert service.check_and_rotate(datetime(2025, 1, 1 + days)) is not None


def test_rotation_disabled_mode_does_nothing():
    store, service = _rotating_service()
    store.set_user_settings(UserSettings(active_shift_id="morning"))

    assert service.check_and_rotate(datetime(2025, 1, 6)) is None
    assert store.get_user_settings().active_shift_id == "morning"


def test_deleting_a_rotation_shift_drops_it_from_rotation():
    store, service = _rotating_service(current_index=2)

    service.delete_shift("night")

    rotation = store.get_user_settings().rotation
    assert rotation.shift_ids == ("morning", "afternoon")
    assert rotation.current_index == 1


def test_rotation_to_missing_shift_fails():
    store, service = _rotating_service()
    store.delete("afternoon")

    with pytest.raises(ValidationError):
        service.check_and_rotate(datetime(2025, 1, 6))
