from datetime import datetime, time, timedelta

import pytest

from src.workly.workly.core.exceptions import ValidationError
from src.workly.workly.notes.service import NoteService
from src.workly.workly.shifts.model import Shift
from src.workly.workly.storage.memory import InMemoryStore

NOW = datetime(2025, 1, 6, 9, 0)


class Clock:
    def __init__(self, now):
        self.now = now

    def __call__(self):
        return self.now


def _service():
    store = InMemoryStore()
    store.save(
        Shift(
            shift_id="day",
            name="Hành chính",
            start_time=time(8, 0),
            office_end_time=time(17, 0),
            end_time=time(17, 0),
            departure_time=time(7, 30),
        )
    )
    clock = Clock(NOW)
    return store, clock, NoteService(store, shifts=store, clock=clock)


def test_create_note_trims_and_stamps():
    store, _, service = _service()

    note = service.create_note({"title": "  Mang thẻ  ", "content": "Thẻ ra vào tòa nhà"})

    assert note.note_id.startswith("note_")
    assert note.title == "Mang thẻ"
    assert note.created_at == note.updated_at == NOW
    assert note.reminder_at is None
    assert store.get_note(note.note_id) == note


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "", "content": "x"},
        {"title": "x", "content": "   "},
        {"title": "x" * 101, "content": "x"},
        {"title": "x", "content": "x" * 301},
        {"title": "x", "content": "y", "reminder_at": "2025-01-06T08:00:00"},
        {"title": "x", "content": "y", "reminder_at": "tomorrow"},
        {"title": "x", "content": "y", "associated_shift_ids": ["ghost"]},
    ],
)
def test_invalid_note_is_rejected(payload):
    store, _, service = _service()

    with pytest.raises(ValidationError):
        service.create_note(payload)

    assert store.list_notes() == []


def test_duplicate_title_and_content_is_rejected():
    _, _, service = _service()
    service.create_note({"title": "Họp", "content": "Họp giao ban"})

    with pytest.raises(ValidationError):
        service.create_note({"title": "họp ", "content": "Họp giao ban"})


def test_update_merges_and_keeps_created_at():
    _, clock, service = _service()
    note = service.create_note({"title": "Họp", "content": "Họp giao ban", "reminder_at": "2025-01-06T10:00:00"})

    clock.now = NOW + timedelta(hours=2)
    updated = service.update_note(note.note_id, {"is_priority": True})

    assert updated.title == "Họp"
    assert updated.is_priority is True
    assert updated.reminder_at == datetime(2025, 1, 6, 10, 0)
    assert updated.created_at == NOW
    assert updated.updated_at == NOW + timedelta(hours=2)


def test_update_unknown_note_fails():
    _, _, service = _service()

    with pytest.raises(ValidationError):
        service.update_note("missing", {"title": "x"})


def test_delete_note():
    store, _, service = _service()
    note = service.create_note({"title": "Họp", "content": "Họp giao ban"})

    service.delete_note(note.note_id)

    assert store.list_notes() == []
    with pytest.raises(ValidationError):
        service.delete_note(note.note_id)


def test_list_orders_priority_first_then_recent():
    _, clock, service = _service()
    old = service.create_note({"title": "A", "content": "a"})
    clock.now = NOW + timedelta(minutes=1)
    recent = service.create_note({"title": "B", "content": "b"})
    clock.now = NOW + timedelta(minutes=2)
    pinned = service.create_note({"title": "C", "content": "c", "is_priority": True})
    clock.now = NOW + timedelta(minutes=3)
    old = service.update_note(old.note_id, {"content": "a2"})

    assert [n.note_id for n in service.list_notes()] == [pinned.note_id, old.note_id, recent.note_id]


def test_list_filters_by_shift():
    _, _, service = _service()
    shared = service.create_note({"title": "A", "content": "a"})
    day_only = service.create_note({"title": "B", "content": "b", "associated_shift_ids": ["day"]})

    assert {n.note_id for n in service.list_notes(shift_id="day")} == {shared.note_id, day_only.note_id}
    assert [n.note_id for n in service.list_notes(shift_id="night")] == [shared.note_id]
