from __future__ import annotations

import logging
import uuid
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import align_awareness, now_local, parse_instant
from ..common.validators import require_max_length, require_non_empty
from ..core.exceptions import ValidationError
from ..shifts.repository import ShiftRepository
from .model import NOTE_CONTENT_MAX_LENGTH, NOTE_TITLE_MAX_LENGTH, Note
from .repository import NoteRepository

logger = logging.getLogger(__name__)


def _same_text(a: str, b: str) -> bool:
    return a.strip().casefold() == b.strip().casefold()


class NoteService:
    def __init__(
        self,
        notes: NoteRepository,
        *,
        shifts: Optional[ShiftRepository] = None,
        clock: Callable[[], datetime] = now_local,
    ):
        self._notes = notes
        self._shifts = shifts
        self._clock = clock

    def list_notes(self, *, shift_id: Optional[str] = None) -> Sequence[Note]:
        """Priority notes first, then most recently updated."""
        notes = [n for n in self._notes.list_notes() if shift_id is None or n.applies_to_shift(shift_id)]
        notes.sort(key=lambda n: n.updated_at, reverse=True)
        notes.sort(key=lambda n: not n.is_priority)
        return notes

    def get_note(self, note_id: str) -> Note:
        note = self._notes.get_note(note_id)
        if not note:
            raise ValidationError("Ghi chú không tồn tại")
        return note

    def create_note(self, payload: dict) -> Note:
        now = self._clock()
        note = self._build(payload or {}, note_id=f"note_{uuid.uuid4().hex[:12]}", created_at=now, now=now)
        self._notes.save_note(note)
        logger.info("created note %s", note.note_id)
        return note

    def update_note(self, note_id: str, payload: dict) -> Note:
        current = self.get_note(note_id)
        payload = payload or {}
        merged = {**current.to_dict(), **payload}
        if "reminder_at" not in payload:
            # An unchanged reminder may already be in the past.
            merged["reminder_at"] = current.reminder_at

        note = self._build(merged, note_id=current.note_id, created_at=current.created_at, now=self._clock())
        self._notes.save_note(note)
        logger.info("updated note %s", note.note_id)
        return note

    def delete_note(self, note_id: str) -> None:
        if not self._notes.delete_note(note_id):
            raise ValidationError("Xóa ghi chú thất bại")
        logger.info("deleted note %s", note_id)

    def _build(self, payload: dict, *, note_id: str, created_at: datetime, now: datetime) -> Note:
        title = require_max_length(payload.get("title", ""), NOTE_TITLE_MAX_LENGTH, "Tiêu đề")
        content = require_max_length(payload.get("content", ""), NOTE_CONTENT_MAX_LENGTH, "Nội dung")

        for other in self._notes.list_notes():
            if other.note_id != note_id and _same_text(other.title, title) and _same_text(other.content, content):
                raise ValidationError("Đã tồn tại ghi chú với tiêu đề và nội dung giống hệt")

        reminder_at = payload.get("reminder_at") or None
        if reminder_at is not None and not isinstance(reminder_at, (str, datetime)):
            raise ValidationError("Thời gian nhắc nhở không hợp lệ")
        if isinstance(reminder_at, str):
            reminder_at = parse_instant(reminder_at)
            if reminder_at <= align_awareness(now, reminder_at):
                raise ValidationError("Thời gian nhắc nhở phải trong tương lai")

        shift_ids = tuple(require_non_empty(str(s), "Mã ca") for s in payload.get("associated_shift_ids") or ())
        if self._shifts is not None:
            for shift_id in shift_ids:
                if not self._shifts.get_by_id(shift_id):
                    raise ValidationError(f"Ca làm việc không tồn tại: {shift_id}")

        return Note(
            note_id=note_id,
            title=title,
            content=content,
            created_at=created_at,
            updated_at=now,
            is_priority=bool(payload.get("is_priority", False)),
            reminder_at=reminder_at,
            associated_shift_ids=shift_ids,
        )
