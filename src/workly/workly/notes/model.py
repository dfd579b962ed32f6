from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

NOTE_TITLE_MAX_LENGTH = 100
NOTE_CONTENT_MAX_LENGTH = 300


@dataclass(frozen=True)
class Note:
    """Ghi chú của người dùng, có thể gắn với ca làm việc hoặc một thời điểm nhắc."""

    note_id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    is_priority: bool = False
    reminder_at: Optional[datetime] = None
    associated_shift_ids: tuple[str, ...] = ()

    def applies_to_shift(self, shift_id: Optional[str]) -> bool:
        """Notes without shift association apply to every shift."""
        return not self.associated_shift_ids or shift_id in self.associated_shift_ids

    def to_dict(self) -> dict:
        return {
            "id": self.note_id,
            "title": self.title,
            "content": self.content,
            "is_priority": self.is_priority,
            "reminder_at": self.reminder_at.isoformat() if self.reminder_at else None,
            "associated_shift_ids": list(self.associated_shift_ids),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }
