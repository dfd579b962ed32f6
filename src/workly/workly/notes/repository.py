from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Note


class NoteRepository(Protocol):
    def list_notes(self) -> Sequence[Note]:
        raise NotImplementedError

    def get_note(self, note_id: str) -> Optional[Note]:
        raise NotImplementedError

    def save_note(self, note: Note) -> None:
        """Create or replace a note by id."""

        raise NotImplementedError

    def delete_note(self, note_id: str) -> bool:
        raise NotImplementedError
