from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, instant_from_db, instant_to_db
from .model import Note
from .repository import NoteRepository

_COLUMNS = """
    note_id, title, content, is_priority, reminder_at, associated_shift_ids, created_at, updated_at
"""


def _to_note(r: dict) -> Note:
    return Note(
        note_id=str(r["note_id"]),
        title=r["title"],
        content=r["content"],
        created_at=instant_from_db(r["created_at"]),
        updated_at=instant_from_db(r["updated_at"]),
        is_priority=bool(r.get("is_priority")),
        reminder_at=instant_from_db(r.get("reminder_at")),
        associated_shift_ids=tuple(s for s in str(r.get("associated_shift_ids") or "").split(",") if s.strip()),
    )


class MySQLNoteRepository(NoteRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_notes(self) -> Sequence[Note]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM notes ORDER BY updated_at DESC")
            return [_to_note(r) for r in fetchall(cur)]

    def get_note(self, note_id: str) -> Optional[Note]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM notes WHERE note_id=%s", (note_id,))
            r = fetchone(cur)
            return _to_note(r) if r else None

    def save_note(self, note: Note) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO notes ({_COLUMNS})
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                ON DUPLICATE KEY UPDATE
                    title=VALUES(title),
                    content=VALUES(content),
                    is_priority=VALUES(is_priority),
                    reminder_at=VALUES(reminder_at),
                    associated_shift_ids=VALUES(associated_shift_ids),
                    updated_at=VALUES(updated_at)
                """,
                (
                    note.note_id,
                    note.title,
                    note.content,
                    1 if note.is_priority else 0,
                    instant_to_db(note.reminder_at),
                    ",".join(note.associated_shift_ids),
                    instant_to_db(note.created_at),
                    instant_to_db(note.updated_at),
                ),
            )

    def delete_note(self, note_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM notes WHERE note_id=%s", (note_id,))
            return cur.rowcount > 0
