"""Note Store — SQL-backed NoteRepository over the notes table.

Invariants:
    - Every call returns the full note list ordered newest first (id DESC)
    - Deleting a missing id raises ResourceNotFoundError (404), never a silent no-op
    - Commits happen here; DB errors are mapped by DatabaseSessionManager
"""

import logging

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from vyral.core.boundary_protocols import NoteRepository
from vyral.core.errors import ResourceNotFoundError
from vyral.infrastructure.database import get_db
from vyral.models.note import Note

logger = logging.getLogger(__name__)


class SqlNoteRepository:
    """NoteRepository implementation bound to one AsyncSession."""

    def __init__(self, db: AsyncSession):
        self._db = db

    async def create(self, text: str) -> list[dict]:
        note = Note(text=text)
        self._db.add(note)
        await self._db.commit()
        await self._db.refresh(note)
        logger.info("Note created", extra={"note_id": note.id})
        return await self.list_notes()

    async def list_notes(self) -> list[dict]:
        result = await self._db.execute(select(Note).order_by(Note.id.desc()))
        return [note.as_dict() for note in result.scalars().all()]

    async def delete(self, note_id: int) -> list[dict]:
        note = await self._db.get(Note, note_id)
        if note is None:
            raise ResourceNotFoundError("Note", str(note_id))
        await self._db.delete(note)
        await self._db.commit()
        logger.info("Note deleted", extra={"note_id": note_id})
        return await self.list_notes()


def get_note_repository(db: AsyncSession = Depends(get_db)) -> NoteRepository:
    return SqlNoteRepository(db)
