"""
Noteful API — Note Resource Service
====================================

What:  Translates list / get-by-id / insert / delete-by-id into queries on
       the `notes` table.
Who:   Built per request by `get_note_service` and used by routes/notes.py.

Default timestamp:
    NoteCreate.modified is an explicit Optional. When it is None the
    attribute is never assigned, so SQLAlchemy leaves the column out of the
    INSERT and the server default (CURRENT_TIMESTAMP) applies. Inserting an
    explicit NULL would violate NOT NULL instead.

Commit:
    insert() and delete_by_id() commit before returning, so the 201 or 204
    only goes out once the change is durable.

Foreign key:
    folder_id is not checked here. An unknown folder surfaces as an
    IntegrityError from the database, re-raised as DatabaseError (500).
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful_api.database import get_db_session
from noteful_api.exceptions import DatabaseError
from noteful_api.models.note import Note
from noteful_api.schemas.note import NoteCreate

logger = logging.getLogger(__name__)


class NoteService:
    """
    Storage operations for notes.

    Responsibilities:
        - list_all(): every note, fresh query per call, ordered by id
        - get_by_id(): one note or None
        - insert(): persist a note, returning it with id and modified filled in
        - delete_by_id(): remove a note, returning the affected row count
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> List[Note]:
        try:
            result = await self.db.execute(select(Note).order_by(Note.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing notes: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve notes.",
                context={"error_type": type(e).__name__},
            ) from e

    async def get_by_id(self, note_id: int) -> Optional[Note]:
        try:
            result = await self.db.execute(
                select(Note).where(Note.id == note_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            ) from e

    async def insert(self, new_note: NoteCreate) -> Note:
        note = Note(
            note_title=new_note.note_title,
            content=new_note.content,
            folder_id=new_note.folder_id,
        )
        if new_note.modified is not None:
            note.modified = new_note.modified

        try:
            self.db.add(note)
            await self.db.flush()
            # Loads the server-generated id and modified values
            await self.db.refresh(note)
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error inserting note: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the note.",
                context={"folder_id": new_note.folder_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Note created: %s (folder %s)", note.id, note.folder_id)
        return note

    async def delete_by_id(self, note_id: int) -> int:
        """
        Delete a note by primary key.

        Returns:
            Number of rows removed: 1 if the note existed, 0 if nothing
            matched. Zero is not an error.
        """
        try:
            # "evaluate" syncs the identity map in Python instead of adding
            # RETURNING, so rowcount stays the plain affected-row count
            result = await self.db.execute(
                delete(Note)
                .where(Note.id == note_id)
                .execution_options(synchronize_session="evaluate")
            )
            deleted = result.rowcount
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error deleting note %s: %s", note_id, str(e))
            raise DatabaseError(
                message="Could not delete the note.",
                context={"note_id": note_id, "error_type": type(e).__name__},
            ) from e

        logger.info("Note %s delete affected %d row(s)", note_id, deleted)
        return deleted


def get_note_service(db: AsyncSession = Depends(get_db_session)) -> NoteService:
    """FastAPI dependency: a NoteService bound to the request's session."""
    return NoteService(db)
