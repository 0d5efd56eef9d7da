"""
Noteful API — Folder Resource Service
======================================

What:  Translates list / get-by-id / insert into queries on the `folders` table.
Who:   Built per request by `get_folder_service` and used by routes/folders.py.

Design Decision:
    The service holds the request's AsyncSession (injected, never a global)
    and returns plain ORM rows or None. HTTP concerns (404s, status codes,
    serialization) stay in the router.

Error Handling:
    SQLAlchemy errors are logged and re-raised as DatabaseError, which the
    global handler turns into a 500. Nothing is retried or swallowed.
"""

import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from noteful_api.database import get_db_session
from noteful_api.exceptions import DatabaseError
from noteful_api.models.folder import Folder
from noteful_api.schemas.folder import FolderCreate

logger = logging.getLogger(__name__)


class FolderService:
    """
    Storage operations for folders.

    Responsibilities:
        - list_all(): every folder, fresh query per call, ordered by id
        - get_by_id(): one folder or None
        - insert(): persist a new folder and return it with its assigned id
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_all(self) -> List[Folder]:
        try:
            result = await self.db.execute(select(Folder).order_by(Folder.id))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Database error listing folders: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not retrieve folders.",
                context={"error_type": type(e).__name__},
            ) from e

    async def get_by_id(self, folder_id: int) -> Optional[Folder]:
        """
        Fetch a folder by primary key.

        Returns:
            The Folder, or None when no row matches (absence, not an error).
        """
        try:
            result = await self.db.execute(
                select(Folder).where(Folder.id == folder_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error fetching folder %s: %s", folder_id, str(e))
            raise DatabaseError(
                message="Could not retrieve the folder.",
                context={"folder_id": folder_id, "error_type": type(e).__name__},
            ) from e

    async def insert(self, new_folder: FolderCreate) -> Folder:
        """
        Persist a folder.

        Flush sends the INSERT, refresh loads the storage-assigned id, and the
        commit lands before the handler builds its 201. A failed commit is a
        DatabaseError like any other storage failure.
        """
        folder = Folder(folder_title=new_folder.folder_title)
        try:
            self.db.add(folder)
            await self.db.flush()
            await self.db.refresh(folder)
            await self.db.commit()
        except SQLAlchemyError as e:
            logger.error("Database error inserting folder: %s", str(e), exc_info=True)
            raise DatabaseError(
                message="Could not create the folder.",
                context={"error_type": type(e).__name__},
            ) from e

        logger.info("Folder created: %s", folder.id)
        return folder


def get_folder_service(db: AsyncSession = Depends(get_db_session)) -> FolderService:
    """FastAPI dependency: a FolderService bound to the request's session."""
    return FolderService(db)
