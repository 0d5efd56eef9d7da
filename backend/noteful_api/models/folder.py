"""
Noteful API — Folder SQLAlchemy Model
======================================

What:  ORM model representing the `folders` table.
Who:   Used by FolderService for reads/inserts and by Alembic for schema management.

Table Design:
    - id: integer primary key assigned by the database, never reused
    - folder_title: user-supplied name, required
"""

from sqlalchemy import Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from noteful_api.database import Base


class Folder(Base):
    """
    A named grouping that notes reference by id.

    Lifecycle:
        Created via POST /folders, read via GET. No update or delete
        operation exists in the API.
    """

    __tablename__ = "folders"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    folder_title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<Folder(id={self.id}, folder_title={self.folder_title!r})>"
