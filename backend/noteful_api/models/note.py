"""
Noteful API — Note SQLAlchemy Model
====================================

What:  ORM model representing the `notes` table.
Why:   Maps Python objects to database rows for type-safe database operations.
How:   Inherits from DeclarativeBase; Alembic reads this for migrations.
Who:   Used by NoteService for CRUD operations.

Table Design Rationale:
    - id: integer primary key assigned by the database
    - note_title / content: TEXT, no artificial length limit
    - folder_id: FK → folders.id; referential integrity is the database's job,
      the application never checks the folder exists before inserting
    - modified: TIMESTAMP WITH TIME ZONE with a server default, so omitting it
      on insert yields the database's current time

    Index on folder_id:
        Postgres does not index FK columns automatically; listing a folder's
        notes would otherwise scan the whole table.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from noteful_api.database import Base


class Note(Base):
    """
    A text record with title, content, owning folder and last-modified time.

    Lifecycle:
        1. Created via POST /notes (modified defaults to CURRENT_TIMESTAMP)
        2. Read via GET /notes or GET /notes/{id}
        3. Destroyed via DELETE /notes/{id}
    """

    __tablename__ = "notes"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )

    note_title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    folder_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("folders.id", ondelete="CASCADE"),
        nullable=False,
    )

    # No Python-side default: when the caller omits `modified` the column is
    # left out of the INSERT and the server default applies.
    modified: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=text("CURRENT_TIMESTAMP"),
    )

    __table_args__ = (
        Index("idx_notes_folder_id", "folder_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Note(id={self.id}, folder_id={self.folder_id}, "
            f"modified='{self.modified}')>"
        )
