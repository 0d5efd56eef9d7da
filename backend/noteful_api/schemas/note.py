"""
Noteful API — Note Request/Response Schemas
============================================

What:  Pydantic models defining the note API contract.
How:   FastAPI decodes POST /notes bodies into NoteCreate (type coercion only)
       and serializes responses from NoteResponse.

Field notes:
    - folder_id must be an integer; a non-numeric value is a type error
      (400 via the RequestValidationError handler), an absent one is a
      missing-field error raised by the route.
    - modified is optional; None means "let the database stamp it".
    - NoteResponse.modified is the locale date string, not a timestamp.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class NoteCreate(BaseModel):
    """Body of POST /notes. Unknown keys are ignored."""
    note_title: Optional[str] = Field(default=None, description="Note title (required)")
    content: Optional[str] = Field(default=None, description="Note body (required)")
    folder_id: Optional[int] = Field(default=None, description="Owning folder id (required)")
    modified: Optional[datetime] = Field(
        default=None,
        description="Last-modified timestamp; defaults to the database's current time",
    )

    model_config = {"extra": "ignore"}


class NoteResponse(BaseModel):
    """Public representation of a note; free text fields are sanitized."""
    id: int = Field(description="Storage-assigned note id")
    note_title: str = Field(description="Title with markup escaped")
    content: str = Field(description="Body with markup escaped")
    folder_id: int = Field(description="Owning folder id")
    modified: Optional[str] = Field(
        default=None,
        description="Date portion of the last-modified time, formatted M/D/YYYY",
    )
