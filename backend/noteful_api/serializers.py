"""
Noteful API — Output Serializers
=================================

What:  Project stored rows onto their public representation.
Why:   Titles and content are user-supplied and echoed back to browsers; any
       markup in them must come back inert (stored XSS defense).
How:   `sanitize_text` escapes the tag delimiters, so no element (and hence no
       <script>, no on* handler attribute) can be formed from the output.
       Everything else, ampersands and quotes included, is returned untouched
       so plain text round-trips exactly.

Date format:
    `format_locale_date` renders the date portion only, US short form
    without zero padding: 2019-01-03T15:20:00Z → "1/3/2019". Clients parse
    this string, so it must stay stable.
"""

from datetime import date, datetime
from typing import Optional, Union

from noteful_api.models.folder import Folder
from noteful_api.models.note import Note
from noteful_api.schemas.folder import FolderResponse
from noteful_api.schemas.note import NoteResponse

_ESCAPES = str.maketrans({"<": "&lt;", ">": "&gt;"})


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """Escape markup delimiters in user text. None passes through."""
    if value is None:
        return None
    return value.translate(_ESCAPES)


def format_locale_date(value: Optional[Union[datetime, date]]) -> Optional[str]:
    """Format a timestamp's date portion as M/D/YYYY. None passes through."""
    if value is None:
        return None
    return f"{value.month}/{value.day}/{value.year}"


def serialize_folder(folder: Folder) -> FolderResponse:
    return FolderResponse(
        id=folder.id,
        folder_title=sanitize_text(folder.folder_title),
    )


def serialize_note(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        note_title=sanitize_text(note.note_title),
        content=sanitize_text(note.content),
        folder_id=note.folder_id,
        modified=format_locale_date(note.modified),
    )
