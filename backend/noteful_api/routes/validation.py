"""
Noteful API — Request Helpers Shared by Resource Routers
=========================================================

What:  Required-field presence check, storage id range check and Location
       header construction.
"""

import posixpath
from typing import Iterable

from fastapi import Request
from pydantic import BaseModel

from noteful_api.exceptions import ValidationError

# ids are INTEGER (int4) columns; anything outside cannot name a stored row
MIN_ID = 1
MAX_ID = 2**31 - 1


def require_fields(payload: BaseModel, fields: Iterable[str]) -> None:
    """
    Reject the body if any required field is absent or null.

    Fields are checked in the given order and only the first missing one is
    reported, e.g. "Missing 'content' in request body".

    Raises:
        ValidationError: → 400 via the global handler
    """
    for field in fields:
        if getattr(payload, field, None) is None:
            raise ValidationError(
                message=f"Missing '{field}' in request body",
                field=field,
            )


def location_for(request: Request, resource_id: int) -> str:
    """Request path joined with the new id: POST /folders → /folders/12."""
    return posixpath.join(request.url.path.rstrip("/") or "/", str(resource_id))


def id_in_range(resource_id: int) -> bool:
    """False for ids the database could never have assigned."""
    return MIN_ID <= resource_id <= MAX_ID
