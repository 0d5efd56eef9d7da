"""
Noteful API — Folder Request/Response Schemas
==============================================

What:  Pydantic models defining the folder API contract.

Why every request field is Optional:
    Presence of required fields is checked by the route (in declared order)
    so the client gets "Missing '<field>' in request body" with a 400,
    instead of FastAPI's generic 422 for a missing model field.
"""

from typing import Optional

from pydantic import BaseModel, Field


class FolderCreate(BaseModel):
    """Body of POST /folders. Unknown keys are ignored."""
    folder_title: Optional[str] = Field(default=None, description="Folder name (required)")

    model_config = {"extra": "ignore"}


class FolderResponse(BaseModel):
    """Public representation of a folder; folder_title is already sanitized."""
    id: int = Field(description="Storage-assigned folder id")
    folder_title: str = Field(description="Folder name with markup escaped")
