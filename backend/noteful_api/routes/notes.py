"""
Noteful API — Note Route Handlers
==================================

What:  GET /notes, POST /notes, GET /notes/{note_id}, DELETE /notes/{note_id}.
How:   Validates input, delegates to NoteService, maps results to status
       codes and serializes through serializers.serialize_note.

Delete semantics:
    DELETE first resolves the note through `resolve_note` (404 if absent),
    then deletes. If the delete itself reports zero affected rows the note was
    removed concurrently between the two calls, and the answer is also 404.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response

from noteful_api.exceptions import NotFoundError
from noteful_api.models.note import Note
from noteful_api.routes.validation import id_in_range, location_for, require_fields
from noteful_api.schemas.common import ErrorResponse
from noteful_api.schemas.note import NoteCreate, NoteResponse
from noteful_api.serializers import serialize_note
from noteful_api.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

# Checked in this order; the first missing one is reported
REQUIRED_FIELDS = ("note_title", "content", "folder_id")


async def resolve_note(
    note_id: int,
    service: NoteService = Depends(get_note_service),
) -> Note:
    """Shared /{note_id} lookup: the Note, or 404 "Note does not exist"."""
    if not id_in_range(note_id):
        raise NotFoundError(resource="Note", resource_id=note_id)
    note = await service.get_by_id(note_id)
    if note is None:
        raise NotFoundError(resource="Note", resource_id=note_id)
    return note


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    notes = await service.list_all()
    return [serialize_note(note) for note in notes]


@router.post(
    "",
    status_code=201,
    response_model=NoteResponse,
    responses={400: {"description": "Missing field", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    request: Request,
    response: Response,
    payload: Optional[NoteCreate] = None,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Create a note from `{note_title, content, folder_id, modified?}`.

    `modified` is optional; when omitted the database stamps the current time.
    """
    payload = payload or NoteCreate()
    require_fields(payload, REQUIRED_FIELDS)

    note = await service.insert(payload)

    response.headers["Location"] = location_for(request, note.id)
    return serialize_note(note)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Get a note by id",
)
async def get_note(note: Note = Depends(resolve_note)) -> NoteResponse:
    return serialize_note(note)


@router.delete(
    "/{note_id}",
    status_code=204,
    response_class=Response,
    responses={404: {"description": "Note not found", "model": ErrorResponse}},
    summary="Delete a note",
)
async def delete_note(
    note: Note = Depends(resolve_note),
    service: NoteService = Depends(get_note_service),
) -> Response:
    note_id = note.id
    deleted = await service.delete_by_id(note_id)
    if deleted == 0:
        logger.warning("Note %s vanished between lookup and delete", note_id)
        raise NotFoundError(resource="Note", resource_id=note_id)
    return Response(status_code=204)
