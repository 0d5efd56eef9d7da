"""
Noteful API — Folder Route Handlers
====================================

What:  GET /folders, POST /folders, GET /folders/{folder_id}.
How:   Validates input, delegates to FolderService, maps results to status
       codes and serializes through serializers.serialize_folder.

Existence check:
    `resolve_folder` is the single lookup for every /folders/{folder_id}
    route. It returns the Folder or raises NotFoundError, so handlers receive
    the resolved row as a parameter instead of re-querying.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Request, Response

from noteful_api.exceptions import NotFoundError
from noteful_api.models.folder import Folder
from noteful_api.routes.validation import id_in_range, location_for, require_fields
from noteful_api.schemas.common import ErrorResponse
from noteful_api.schemas.folder import FolderCreate, FolderResponse
from noteful_api.serializers import serialize_folder
from noteful_api.services.folder_service import FolderService, get_folder_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/folders", tags=["Folders"])

REQUIRED_FIELDS = ("folder_title",)


async def resolve_folder(
    folder_id: int,
    service: FolderService = Depends(get_folder_service),
) -> Folder:
    """Shared /{folder_id} lookup: the Folder, or 404 "Folder does not exist"."""
    if not id_in_range(folder_id):
        raise NotFoundError(resource="Folder", resource_id=folder_id)
    folder = await service.get_by_id(folder_id)
    if folder is None:
        raise NotFoundError(resource="Folder", resource_id=folder_id)
    return folder


@router.get(
    "",
    response_model=List[FolderResponse],
    summary="List all folders",
)
async def list_folders(
    service: FolderService = Depends(get_folder_service),
) -> List[FolderResponse]:
    folders = await service.list_all()
    return [serialize_folder(folder) for folder in folders]


@router.post(
    "",
    status_code=201,
    response_model=FolderResponse,
    responses={400: {"description": "Missing field", "model": ErrorResponse}},
    summary="Create a folder",
)
async def create_folder(
    request: Request,
    response: Response,
    payload: Optional[FolderCreate] = None,
    service: FolderService = Depends(get_folder_service),
) -> FolderResponse:
    """
    Create a folder from `{"folder_title": ...}`.

    Responds 201 with a Location header pointing at the new folder.
    """
    payload = payload or FolderCreate()
    require_fields(payload, REQUIRED_FIELDS)

    folder = await service.insert(payload)

    response.headers["Location"] = location_for(request, folder.id)
    return serialize_folder(folder)


@router.get(
    "/{folder_id}",
    response_model=FolderResponse,
    responses={404: {"description": "Folder not found", "model": ErrorResponse}},
    summary="Get a folder by id",
)
async def get_folder(folder: Folder = Depends(resolve_folder)) -> FolderResponse:
    return serialize_folder(folder)
