"""
FileStore Backend — File Route Handlers
=========================================

What:  The five CRUD endpoints over the storage root.
How:   Each route pulls the handler (and, where needed, the parsed payload)
       from dependencies and returns what the handler returns. Errors are
       raised by the handler and rendered by the global exception handlers.

Route Inventory:
    GET        /files             list
    POST       /files             create  (200 on success, not 201)
    GET        /files/{filename}  read
    PUT/PATCH  /files/{filename}  update
    DELETE     /files/{filename}  delete
"""

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends

from filestore.dependencies import get_file_handler, read_payload
from filestore.schemas.files import (
    ErrorResponse,
    FileContentResponse,
    FileListResponse,
    MessageResponse,
)
from filestore.services.file_handler import FileStorageHandler

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/files", tags=["Files"])

NOT_FOUND = {404: {"description": "File not found", "model": ErrorResponse}}
UNPROCESSABLE = {422: {"description": "Missing or malformed field", "model": ErrorResponse}}


@router.get(
    "",
    response_model=FileListResponse,
    summary="List files in the storage root",
)
async def list_files(
    handler: FileStorageHandler = Depends(get_file_handler),
) -> FileListResponse:
    return await handler.list_files()


@router.post(
    "",
    status_code=200,
    response_model=MessageResponse,
    responses={
        409: {"description": "File already exists", "model": ErrorResponse},
        **UNPROCESSABLE,
    },
    summary="Create a new file",
    description=(
        "Body fields: `filename` (non-empty string) and `content` (string, may be "
        "empty). Accepts JSON or form encoding. Never overwrites an existing file."
    ),
)
async def create_file(
    payload: Dict[str, Any] = Depends(read_payload),
    handler: FileStorageHandler = Depends(get_file_handler),
) -> MessageResponse:
    return await handler.create_file(payload)


@router.get(
    "/{filename}",
    response_model=FileContentResponse,
    responses=NOT_FOUND,
    summary="Read a file's content",
)
async def read_file(
    filename: str,
    handler: FileStorageHandler = Depends(get_file_handler),
) -> FileContentResponse:
    return await handler.read_file(filename)


@router.put(
    "/{filename}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **UNPROCESSABLE},
    summary="Replace a file's content",
    operation_id="update_file_put",
)
@router.patch(
    "/{filename}",
    response_model=MessageResponse,
    responses={**NOT_FOUND, **UNPROCESSABLE},
    summary="Replace a file's content",
    operation_id="update_file_patch",
)
async def update_file(
    filename: str,
    payload: Dict[str, Any] = Depends(read_payload),
    handler: FileStorageHandler = Depends(get_file_handler),
) -> MessageResponse:
    return await handler.update_file(filename, payload)


@router.delete(
    "/{filename}",
    response_model=MessageResponse,
    responses=NOT_FOUND,
    summary="Delete a file",
)
async def delete_file(
    filename: str,
    handler: FileStorageHandler = Depends(get_file_handler),
) -> MessageResponse:
    return await handler.delete_file(filename)
