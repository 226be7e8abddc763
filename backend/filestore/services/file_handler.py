"""
FileStore Backend — File Storage Handler
==========================================

What:  The request-handling logic between the HTTP layer and the storage
       backend: validate the input, check existence, call one primitive.
How:   Each operation is an async method that either returns a response
       schema or raises one of the typed errors from filestore.exceptions.
       The global exception handlers in main.py turn those into status codes.
Who:   Called by the route handlers in filestore.routes.files.

Operation flow:
    list    → backend.list()                                  → 200
    create  → validate(filename, content) → exists? 409 : put → 200
    read    → exists? get : 404                               → 200
    update  → validate(content) → exists? put : 404           → 200
    delete  → exists? delete : 404                            → 200

The handler holds nothing but the injected backend, so a fresh instance per
request is as good as a shared one.
"""

import logging
from typing import Any, Dict, List, Mapping

from filestore.exceptions import ConflictError, NotFoundError, ValidationError
from filestore.schemas.files import (
    FileContentResponse,
    FileListResponse,
    MessageResponse,
)
from filestore.services.storage_base import StorageBackend

logger = logging.getLogger(__name__)

# ── Response Messages ─────────────────────────────────────────────────────
MSG_LISTED = "Listado de ficheros"
MSG_SAVED = "Guardado con éxito"
MSG_EXISTS = "El archivo ya existe"
MSG_READ = "Archivo leído con éxito"
MSG_NOT_FOUND = "Archivo no encontrado"
MSG_MISSING = "El archivo no existe"
MSG_UPDATED = "Actualizado con éxito"
MSG_DELETED = "Eliminado con éxito"

MSG_FIELD_REQUIRED = "El campo {field} es obligatorio."
MSG_FIELD_STRING = "El campo {field} debe ser una cadena de texto."


def collect_string_errors(
    payload: Mapping[str, Any],
    fields: Dict[str, bool],
) -> Dict[str, List[str]]:
    """
    Check that each named field is present and holds a string.

    Args:
        payload: Parsed request fields (body merged over query string)
        fields:  Field name → whether an empty or blank string is acceptable

    Returns:
        Field name → list of messages, only for fields that failed.
        An empty dict means the payload is valid.
    """
    errors: Dict[str, List[str]] = {}
    for field, allow_empty in fields.items():
        value = payload.get(field)
        if value is None:
            errors[field] = [MSG_FIELD_REQUIRED.format(field=field)]
        elif not isinstance(value, str):
            errors[field] = [MSG_FIELD_STRING.format(field=field)]
        elif not allow_empty and value.strip() == "":
            errors[field] = [MSG_FIELD_REQUIRED.format(field=field)]
    return errors


class FileStorageHandler:
    """
    CRUD over flat files in one storage backend.

    Every mutating call checks existence first and then performs exactly one
    write or delete. No locking is done; two requests racing on the same name
    are resolved by whichever storage call lands last.
    """

    def __init__(self, storage: StorageBackend):
        self.storage = storage

    async def list_files(self) -> FileListResponse:
        """Names of every file in the storage root, in backend order."""
        files = await self.storage.list()
        return FileListResponse(message=MSG_LISTED, content=files)

    async def create_file(self, payload: Mapping[str, Any]) -> MessageResponse:
        """
        Store a new file named `filename` holding `content`.

        Raises:
            ValidationError: filename missing/blank/non-string, or content
                             missing/non-string (empty content is allowed)
            ConflictError:   a file with that name already exists; nothing
                             is written
        """
        errors = collect_string_errors(payload, {"filename": False, "content": True})
        if errors:
            raise ValidationError.from_field_errors(errors)

        filename: str = payload["filename"]
        content: str = payload["content"]

        if await self.storage.exists(filename):
            logger.info("Create rejected, %s already exists", filename)
            raise ConflictError(filename, message=MSG_EXISTS)

        await self.storage.put(filename, content)
        logger.info("File created: %s (%d chars)", filename, len(content))
        return MessageResponse(message=MSG_SAVED)

    async def read_file(self, filename: str) -> FileContentResponse:
        """
        Full content of `filename`.

        Raises:
            NotFoundError: no such file
        """
        if not await self.storage.exists(filename):
            raise NotFoundError(filename, message=MSG_NOT_FOUND)

        content = await self.storage.get(filename)
        return FileContentResponse(message=MSG_READ, content=content)

    async def update_file(
        self, filename: str, payload: Mapping[str, Any]
    ) -> MessageResponse:
        """
        Replace the whole content of an existing file.

        The payload is validated before the existence check, so a request
        without `content` is a 422 whether or not the file exists.

        Raises:
            ValidationError: content missing or not a string
            NotFoundError:   no such file
        """
        errors = collect_string_errors(payload, {"content": True})
        if errors:
            raise ValidationError.from_field_errors(errors)

        content: str = payload["content"]

        if not await self.storage.exists(filename):
            raise NotFoundError(filename, message=MSG_MISSING)

        await self.storage.put(filename, content)
        logger.info("File updated: %s (%d chars)", filename, len(content))
        return MessageResponse(message=MSG_UPDATED)

    async def delete_file(self, filename: str) -> MessageResponse:
        """
        Remove an existing file.

        Raises:
            NotFoundError: no such file
        """
        if not await self.storage.exists(filename):
            raise NotFoundError(filename, message=MSG_MISSING)

        await self.storage.delete(filename)
        logger.info("File deleted: %s", filename)
        return MessageResponse(message=MSG_DELETED)
