"""
FileStore Backend — FastAPI Dependencies
==========================================

What:  Providers injected into route handlers with Depends().
How:   get_storage() builds the configured backend once per process;
       get_file_handler() wraps it in a FileStorageHandler per request;
       read_payload() turns the request body into a plain dict.
Who:   Used by filestore.routes; overridden in tests through
       app.dependency_overrides[get_storage].
"""

import logging
from typing import Any, Dict, Optional

from fastapi import Depends, Request

from filestore.config import settings
from filestore.exceptions import ValidationError
from filestore.services.file_handler import FileStorageHandler
from filestore.services.local_storage import LocalStorage
from filestore.services.memory_storage import InMemoryStorage
from filestore.services.storage_base import StorageBackend

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

_storage: Optional[StorageBackend] = None


def build_storage(backend: str) -> StorageBackend:
    """Instantiate the StorageBackend named by `backend` ("local" or "memory")."""
    if backend == "memory":
        return InMemoryStorage()
    return LocalStorage(settings.storage_root)


def get_storage() -> StorageBackend:
    """
    Process-wide storage backend.

    Created on first use rather than at import so that importing the app
    (e.g. in tests) never touches the filesystem.
    """
    global _storage
    if _storage is None:
        _storage = build_storage(settings.storage_backend)
        logger.info("Storage backend ready: %s", _storage.name)
    return _storage


def get_file_handler(
    storage: StorageBackend = Depends(get_storage),
) -> FileStorageHandler:
    return FileStorageHandler(storage)


async def read_payload(request: Request) -> Dict[str, Any]:
    """
    Parse the request input into a flat dict of fields.

    Accepts JSON objects and form bodies. Query-string parameters are
    merged underneath, so a body field wins over a query parameter of
    the same name. An empty body yields whatever the query string holds.

    Raises:
        ValidationError: the body is not valid JSON, or is JSON but not an object
    """
    payload: Dict[str, Any] = dict(request.query_params)
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        payload.update(form)
        return payload

    raw = await request.body()
    if not raw.strip():
        return payload

    try:
        body = await request.json()
    except ValueError:
        raise ValidationError(
            message="El cuerpo de la petición no es un JSON válido.",
            context={"content_type": content_type},
        )

    if not isinstance(body, dict):
        raise ValidationError(
            message="El cuerpo de la petición debe ser un objeto JSON.",
            context={"received": type(body).__name__},
        )

    payload.update(body)
    return payload
