"""
FileStore Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for each way a file request can fail.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with the matching status code.
Who:   Raised by FileStorageHandler, the storage backends and the payload
       reader; caught by the global handlers.

Exception Hierarchy:
    FileStoreError (base)        → 500 Internal Server Error
    ├── ValidationError          → 422 Unprocessable Entity (missing/malformed field)
    ├── ConflictError            → 409 Conflict (file already exists on create)
    ├── NotFoundError            → 404 Not Found (file absent on read/update/delete)
    └── FileStorageError         → 500 Internal Server Error (backend I/O failure)
        └── StoragePathError     → 500 Internal Server Error (path escapes the root)
"""

from typing import Any, Dict, List, Optional


class FileStoreError(Exception):
    """
    Base exception for all FileStore application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only returned where the
                  handler for the subclass chooses to)
    """

    def __init__(
        self,
        message: str = "Ha ocurrido un error inesperado",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FileStoreError):
    """
    Raised when a required request field is missing or malformed.

    HTTP:    422 Unprocessable Entity

    `errors` maps each offending field to its list of messages so that a
    request missing both `filename` and `content` reports both at once:

        {
            "error": "validation_error",
            "message": "El campo filename es obligatorio.",
            "details": {"errors": {"filename": ["El campo filename es obligatorio."],
                                   "content": ["El campo content es obligatorio."]}}
        }
    """

    def __init__(
        self,
        message: str = "Los datos proporcionados no son válidos",
        errors: Optional[Dict[str, List[str]]] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        self.errors = errors or {}
        ctx = context or {}
        if self.errors:
            ctx["errors"] = self.errors
        super().__init__(message=message, context=ctx)

    @classmethod
    def from_field_errors(cls, errors: Dict[str, List[str]]) -> "ValidationError":
        """Builds the error using the first field message as the summary."""
        first = next(iter(errors.values()))[0]
        return cls(message=first, errors=errors)


class ConflictError(FileStoreError):
    """
    Raised when a create targets a name that already exists.

    HTTP:    409 Conflict
    Nothing is written when this is raised.
    """

    def __init__(
        self,
        filename: str,
        message: str = "El archivo ya existe",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["filename"] = filename
        super().__init__(message=message, context=ctx)
        self.filename = filename


class NotFoundError(FileStoreError):
    """
    Raised when read, update or delete targets a name that does not exist.

    HTTP:    404 Not Found
    """

    def __init__(
        self,
        filename: str,
        message: str = "El archivo no existe",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["filename"] = filename
        super().__init__(message=message, context=ctx)
        self.filename = filename


class FileStorageError(FileStoreError):
    """
    Raised when a storage backend operation fails.

    What:    Could not read, write, list or delete on the storage volume.
    When:    Disk full, permission denied, directory not writable, I/O error.
    HTTP:    500 Internal Server Error

    The OS error and the absolute path go into `context` for the logs;
    the client only sees `message`.
    """

    def __init__(
        self,
        message: str = "La operación de almacenamiento ha fallado",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StoragePathError(FileStorageError):
    """
    Raised by the local backend when a name resolves outside its root.

    The handler does not sanitize names; this is the backend refusing to
    touch anything above the directory it was rooted at.
    """

    def __init__(
        self,
        path: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["path"] = path
        super().__init__(
            message=f"La ruta '{path}' está fuera del directorio de almacenamiento",
            context=ctx,
        )
        self.path = path
