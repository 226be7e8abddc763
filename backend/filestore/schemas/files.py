"""
FileStore Backend — Pydantic Response Schemas
================================================

What:  Pydantic models defining what the API returns.
How:   FastAPI serializes handler results through these models and builds
       the OpenAPI documentation from them.

Request bodies are deliberately NOT modelled here: the handler validates the
raw payload itself so that a missing field is reported as a 422 built by our
own ValidationError (see FileStorageHandler).
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Success Responses
# ══════════════════════════════════════════════════════════════════════════


class MessageResponse(BaseModel):
    """
    What:  Plain confirmation body.
    Who:   Returned by create, update and delete.
    """
    message: str = Field(description="Human-readable result of the operation")


class FileListResponse(BaseModel):
    """
    What:  Listing of the storage root.
    Who:   Returned by GET /files.

    `content` is in the backend's listing order; it is not paginated.
    """
    message: str = Field(default="Listado de ficheros", description="Result message")
    content: List[str] = Field(description="Names of the files in the storage root")


class FileContentResponse(BaseModel):
    """
    What:  A single file's full content.
    Who:   Returned by GET /files/{filename}.
    """
    message: str = Field(default="Archivo leído con éxito", description="Result message")
    content: str = Field(description="Full content of the file")


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Responses
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for every non-2xx response.

    Fields:
        error: Machine-readable error code (e.g., "validation_error", "not_found")
        message: Human-readable description
        details: Optional extra context (e.g., per-field validation messages)
        request_id: Correlation ID for tracing this error in server logs

    Example:
        {
            "error": "conflict",
            "message": "El archivo ya existe",
            "details": {"filename": "notes.txt"},
            "request_id": "1f2e3d4c"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and storage status.
    Who:   Returned by GET /health for monitoring and container probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    storage: str = Field(description="Storage status: available, unavailable")
    storage_backend: str = Field(description="Configured backend: local, memory")
    uptime_seconds: float = Field(description="Seconds since service started")
