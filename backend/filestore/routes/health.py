"""
FileStore Backend — Health Check Route
========================================

What:  Health check endpoint for monitoring and container probes.
How:   Lists the storage root as a lightweight probe of the backend.

Status levels:
    - healthy:   Storage backend answered
    - unhealthy: Storage backend raised (reported in the body, still HTTP 200)
"""

import logging
import time

from fastapi import APIRouter, Depends

from filestore import __version__
from filestore.config import settings
from filestore.dependencies import get_storage
from filestore.schemas.files import HealthResponse
from filestore.services.storage_base import StorageBackend

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check(
    storage: StorageBackend = Depends(get_storage),
) -> HealthResponse:
    storage_status = "available"
    overall = "healthy"

    try:
        await storage.list()
    except Exception as e:
        storage_status = "unavailable"
        overall = "unhealthy"
        logger.warning("Health check: storage unreachable: %s", str(e))

    return HealthResponse(
        status=overall,
        version=__version__,
        storage=storage_status,
        storage_backend=getattr(storage, "name", settings.storage_backend),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
