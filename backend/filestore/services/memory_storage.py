"""
FileStore Backend — In-Memory Storage Backend

Dict-backed StorageBackend. Used by the test suite and by
STORAGE_BACKEND=memory for throwaway instances; contents vanish with the
process.
"""

import logging
from typing import Dict, List, Optional

from filestore.exceptions import FileStorageError
from filestore.services.storage_base import StorageBackend

logger = logging.getLogger(__name__)


class InMemoryStorage(StorageBackend):
    """Keeps every file as a str in a dict. Listing follows insertion order."""

    name = "memory"

    def __init__(self, files: Optional[Dict[str, str]] = None):
        self._files: Dict[str, str] = dict(files or {})

    async def exists(self, path: str) -> bool:
        return path in self._files

    async def list(self) -> List[str]:
        # Only top-level names, mirroring a non-recursive directory listing
        return [name for name in self._files if "/" not in name]

    async def get(self, path: str) -> str:
        try:
            return self._files[path]
        except KeyError:
            raise FileStorageError(
                message="No se pudo leer el archivo",
                context={"path": path, "backend": self.name},
            )

    async def put(self, path: str, content: str) -> None:
        self._files[path] = content
        logger.debug("Stored %s in memory (%d chars)", path, len(content))

    async def delete(self, path: str) -> None:
        try:
            del self._files[path]
        except KeyError:
            raise FileStorageError(
                message="No se pudo eliminar el archivo",
                context={"path": path, "backend": self.name},
            )
