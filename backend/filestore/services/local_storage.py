"""
FileStore Backend — Local Directory Storage Backend
=====================================================

What:  StorageBackend over a single directory on the local filesystem.
How:   Async file I/O with aiofiles so disk access never blocks the
       event loop. Names are normalized against the root before use.
Who:   Built by filestore.dependencies.get_storage() when
       STORAGE_BACKEND=local (the default).

Path normalization:
    The handler passes client-supplied names straight through. This backend
    maps them onto the root the way a rooted filesystem adapter does:

        "notes.txt"          → <root>/notes.txt
        "/notes.txt"         → <root>/notes.txt      (leading slash dropped)
        "a/./b.txt"          → <root>/a/b.txt
        "a/../b.txt"         → <root>/b.txt
        "../etc/passwd"      → StoragePathError       (escapes the root)

    Backslashes are treated as separators. Nothing else is sanitized.

Listing:
    list() returns regular files directly under the root, sorted by name.
    exists() is true for directories as well, so a name already taken by a
    subdirectory (or the root itself, e.g. ".") is reported as present.
    Subdirectories created by names containing "/" are not descended into.
"""

import logging
from pathlib import Path
from typing import List, Optional

import aiofiles
import aiofiles.os

from filestore.config import settings
from filestore.exceptions import FileStorageError, StoragePathError
from filestore.services.storage_base import StorageBackend

logger = logging.getLogger(__name__)


class LocalStorage(StorageBackend):
    """
    Flat-file storage rooted at a directory.

    Text is read and written as UTF-8 with newline translation disabled,
    so get() returns exactly what put() was given. Bytes that are not valid
    UTF-8 (files dropped into the directory by other tools) are replaced
    rather than failing the read.
    """

    name = "local"

    def __init__(self, storage_root: Optional[str] = None):
        """
        Args:
            storage_root: Override the default storage path (used in tests).
                          If None, uses settings.storage_root.
        """
        self.storage_root = Path(storage_root or settings.storage_root).resolve()
        self.storage_root.mkdir(parents=True, exist_ok=True)
        logger.info("LocalStorage initialized with storage_root=%s", self.storage_root)

    def _resolve(self, path: str) -> Path:
        """Map a client-supplied name onto an absolute path inside the root."""
        if "\x00" in path:
            raise StoragePathError(path)

        parts: List[str] = []
        for segment in path.replace("\\", "/").split("/"):
            if segment in ("", "."):
                continue
            if segment == "..":
                if not parts:
                    raise StoragePathError(path)
                parts.pop()
                continue
            parts.append(segment)

        return self.storage_root.joinpath(*parts)

    async def exists(self, path: str) -> bool:
        return await aiofiles.os.path.exists(self._resolve(path))

    async def list(self) -> List[str]:
        try:
            with await aiofiles.os.scandir(self.storage_root) as entries:
                names = [entry.name for entry in entries if entry.is_file()]
        except OSError as e:
            logger.error("Failed to list %s: %s", self.storage_root, str(e))
            raise FileStorageError(
                message="No se pudo listar el directorio de almacenamiento",
                context={"path": str(self.storage_root), "os_error": str(e)},
            )
        return sorted(names)

    async def get(self, path: str) -> str:
        absolute_path = self._resolve(path)
        try:
            async with aiofiles.open(
                absolute_path, "r", encoding="utf-8", errors="replace", newline=""
            ) as f:
                return await f.read()
        except OSError as e:
            logger.error("Failed to read %s: %s", absolute_path, str(e))
            raise FileStorageError(
                message="No se pudo leer el archivo",
                context={"path": str(absolute_path), "os_error": str(e)},
            )

    async def put(self, path: str, content: str) -> None:
        absolute_path = self._resolve(path)
        try:
            # Names containing "/" land in subdirectories of the root
            await aiofiles.os.makedirs(absolute_path.parent, exist_ok=True)
            async with aiofiles.open(
                absolute_path, "w", encoding="utf-8", newline=""
            ) as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to write %s: %s", absolute_path, str(e))
            raise FileStorageError(
                message="No se pudo guardar el archivo",
                context={"path": str(absolute_path), "os_error": str(e)},
            )
        logger.debug("File written: %s (%d chars)", absolute_path, len(content))

    async def delete(self, path: str) -> None:
        absolute_path = self._resolve(path)
        try:
            await aiofiles.os.remove(absolute_path)
        except OSError as e:
            logger.error("Failed to delete %s: %s", absolute_path, str(e))
            raise FileStorageError(
                message="No se pudo eliminar el archivo",
                context={"path": str(absolute_path), "os_error": str(e)},
            )
