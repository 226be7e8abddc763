"""
FileStore Backend — Abstract Storage Backend Interface
========================================================

What:  Abstract base class defining the five storage primitives the
       file handler is allowed to use.
How:   Concrete backends inherit from StorageBackend and implement every
       method. The handler receives an instance through FastAPI dependency
       injection (see filestore.dependencies).
Who:   Called by FileStorageHandler; implemented by LocalStorage and
       InMemoryStorage.

Implementations:
    - LocalStorage:    Files in a rooted directory on disk (default)
    - InMemoryStorage: Dict-backed, used by tests and STORAGE_BACKEND=memory
"""

from abc import ABC, abstractmethod
from typing import List


class StorageBackend(ABC):
    """
    Abstract interface for a flat, name-addressed file store.

    Contract:
        - Names are the strings the client supplied; backends decide how
          (and whether) they map onto real paths
        - Content is text: put() stores a str, get() returns a str
        - Failures are raised as FileStorageError (or a subclass); nothing
          here translates them into HTTP responses
    """

    #: Short identifier reported by the health check
    name: str = "abstract"

    @abstractmethod
    async def exists(self, path: str) -> bool:
        """Return True if a file with this name exists."""
        ...

    @abstractmethod
    async def list(self) -> List[str]:
        """
        Return the names of the files directly under the root.

        Non-recursive. Ordering is up to the backend.
        """
        ...

    @abstractmethod
    async def get(self, path: str) -> str:
        """Return the full content of the file as a string."""
        ...

    @abstractmethod
    async def put(self, path: str, content: str) -> None:
        """Write `content` to the file, creating or replacing it."""
        ...

    @abstractmethod
    async def delete(self, path: str) -> None:
        """Remove the file."""
        ...
