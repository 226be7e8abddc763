"""
FileStore Backend — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixtures (function-scoped, created fresh for each test):
    ├── temp_storage: Temporary directory for LocalStorage tests
    ├── memory_storage: Empty InMemoryStorage
    ├── handler: FileStorageHandler over memory_storage
    ├── test_client: HTTPX AsyncClient against an app wired to memory_storage
    └── local_client: HTTPX AsyncClient against an app wired to LocalStorage
"""

import os
import tempfile

# Override settings for testing BEFORE any filestore imports
os.environ["STORAGE_ROOT"] = tempfile.mkdtemp(prefix="filestore_test_")
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from filestore.dependencies import get_storage
from filestore.main import create_app
from filestore.services.file_handler import FileStorageHandler
from filestore.services.local_storage import LocalStorage
from filestore.services.memory_storage import InMemoryStorage


@pytest.fixture
def temp_storage(tmp_path):
    """A fresh, empty storage root for each test (cleaned up by pytest)."""
    storage_dir = tmp_path / "storage"
    storage_dir.mkdir()
    return str(storage_dir)


@pytest.fixture
def memory_storage():
    return InMemoryStorage()


@pytest.fixture
def handler(memory_storage):
    return FileStorageHandler(memory_storage)


@pytest_asyncio.fixture
async def test_client(memory_storage):
    """
    Async HTTP client talking to a fresh app instance.

    get_storage is overridden so every request in the test shares
    memory_storage, which the test can also inspect directly.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/files")
            assert response.status_code == 200
    """
    app = create_app()
    app.dependency_overrides[get_storage] = lambda: memory_storage
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def local_client(temp_storage):
    """Same as test_client, but backed by LocalStorage on a temp directory."""
    storage = LocalStorage(temp_storage)
    app = create_app()
    app.dependency_overrides[get_storage] = lambda: storage
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
