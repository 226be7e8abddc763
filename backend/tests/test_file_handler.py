"""
FileStore Backend — File Storage Handler Unit Tests
=====================================================

What:  Tests for FileStorageHandler validation, existence checks and results.
How:   Runs the handler against InMemoryStorage; a few tests use an AsyncMock
       backend to assert that rejected requests never reach put/delete.

What we test:
    ✅ list returns backend names with the listing message
    ✅ create/read round-trip, 409 on duplicate, 422 on missing fields
    ✅ update replaces content, 404 on unknown name, 422 before 404
    ✅ delete removes, 404 on unknown name
    ✅ full create → read → update → read → delete → read scenario
"""

import pytest
from unittest.mock import AsyncMock

from filestore.exceptions import ConflictError, NotFoundError, ValidationError
from filestore.services.file_handler import FileStorageHandler, collect_string_errors
from filestore.services.memory_storage import InMemoryStorage
from filestore.services.storage_base import StorageBackend


def mock_backend(exists: bool = False) -> AsyncMock:
    backend = AsyncMock(spec=StorageBackend)
    backend.exists.return_value = exists
    return backend


class TestCollectStringErrors:
    """Tests for the required-string precondition check."""

    def test_valid_payload_has_no_errors(self):
        assert collect_string_errors({"filename": "a.txt", "content": "x"},
                                     {"filename": False, "content": True}) == {}

    def test_missing_fields_are_all_reported(self):
        errors = collect_string_errors({}, {"filename": False, "content": True})
        assert set(errors) == {"filename", "content"}
        assert errors["filename"] == ["El campo filename es obligatorio."]

    def test_null_counts_as_missing(self):
        errors = collect_string_errors({"content": None}, {"content": True})
        assert errors == {"content": ["El campo content es obligatorio."]}

    def test_non_string_rejected(self):
        errors = collect_string_errors({"content": 42}, {"content": True})
        assert errors == {"content": ["El campo content debe ser una cadena de texto."]}

    def test_empty_string_respects_allow_empty(self):
        assert collect_string_errors({"content": ""}, {"content": True}) == {}
        assert "filename" in collect_string_errors({"filename": ""}, {"filename": False})

    def test_blank_filename_rejected(self):
        errors = collect_string_errors({"filename": "   "}, {"filename": False})
        assert errors == {"filename": ["El campo filename es obligatorio."]}

    def test_blank_content_accepted(self):
        assert collect_string_errors({"content": "  \n"}, {"content": True}) == {}


class TestListFiles:

    @pytest.mark.asyncio
    async def test_list_empty(self, handler):
        result = await handler.list_files()
        assert result.message == "Listado de ficheros"
        assert result.content == []

    @pytest.mark.asyncio
    async def test_list_in_backend_order(self):
        storage = InMemoryStorage({"b.txt": "2", "a.txt": "1"})
        result = await FileStorageHandler(storage).list_files()
        assert result.content == ["b.txt", "a.txt"]


class TestCreateFile:

    @pytest.mark.asyncio
    async def test_create_then_read_round_trip(self, handler):
        result = await handler.create_file({"filename": "notes.txt", "content": "hello"})
        assert result.message == "Guardado con éxito"

        read = await handler.read_file("notes.txt")
        assert read.content == "hello"

    @pytest.mark.asyncio
    async def test_create_with_empty_content(self, handler, memory_storage):
        await handler.create_file({"filename": "empty.txt", "content": ""})
        assert await memory_storage.get("empty.txt") == ""

    @pytest.mark.asyncio
    async def test_create_existing_conflicts_and_keeps_content(self, handler, memory_storage):
        await handler.create_file({"filename": "f.txt", "content": "c1"})

        with pytest.raises(ConflictError, match="El archivo ya existe"):
            await handler.create_file({"filename": "f.txt", "content": "c2"})

        assert await memory_storage.get("f.txt") == "c1"

    @pytest.mark.asyncio
    async def test_create_conflict_never_writes(self):
        backend = mock_backend(exists=True)
        with pytest.raises(ConflictError):
            await FileStorageHandler(backend).create_file({"filename": "f", "content": "x"})
        backend.put.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload, missing",
        [
            ({"content": "x"}, {"filename"}),
            ({"filename": "f.txt"}, {"content"}),
            ({}, {"filename", "content"}),
            ({"filename": "", "content": "x"}, {"filename"}),
            ({"filename": " \t ", "content": "x"}, {"filename"}),
        ],
    )
    async def test_create_missing_fields(self, handler, memory_storage, payload, missing):
        with pytest.raises(ValidationError) as exc_info:
            await handler.create_file(payload)

        assert set(exc_info.value.errors) == missing
        assert await memory_storage.list() == []

    @pytest.mark.asyncio
    async def test_create_validation_happens_before_storage(self):
        backend = mock_backend()
        with pytest.raises(ValidationError):
            await FileStorageHandler(backend).create_file({"filename": "f"})
        backend.exists.assert_not_awaited()
        backend.put.assert_not_awaited()


class TestReadFile:

    @pytest.mark.asyncio
    async def test_read_unknown(self, handler):
        with pytest.raises(NotFoundError, match="Archivo no encontrado"):
            await handler.read_file("missing.txt")

    @pytest.mark.asyncio
    async def test_read_returns_message_and_content(self):
        handler = FileStorageHandler(InMemoryStorage({"a.txt": "línea 1\nlínea 2"}))
        result = await handler.read_file("a.txt")
        assert result.message == "Archivo leído con éxito"
        assert result.content == "línea 1\nlínea 2"


class TestUpdateFile:

    @pytest.mark.asyncio
    async def test_update_replaces_content(self, handler):
        await handler.create_file({"filename": "f.txt", "content": "c1"})

        result = await handler.update_file("f.txt", {"content": "c2"})

        assert result.message == "Actualizado con éxito"
        assert (await handler.read_file("f.txt")).content == "c2"

    @pytest.mark.asyncio
    async def test_update_unknown(self, handler, memory_storage):
        with pytest.raises(NotFoundError, match="El archivo no existe"):
            await handler.update_file("missing.txt", {"content": "x"})
        assert not await memory_storage.exists("missing.txt")

    @pytest.mark.asyncio
    async def test_update_missing_content_keeps_file(self, handler, memory_storage):
        await handler.create_file({"filename": "f.txt", "content": "c1"})

        with pytest.raises(ValidationError) as exc_info:
            await handler.update_file("f.txt", {})

        assert "content" in exc_info.value.errors
        assert await memory_storage.get("f.txt") == "c1"

    @pytest.mark.asyncio
    async def test_update_validates_before_existence(self, handler):
        # Unknown name without content is a 422, not a 404
        with pytest.raises(ValidationError):
            await handler.update_file("missing.txt", {"filename": "ignored"})


class TestDeleteFile:

    @pytest.mark.asyncio
    async def test_delete_then_read_is_not_found(self, handler):
        await handler.create_file({"filename": "f.txt", "content": "x"})

        result = await handler.delete_file("f.txt")

        assert result.message == "Eliminado con éxito"
        with pytest.raises(NotFoundError):
            await handler.read_file("f.txt")

    @pytest.mark.asyncio
    async def test_delete_unknown_never_deletes(self):
        backend = mock_backend(exists=False)
        with pytest.raises(NotFoundError):
            await FileStorageHandler(backend).delete_file("missing.txt")
        backend.delete.assert_not_awaited()


class TestScenario:

    @pytest.mark.asyncio
    async def test_notes_lifecycle(self, handler):
        assert (await handler.create_file(
            {"filename": "notes.txt", "content": "hello"}
        )).message == "Guardado con éxito"
        assert (await handler.read_file("notes.txt")).content == "hello"

        await handler.update_file("notes.txt", {"content": "world"})
        assert (await handler.read_file("notes.txt")).content == "world"

        await handler.delete_file("notes.txt")
        with pytest.raises(NotFoundError):
            await handler.read_file("notes.txt")
