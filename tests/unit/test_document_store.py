"""DocumentStore unit tests.

Whole-document load/save/remove against a temporary directory.
"""

import json

import pytest

from app.exceptions import PersistenceError
from app.services.document_store import (
    FIELD_DEFINITIONS_KEY,
    PROJECTS_KEY,
    USERS_KEY,
    DocumentStore,
)


class TestDocumentStore:
    @pytest.mark.asyncio
    async def test_load_missing_returns_none(self, temp_store):
        assert await temp_store.load(PROJECTS_KEY) is None

    @pytest.mark.asyncio
    async def test_save_and_load(self, temp_store):
        document = [{"id": "p-1", "name": "한글 프로젝트", "efforts": [{"development_days": 2.5}]}]
        await temp_store.save(PROJECTS_KEY, document)

        assert await temp_store.load(PROJECTS_KEY) == document

    @pytest.mark.asyncio
    async def test_saved_file_is_readable_json(self, temp_store, tmp_path):
        await temp_store.save(USERS_KEY, [{"name": "김개발"}])

        content = (tmp_path / "users.json").read_text(encoding="utf-8")
        assert "김개발" in content
        assert json.loads(content) == [{"name": "김개발"}]

    @pytest.mark.asyncio
    async def test_save_replaces_whole_document(self, temp_store):
        await temp_store.save(FIELD_DEFINITIONS_KEY, [{"id": "f1"}, {"id": "f2"}])
        await temp_store.save(FIELD_DEFINITIONS_KEY, [])

        assert await temp_store.load(FIELD_DEFINITIONS_KEY) == []

    @pytest.mark.asyncio
    async def test_no_temp_file_left(self, temp_store, tmp_path):
        await temp_store.save(PROJECTS_KEY, [])
        assert not list(tmp_path.glob("*.tmp"))

    @pytest.mark.asyncio
    async def test_corrupt_document_raises(self, temp_store, tmp_path):
        (tmp_path / "projects.json").write_text("{not json", encoding="utf-8")

        with pytest.raises(PersistenceError) as exc_info:
            await temp_store.load(PROJECTS_KEY)
        assert exc_info.value.details["key"] == PROJECTS_KEY

    @pytest.mark.asyncio
    async def test_unserializable_document_raises(self, temp_store):
        with pytest.raises(PersistenceError):
            await temp_store.save(PROJECTS_KEY, [object()])

    @pytest.mark.asyncio
    async def test_unknown_key_raises(self, temp_store):
        with pytest.raises(PersistenceError):
            await temp_store.load("secrets")

    @pytest.mark.asyncio
    async def test_remove(self, temp_store):
        await temp_store.save(PROJECTS_KEY, [{"id": "p-1"}])
        await temp_store.remove(PROJECTS_KEY)

        assert await temp_store.load(PROJECTS_KEY) is None

    @pytest.mark.asyncio
    async def test_remove_missing_is_noop(self, temp_store):
        await temp_store.remove(PROJECTS_KEY)

    def test_creates_base_directory(self, tmp_path):
        target = tmp_path / "nested" / "data"
        DocumentStore(base_path=str(target))
        assert target.is_dir()
