"""Tests for the in-memory document store."""

import re

import pytest

from contos.api.errors import StoreError
from contos.api.store import InMemoryDocumentStore, create_store
from contos.api.store.memory import generate_id


class TestInMemoryDocumentStore:
    """Collection-scoped CRUD semantics."""

    @pytest.mark.asyncio
    async def test_add_generates_firestore_shaped_ids(self, store):
        doc_id = await store.add("stories", {"title": "x"})

        assert re.fullmatch(r"[A-Za-z0-9]{20}", doc_id)
        assert (await store.get("stories", doc_id)).data == {"title": "x"}

    @pytest.mark.asyncio
    async def test_collections_are_isolated(self, store):
        doc_id = await store.add("stories", {"title": "x"})

        assert await store.get("music", doc_id) is None
        assert await store.list_documents("music") == []

    @pytest.mark.asyncio
    async def test_reads_are_copies(self, store):
        doc_id = await store.add("stories", {"tags": ["a"]})

        doc = await store.get("stories", doc_id)
        doc.data["tags"].append("b")

        assert (await store.get("stories", doc_id)).data == {"tags": ["a"]}

    @pytest.mark.asyncio
    async def test_update_merges_fields(self, store):
        doc_id = await store.add("stories", {"title": "x", "content": "y"})

        await store.update("stories", doc_id, {"title": "z"})

        assert (await store.get("stories", doc_id)).data == {"title": "z", "content": "y"}

    @pytest.mark.asyncio
    async def test_update_missing_raises_store_error(self, store):
        with pytest.raises(StoreError):
            await store.update("stories", "missing", {"title": "z"})

    @pytest.mark.asyncio
    async def test_set_merge_and_replace(self, store):
        await store.set("site", "config", {"a": 1, "b": 2})
        await store.set("site", "config", {"b": 3}, merge=True)
        assert (await store.get("site", "config")).data == {"a": 1, "b": 3}

        await store.set("site", "config", {"c": 4})
        assert (await store.get("site", "config")).data == {"c": 4}

    @pytest.mark.asyncio
    async def test_delete(self, store):
        doc_id = await store.add("music", {"name": "n"})

        await store.delete("music", doc_id)
        await store.delete("music", doc_id)

        assert await store.get("music", doc_id) is None

    @pytest.mark.asyncio
    async def test_list_keeps_insertion_order(self, store):
        ids = [await store.add("music", {"n": i}) for i in range(5)]

        assert [d.id for d in await store.list_documents("music")] == ids

    def test_reset(self, store):
        store.collections["stories"] = {"x": {}}

        store.reset()

        assert store.collections == {}


class TestCreateStore:
    """Tests for backend selection."""

    def test_memory_backend(self):
        assert isinstance(create_store("memory"), InMemoryDocumentStore)

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            create_store("redis")

    def test_generate_id_length(self):
        assert len(generate_id()) == 20
