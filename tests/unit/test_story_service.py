"""Unit tests for StoryService against the in-memory store."""

from unittest.mock import AsyncMock

import pytest

from contos.api.errors import NotFound, StoreError, ValidationError
from contos.api.services.story_service import StoryService, validate_story_input
from contos.api.store import STORIES

VALID = {"title": "O Dragão", "content": "Era uma vez...\n\nFim.", "coverImageUrl": "https://x/c.png"}


@pytest.fixture
def service(store, clock):
    return StoryService(store, clock=clock)


class TestValidation:
    """Tests for story input validation."""

    @pytest.mark.parametrize("field", ["title", "content", "coverImageUrl"])
    def test_empty_field_rejected(self, field):
        with pytest.raises(ValidationError) as exc_info:
            validate_story_input({**VALID, field: ""})

        fields = [d["field"] for d in exc_info.value.details]
        assert fields == [field]

    def test_missing_fields_reported_per_field(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_story_input({})

        fields = {d["field"] for d in exc_info.value.details}
        assert fields == {"title", "content", "coverImageUrl"}

    def test_non_string_rejected(self):
        with pytest.raises(ValidationError):
            validate_story_input({**VALID, "title": 42})


class TestCreateStory:
    """Tests for create_story."""

    @pytest.mark.asyncio
    async def test_create_then_get_round_trip(self, service):
        created = await service.create_story(VALID)
        fetched = await service.get_story(created.id)

        assert fetched == created
        assert fetched.created_at == fetched.updated_at
        assert fetched.title == VALID["title"]
        assert fetched.content == VALID["content"]
        assert fetched.cover_image_url == VALID["coverImageUrl"]

    @pytest.mark.asyncio
    async def test_client_timestamps_and_id_ignored(self, service, clock):
        created = await service.create_story(
            {**VALID, "id": "mine", "createdAt": 1, "updatedAt": 2}
        )

        assert created.id != "mine"
        assert created.created_at == created.updated_at
        assert created.created_at >= 1_700_000_000_000

    @pytest.mark.asyncio
    async def test_identical_submissions_create_two_stories(self, service):
        first = await service.create_story(VALID)
        second = await service.create_story(VALID)

        assert first.id != second.id
        assert len(await service.list_stories()) == 2

    @pytest.mark.asyncio
    async def test_invalid_input_never_touches_store(self, clock):
        store = AsyncMock()
        service = StoryService(store, clock=clock)

        with pytest.raises(ValidationError):
            await service.create_story({**VALID, "title": ""})

        store.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_failure_propagates(self, clock):
        store = AsyncMock()
        store.add = AsyncMock(side_effect=StoreError("unavailable"))
        service = StoryService(store, clock=clock)

        with pytest.raises(StoreError):
            await service.create_story(VALID)


class TestListStories:
    """Tests for list_stories."""

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, service):
        assert await service.list_stories() == []

    @pytest.mark.asyncio
    async def test_sorted_newest_first(self, service, clock):
        ids = []
        for i in range(4):
            clock.advance(1000)
            story = await service.create_story({**VALID, "title": f"Story {i}"})
            ids.append(story.id)

        stories = await service.list_stories()

        assert [s.id for s in stories] == list(reversed(ids))
        created = [s.created_at for s in stories]
        assert created == sorted(created, reverse=True)

    @pytest.mark.asyncio
    async def test_equal_timestamps_keep_store_order(self, store):
        for doc_id in ("first", "second"):
            await store.set(STORIES, doc_id, {**VALID, "createdAt": 5, "updatedAt": 5})

        stories = await StoryService(store).list_stories()

        assert [s.id for s in stories] == ["first", "second"]


class TestUpdateStory:
    """Tests for update_story."""

    @pytest.mark.asyncio
    async def test_update_preserves_created_at_and_advances_updated_at(self, service, clock):
        created = await service.create_story(VALID)
        clock.advance(5000)

        updated = await service.update_story(created.id, {**VALID, "title": "A2"})

        assert updated.title == "A2"
        assert updated.created_at == created.created_at
        assert updated.updated_at > created.updated_at

        stored = await service.get_story(created.id)
        assert stored == updated

    @pytest.mark.asyncio
    async def test_updated_at_never_moves_backwards(self, service, clock):
        created = await service.create_story(VALID)
        clock.advance(-60_000)

        updated = await service.update_story(created.id, VALID)

        assert updated.updated_at >= created.updated_at
        assert updated.updated_at >= updated.created_at

    @pytest.mark.asyncio
    async def test_update_missing_story_raises_not_found(self, service, store):
        with pytest.raises(NotFound):
            await service.update_story("missing", VALID)

        assert await store.list_documents(STORIES) == []

    @pytest.mark.asyncio
    async def test_update_validates_before_existence_check(self, service):
        with pytest.raises(ValidationError):
            await service.update_story("missing", {**VALID, "content": ""})


class TestGetAndDeleteStory:
    """Tests for get_story and delete_story."""

    @pytest.mark.asyncio
    async def test_get_missing_raises_not_found(self, service):
        with pytest.raises(NotFound) as exc_info:
            await service.get_story("nope")

        assert exc_info.value.message == "Story not found"

    @pytest.mark.asyncio
    async def test_delete_then_get_raises_not_found(self, service):
        created = await service.create_story(VALID)

        await service.delete_story(created.id)

        with pytest.raises(NotFound):
            await service.get_story(created.id)

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, clock):
        store = AsyncMock()
        store.get = AsyncMock(return_value=None)
        service = StoryService(store, clock=clock)

        with pytest.raises(NotFound):
            await service.delete_story("missing")

        store.delete.assert_not_called()
