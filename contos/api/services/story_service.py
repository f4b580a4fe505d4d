"""Story service: validation and persistence of stories."""

from collections.abc import Mapping
from typing import Any, Union

from pydantic import ValidationError as PydanticValidationError

from ..errors import NotFound, ValidationError
from ..logging import content_logger
from ..models.requests import StoryInput
from ..models.responses import Story
from ..store import STORIES, Document, DocumentStore
from .clock import Clock, epoch_ms

StoryPayload = Union[StoryInput, Mapping[str, Any]]


def validate_story_input(payload: StoryPayload) -> StoryInput:
    """Check title, content and coverImageUrl are non-empty strings.

    Raises:
        ValidationError: with one entry per failing field
    """
    if isinstance(payload, StoryInput):
        return payload
    try:
        return StoryInput.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError.from_errors(e.errors())


def _to_story(doc: Document) -> Story:
    return Story.model_validate({**doc.data, "id": doc.id})


class StoryService:
    """Service for listing and managing stories."""

    def __init__(self, store: DocumentStore, clock: Clock = epoch_ms):
        self.store = store
        self.clock = clock

    async def list_stories(self) -> list[Story]:
        """All stories, newest first.

        Stories with equal ``createdAt`` keep the store's iteration order.
        """
        docs = await self.store.list_documents(STORIES)
        stories = [_to_story(doc) for doc in docs]
        stories.sort(key=lambda story: story.created_at, reverse=True)
        return stories

    async def get_story(self, story_id: str) -> Story:
        doc = await self.store.get(STORIES, story_id)
        if doc is None:
            raise NotFound.for_resource("Story")
        return _to_story(doc)

    async def create_story(self, payload: StoryPayload) -> Story:
        """Validate and persist a new story.

        Not idempotent: identical submissions create distinct stories.
        """
        story_input = validate_story_input(payload)

        now = self.clock()
        data = {
            **story_input.model_dump(by_alias=True),
            "createdAt": now,
            "updatedAt": now,
        }
        story_id = await self.store.add(STORIES, data)
        content_logger.created("Story", story_id)

        return Story.model_validate({**data, "id": story_id})

    async def update_story(self, story_id: str, payload: StoryPayload) -> Story:
        """Replace title, content and cover of an existing story.

        ``createdAt`` is preserved and ``updatedAt`` refreshed.
        """
        story_input = validate_story_input(payload)

        existing = await self.get_story(story_id)

        # Never move updatedAt backwards, even if the clock does
        now = max(self.clock(), existing.created_at, existing.updated_at)
        patch = {**story_input.model_dump(by_alias=True), "updatedAt": now}
        await self.store.update(STORIES, story_id, patch)
        content_logger.updated("Story", story_id)

        return existing.model_copy(
            update={**story_input.model_dump(), "updated_at": now}
        )

    async def delete_story(self, story_id: str) -> None:
        await self.get_story(story_id)
        await self.store.delete(STORIES, story_id)
        content_logger.deleted("Story", story_id)
