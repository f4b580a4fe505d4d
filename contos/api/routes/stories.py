"""Story CRUD endpoints."""

from fastapi import APIRouter, status

from ..dependencies import AdminSession, Stories
from ..models.requests import StoryInput
from ..models.responses import Story

router = APIRouter()


@router.get(
    "",
    response_model=list[Story],
    summary="List all stories",
    description="Get every story, newest first.",
)
async def list_stories(service: Stories):
    """List all stories ordered by creation time, descending."""
    return await service.list_stories()


@router.get(
    "/{story_id}",
    response_model=Story,
    summary="Get a story",
)
async def get_story(story_id: str, service: Stories):
    """Get a story by ID."""
    return await service.get_story(story_id)


@router.post(
    "",
    response_model=Story,
    status_code=status.HTTP_201_CREATED,
    summary="Create a story",
    description="Admin only. Timestamps and id are assigned by the server.",
)
async def create_story(request: StoryInput, service: Stories, admin: AdminSession):
    """Create a new story."""
    return await service.create_story(request)


@router.put(
    "/{story_id}",
    response_model=Story,
    summary="Replace a story",
    description="Admin only. Replaces title, content and cover; keeps createdAt.",
)
async def update_story(story_id: str, request: StoryInput, service: Stories, admin: AdminSession):
    """Update an existing story."""
    return await service.update_story(story_id, request)


@router.delete(
    "/{story_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a story",
    description="Admin only.",
)
async def delete_story(story_id: str, service: Stories, admin: AdminSession):
    """Delete a story."""
    await service.delete_story(story_id)
