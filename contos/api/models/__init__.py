"""Pydantic models for API requests and responses."""

from .requests import AdminLoginRequest, MusicInput, SiteConfigUpdate, StoryInput
from .responses import (
    AdminStatusResponse,
    Music,
    SiteConfig,
    SiteConfigUpdateResponse,
    Story,
    SuccessResponse,
)

__all__ = [
    "AdminLoginRequest",
    "StoryInput",
    "MusicInput",
    "SiteConfigUpdate",
    "Story",
    "Music",
    "SiteConfig",
    "SiteConfigUpdateResponse",
    "SuccessResponse",
    "AdminStatusResponse",
]
