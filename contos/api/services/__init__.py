"""Resource services."""

from .music_service import MusicService
from .site_config_service import SiteConfigService
from .story_service import StoryService

__all__ = ["StoryService", "MusicService", "SiteConfigService"]
