"""FastAPI dependency injection for the store, sessions and services."""

import json
from typing import Annotated, Any, Optional

from fastapi import Depends, Request

from . import config
from .auth.sessions import InMemorySessionStore, Session, session_store
from .auth.tokens import verify_session_token
from .errors import Forbidden
from .services import MusicService, SiteConfigService, StoryService
from .store import DocumentStore, get_store


# Session store - process-local
def get_session_store() -> InMemorySessionStore:
    """Get the session store."""
    return session_store


Store = Annotated[DocumentStore, Depends(get_store)]
Sessions = Annotated[InMemorySessionStore, Depends(get_session_store)]


# Services - depend on the store
def get_story_service(store: Store) -> StoryService:
    """Get a StoryService instance with injected store."""
    return StoryService(store)


def get_music_service(store: Store) -> MusicService:
    """Get a MusicService instance with injected store."""
    return MusicService(store)


def get_site_config_service(store: Store) -> SiteConfigService:
    """Get a SiteConfigService instance with injected store."""
    return SiteConfigService(store)


# Type aliases for cleaner route signatures
Stories = Annotated[StoryService, Depends(get_story_service)]
MusicTracks = Annotated[MusicService, Depends(get_music_service)]
SiteSettings = Annotated[SiteConfigService, Depends(get_site_config_service)]


async def read_json_body(request: Request) -> Any:
    """Decoded JSON body, or None when it is missing or not valid JSON."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


# Lenient body for endpoints that never answer 400
JsonBody = Annotated[Any, Depends(read_json_body)]


def session_id_from_request(request: Request) -> Optional[str]:
    """Session id from the signed cookie, if present and valid."""
    cookie = request.cookies.get(config.SESSION_COOKIE_NAME)
    if not cookie:
        return None
    return verify_session_token(cookie)


async def get_current_session(request: Request, sessions: Sessions) -> Optional[Session]:
    """Resolve the caller's live session, or None."""
    session_id = session_id_from_request(request)
    if session_id is None:
        return None
    return await sessions.get(session_id)


CurrentSession = Annotated[Optional[Session], Depends(get_current_session)]


# Authorization gate for mutating routes
async def require_admin(session: CurrentSession) -> Session:
    """Let the request through only with a live admin session.

    Raises:
        Forbidden: 403 if there is no session or it lacks admin rights
    """
    if session is None or not session.is_admin:
        raise Forbidden()
    return session


AdminSession = Annotated[Session, Depends(require_admin)]
