"""Server-side admin sessions.

Sessions live in process memory for a fixed time from creation. They are
lost on restart and are not shared between worker processes; a deployment
running several processes needs an external session store behind the same
interface.
"""

import logging
import secrets
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

from .. import config

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Session:
    """An admin capability bound to an opaque token."""

    token: str
    is_admin: bool
    created_at: datetime
    expires_at: datetime

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at


class InMemorySessionStore:
    """Token -> Session mapping with absolute (non-sliding) expiry."""

    def __init__(
        self,
        max_age: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.max_age = max_age or timedelta(seconds=config.SESSION_MAX_AGE_SECONDS)
        self.clock = clock
        self._sessions: dict[str, Session] = {}

    def __len__(self) -> int:
        return len(self._sessions)

    async def create(self, is_admin: bool = True) -> Session:
        """Start a new session. Expired sessions are dropped first."""
        await self.purge_expired()
        now = self.clock()
        session = Session(
            token=secrets.token_urlsafe(32),
            is_admin=is_admin,
            created_at=now,
            expires_at=now + self.max_age,
        )
        self._sessions[session.token] = session
        return session

    async def get(self, token: str) -> Optional[Session]:
        """Look up a live session. Reading does not extend its lifetime."""
        session = self._sessions.get(token)
        if session is None:
            return None
        if session.is_expired(self.clock()):
            del self._sessions[token]
            return None
        return session

    async def destroy(self, token: str) -> None:
        """End a session. Unknown tokens are ignored."""
        self._sessions.pop(token, None)

    async def purge_expired(self) -> int:
        now = self.clock()
        expired = [token for token, s in self._sessions.items() if s.is_expired(now)]
        for token in expired:
            del self._sessions[token]
        if expired:
            logger.debug(f"Purged {len(expired)} expired sessions")
        return len(expired)


# Global session store instance
session_store = InMemorySessionStore()
