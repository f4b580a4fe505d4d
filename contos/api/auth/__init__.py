"""Authentication module for admin access control."""

from .sessions import InMemorySessionStore, Session, session_store
from .tokens import create_session_token, verify_session_token

__all__ = [
    "InMemorySessionStore",
    "Session",
    "session_store",
    "create_session_token",
    "verify_session_token",
]
