"""Signed session cookie values.

The cookie only carries the session id, signed so that forged or altered
ids are rejected before any session lookup. Session state stays on the
server.
"""

from datetime import datetime, timedelta, timezone

import jwt

from .. import config

ALGORITHM = "HS256"


def create_session_token(session_id: str, expires_delta: timedelta | None = None) -> str:
    """Create the signed cookie value for a session.

    Args:
        session_id: The opaque server-side session token
        expires_delta: Optional custom lifetime (defaults to the session max age)

    Returns:
        Encoded JWT string
    """
    if expires_delta is None:
        expires_delta = timedelta(seconds=config.SESSION_MAX_AGE_SECONDS)

    now = datetime.now(timezone.utc)
    payload = {
        "sid": session_id,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, config.SESSION_SECRET, algorithm=ALGORITHM)


def verify_session_token(token: str) -> str | None:
    """Verify a cookie value and return the session id it carries.

    Returns:
        The session id if the signature is valid and unexpired, else None
    """
    try:
        payload = jwt.decode(token, config.SESSION_SECRET, algorithms=[ALGORITHM])
    except jwt.ExpiredSignatureError:
        return None
    except jwt.InvalidTokenError:
        return None
    session_id = payload.get("sid")
    return session_id if isinstance(session_id, str) else None
