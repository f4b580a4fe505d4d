"""Authentication routes for password-based admin sessions."""

import logging
import secrets

from fastapi import APIRouter, Request, Response

from .. import config
from ..dependencies import JsonBody, Sessions, get_current_session, session_id_from_request
from ..errors import SessionError, Unauthorized
from ..logging import content_logger
from ..models.requests import AdminLoginRequest
from ..models.responses import AdminStatusResponse, SuccessResponse
from .tokens import create_session_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def password_matches(candidate) -> bool:
    """Constant-time comparison against the configured admin password."""
    if not isinstance(candidate, str):
        return False
    return secrets.compare_digest(
        candidate.encode("utf-8"), config.ADMIN_PASSWORD.encode("utf-8")
    )


def set_session_cookie(response: Response, session_token: str) -> None:
    response.set_cookie(
        key=config.SESSION_COOKIE_NAME,
        value=create_session_token(session_token),
        max_age=config.SESSION_MAX_AGE_SECONDS,
        path="/",
        httponly=True,
        samesite="lax",
        secure=config.COOKIE_SECURE,
    )


@router.post("/admin", response_model=SuccessResponse)
async def login(
    request: Request,
    response: Response,
    sessions: Sessions,
    body: JsonBody,
) -> SuccessResponse:
    """Log in with the shared admin password.

    On success a new admin session is started and its id is sent back in an
    HTTP-only cookie valid for 24 hours. A wrong password leaves any
    existing session untouched. Any body that does not carry the password,
    including malformed JSON, is a 401.
    """
    credentials = (
        AdminLoginRequest.model_validate(body) if isinstance(body, dict) else AdminLoginRequest()
    )
    if not password_matches(credentials.password):
        content_logger.login_failed()
        raise Unauthorized()

    # Replace whatever session the browser was holding
    previous = session_id_from_request(request)
    if previous:
        await sessions.destroy(previous)

    session = await sessions.create(is_admin=True)
    set_session_cookie(response, session.token)
    logger.info("Admin session started")
    return SuccessResponse()


@router.post("/logout", response_model=SuccessResponse)
async def logout(request: Request, response: Response, sessions: Sessions) -> SuccessResponse:
    """End the current session. Succeeds even without one."""
    session_id = session_id_from_request(request)
    if session_id:
        try:
            await sessions.destroy(session_id)
        except Exception as e:
            raise SessionError(f"Session destruction failed: {e}") from e

    response.delete_cookie(
        key=config.SESSION_COOKIE_NAME,
        path="/",
        httponly=True,
        samesite="lax",
        secure=config.COOKIE_SECURE,
    )
    return SuccessResponse()


@router.get("/check", response_model=AdminStatusResponse)
async def check(request: Request, sessions: Sessions) -> AdminStatusResponse:
    """Report whether the caller holds an admin session.

    Never fails: any internal error reads as "not admin".
    """
    try:
        session = await get_current_session(request, sessions)
    except Exception:
        logger.warning("Admin status check failed", exc_info=True)
        return AdminStatusResponse(is_admin=False)
    return AdminStatusResponse(is_admin=bool(session and session.is_admin))
