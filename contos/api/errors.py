"""Error taxonomy and its mapping onto HTTP responses.

Services raise these; a single handler registered on the app turns them
into ``{"error": ...}`` bodies. Server-side failures keep their detail in
the logs and only send a generic message to the client.
"""

import logging
from typing import Iterable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ContosError(Exception):
    """Base class for errors with a well-defined HTTP status."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    public_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.public_message
        super().__init__(self.message)

    def to_content(self) -> dict:
        # 5xx detail stays in the logs
        if self.status_code >= 500:
            return {"error": self.public_message}
        return {"error": self.message}


class ValidationError(ContosError):
    """Malformed or missing required input."""

    status_code = status.HTTP_400_BAD_REQUEST
    public_message = "Validation error"

    def __init__(self, details: list[dict], message: Optional[str] = None):
        super().__init__(message)
        self.details = details

    @classmethod
    def from_errors(cls, errors: Iterable[dict]) -> "ValidationError":
        """Build from pydantic/FastAPI error dicts (``loc``, ``msg``)."""
        return cls(field_errors(errors))

    def to_content(self) -> dict:
        return {"error": self.message, "details": self.details}


class Unauthorized(ContosError):
    """Bad admin credentials."""

    status_code = status.HTTP_401_UNAUTHORIZED
    public_message = "Invalid password"


class Forbidden(ContosError):
    """Missing or expired admin session on a protected route."""

    status_code = status.HTTP_403_FORBIDDEN
    public_message = "Admin access required"


class NotFound(ContosError):
    """Resource id does not resolve."""

    status_code = status.HTTP_404_NOT_FOUND
    public_message = "Not found"

    @classmethod
    def for_resource(cls, resource: str) -> "NotFound":
        return cls(f"{resource} not found")


class StoreError(ContosError):
    """Unexpected failure from the document store."""


class SessionError(ContosError):
    """The session mechanism failed."""

    public_message = "Logout failed"


def field_errors(errors: Iterable[dict]) -> list[dict]:
    """Flatten pydantic error dicts into ``{"field", "message"}`` pairs.

    Errors about the body as a whole (missing, not an object, not JSON)
    are reported on the field ``"body"``.
    """
    details = []
    for error in errors:
        # FastAPI prefixes body errors with "body"; JSON decode errors add a char offset
        if error.get("type") == "json_invalid":
            loc = []
        else:
            loc = [str(part) for part in error.get("loc", ()) if part != "body"]
        field = ".".join(loc) or "body"
        details.append({"field": field, "message": error.get("msg", "Invalid value")})
    return details


async def contos_error_handler(request: Request, exc: ContosError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            f"{request.method} {request.url.path} failed: {exc}",
            extra={"error_type": type(exc).__name__},
            exc_info=exc,
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    error = ValidationError.from_errors(exc.errors())
    return JSONResponse(status_code=error.status_code, content=error.to_content())


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}",
        extra={"error_type": type(exc).__name__},
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": ContosError.public_message},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the error handlers to the application."""
    app.add_exception_handler(ContosError, contos_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
