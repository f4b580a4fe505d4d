"""FastAPI application for the Contos para Dormir story site."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from . import config
from .auth.routes import router as auth_router
from .errors import register_exception_handlers
from .logging import configure_logging
from .routes import music, site_config, stories
from .store import close_store, create_store, set_store

logger = logging.getLogger(__name__)
request_logger = logging.getLogger("contos.requests")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    set_store(create_store())
    logger.info(f"Document store ready (backend={config.STORE_BACKEND})")
    if config.IS_PRODUCTION and config.ADMIN_PASSWORD == "admin":
        logger.warning("ADMIN_PASSWORD is the development default")

    yield

    await close_store()


async def log_api_requests(request: Request, call_next):
    """Log method, path, status and duration of every /api request."""
    start = time.perf_counter()
    response = await call_next(request)
    path = request.url.path
    if path.startswith("/api"):
        duration_ms = round((time.perf_counter() - start) * 1000, 1)
        request_logger.info(
            f"{request.method} {path} {response.status_code} in {duration_ms}ms",
            extra={
                "method": request.method,
                "path": path,
                "status_code": response.status_code,
                "duration_ms": duration_ms,
            },
        )
    return response


def create_app() -> FastAPI:
    """Build the application: logging, middleware, error handlers, routers."""
    configure_logging(json_format=config.LOG_FORMAT == "json", level=config.LOG_LEVEL)

    app = FastAPI(
        title="Contos para Dormir API",
        description="""
Public reader API for short illustrated bedtime stories, plus admin endpoints
to manage stories, background music and site appearance.

## Access
- Read endpoints are public.
- Mutating endpoints need an admin session: POST `/api/auth/admin` with the
  shared password; the session cookie lasts 24 hours.
        """,
        version="0.1.0",
        lifespan=lifespan,
    )

    if config.CORS_ORIGINS:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=config.CORS_ORIGINS,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )
    app.middleware("http")(log_api_requests)

    register_exception_handlers(app)

    app.include_router(auth_router, prefix="/api")  # Router already has /auth
    app.include_router(stories.router, prefix="/api/stories", tags=["Stories"])
    app.include_router(music.router, prefix="/api/music", tags=["Music"])
    app.include_router(site_config.router, prefix="/api/site-config", tags=["Site config"])

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


app = create_app()
