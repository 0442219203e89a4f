"""Streambase API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map StreambaseError, validation errors, and everything else
      onto one JSON error envelope
    - CORS configured from settings (permissive by default)
    - Database initialized on startup and disposed on shutdown via lifespan

Run with: uvicorn streambase.main:app
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from streambase.api.error_handlers import register_error_handlers
from streambase.api.routes import health, users, videos
from streambase.config import get_settings
from streambase.infrastructure.database import close_db, init_db
from streambase.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Streambase API started")
    yield
    await close_db()
    logger.info("Streambase API shut down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Streambase API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(users.router)
    app.include_router(videos.router)

    register_error_handlers(app)
    return app


app = create_app()
