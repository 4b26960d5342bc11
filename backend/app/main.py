"""BlogHub API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Every /api request except health passes SessionAuthMiddleware first
    - CORS middleware is outermost so preflights are answered before the gate
    - Global error handlers map BlogHubError → structured JSON responses
    - Database initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Middleware added gate-first, CORS-last: Starlette wraps in reverse order
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import authors, categories, health
from app.api.session_auth import SessionAuthMiddleware
from app.config import get_settings
from app.infrastructure import database
from app.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    database.init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("BlogHub API started")
    yield
    if database.db_manager:
        await database.db_manager.dispose()
    logger.info("BlogHub API shutting down")


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="BlogHub API", version="1.0.0", lifespan=lifespan)

    app.add_middleware(
        SessionAuthMiddleware,
        cookie_name=settings.session_cookie_name,
        header_name=settings.session_header_name,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(categories.router)
    app.include_router(authors.router)

    register_error_handlers(app)
    return app


app = create_app()
