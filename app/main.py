"""
Main FastAPI application.

This is the entry point for the API server.
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from app.core.config import Settings, settings as default_settings
from app.core.logging_config import configure_logging
from app.db.seed_data import fallback_records
from app.db.session import build_engine, build_session_maker
from app.errors import AppError, app_error_handler
from app.routers import advocates, health
from app.services.advocate_sources import FallbackAdvocateSource, PrimaryAdvocateSource
from app.services.rate_limiter import RateLimiter
from app.services.search_cache import SearchResultCache
from app.workers.housekeeping import PeriodicSweeper

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the application around an explicit Settings instance."""
    settings = settings or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Create shared state on startup and tear it down on shutdown.

        The cache and rate limiter live for the lifetime of the process
        and are reached through app.state, never module globals.
        """
        configure_logging(settings)
        logger.info("Starting %s...", settings.APP_NAME)

        engine = build_engine(settings)
        session_maker = build_session_maker(engine) if engine is not None else None

        state = app.state
        state.settings = settings
        state.started_at = time.monotonic()
        state.search_cache = SearchResultCache(
            max_entries=settings.SEARCH_CACHE_MAX_ENTRIES,
            default_ttl_seconds=settings.SEARCH_CACHE_TTL_SECONDS,
        )
        state.rate_limiter = RateLimiter(
            max_requests=settings.RATE_LIMIT_MAX_REQUESTS,
            window_seconds=settings.RATE_LIMIT_WINDOW_SECONDS,
        )
        state.primary_source = PrimaryAdvocateSource(
            session_maker,
            timeout_seconds=settings.DB_QUERY_TIMEOUT_SECONDS,
        )
        state.fallback_source = FallbackAdvocateSource(fallback_records())

        sweepers = [
            PeriodicSweeper(
                "search-cache",
                state.search_cache.cleanup,
                settings.SEARCH_CACHE_CLEANUP_INTERVAL_SECONDS,
            ),
            PeriodicSweeper(
                "rate-limiter",
                state.rate_limiter.cleanup,
                settings.RATE_LIMIT_CLEANUP_INTERVAL_SECONDS,
            ),
        ]
        for sweeper in sweepers:
            sweeper.start()

        yield  # The server runs while we're "yielded" here

        logger.info("Shutting down %s...", settings.APP_NAME)
        for sweeper in sweepers:
            await sweeper.stop()
        state.search_cache.clear()
        if engine is not None:
            await engine.dispose()

    app = FastAPI(
        title=settings.APP_NAME,
        description="Search API for the advocate directory",
        version=settings.APP_VERSION,
        lifespan=lifespan,
    )

    app.add_exception_handler(AppError, app_error_handler)

    # Include routers (API endpoints)
    app.include_router(health.router, tags=["Health"])
    app.include_router(advocates.router)

    return app


app = create_app()
