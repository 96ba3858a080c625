"""
FastAPI dependencies.

Long-lived collaborators (cache, limiter, data sources) are created once in
the application lifespan and stored on app.state; these helpers hand them
to request handlers.
"""

from fastapi import Request

from app.core.config import Settings
from app.services.advocate_search_service import AdvocateSearchService
from app.services.advocate_sources import PrimaryAdvocateSource
from app.services.rate_limiter import RateLimiter
from app.services.search_cache import SearchResultCache


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_rate_limiter(request: Request) -> RateLimiter:
    return request.app.state.rate_limiter


def get_search_cache(request: Request) -> SearchResultCache:
    return request.app.state.search_cache


def get_primary_source(request: Request) -> PrimaryAdvocateSource:
    return request.app.state.primary_source


def get_search_service(request: Request) -> AdvocateSearchService:
    state = request.app.state
    return AdvocateSearchService(
        primary=state.primary_source,
        fallback=state.fallback_source,
        cache=state.search_cache,
        cache_ttl_seconds=state.settings.SEARCH_CACHE_TTL_SECONDS,
    )
