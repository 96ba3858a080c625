"""
Advocate search orchestration.

cache lookup -> primary store -> fallback dataset on failure -> assemble -> cache store
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from app.schemas.search import SearchParams
from app.services.advocate_sources import (
    AdvocatePage,
    FallbackAdvocateSource,
    PrimaryAdvocateSource,
    StoreFailure,
)
from app.services.pagination import assemble_search_response
from app.services.search_cache import SearchResultCache, build_cache_key

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CachedSearch:
    """Assembled payload stored with the source that produced it."""

    payload: Dict[str, Any]
    source: str


@dataclass(frozen=True)
class SearchOutcome:
    """Payload to return plus how it was produced."""

    payload: Dict[str, Any]
    cache_hit: bool
    source: str


class AdvocateSearchService:
    """Answer advocate searches from cache, the database, or the fallback dataset."""

    def __init__(
        self,
        primary: PrimaryAdvocateSource,
        fallback: FallbackAdvocateSource,
        cache: SearchResultCache,
        cache_ttl_seconds: Optional[float] = None,
    ):
        self.primary = primary
        self.fallback = fallback
        self.cache = cache
        self.cache_ttl_seconds = cache_ttl_seconds

    async def search(self, params: SearchParams) -> SearchOutcome:
        cache_key = build_cache_key(params)
        cached = self.cache.get(cache_key)
        if cached is not None:
            return SearchOutcome(
                payload={**cached.payload, "cached": True},
                cache_hit=True,
                source=cached.source,
            )

        page = await self.fetch_page(params)
        payload = assemble_search_response(page.rows, page.total, params)
        self.cache.set(
            cache_key,
            CachedSearch(payload=payload, source=page.source),
            self.cache_ttl_seconds,
        )
        return SearchOutcome(payload=payload, cache_hit=False, source=page.source)

    async def fetch_page(self, params: SearchParams) -> AdvocatePage:
        """Try the primary store first on every call; fall back when it fails."""
        result = await self.primary.search(params)
        if isinstance(result, StoreFailure):
            if self.primary.is_configured:
                logger.warning(
                    "Primary store unavailable (%s: %s); serving fallback dataset",
                    result.error_type,
                    result.reason,
                )
            else:
                logger.debug("No database configured; serving fallback dataset")
            return await self.fallback.search(params)
        return result
