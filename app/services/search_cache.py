"""In-process cache of assembled search responses.

Entries expire after a TTL. When full, the oldest inserted entry is evicted;
reads do not refresh an entry's position, the TTL bounds staleness instead.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from app.schemas.search import SearchParams
from app.utils.canonical_json import canonical_dumps, strip_empty

logger = logging.getLogger(__name__)

CACHE_KEY_PREFIX = "search:"


@dataclass
class _CacheEntry:
    value: Any
    inserted_at: float
    ttl_seconds: float

    def expired(self, now: float) -> bool:
        return now - self.inserted_at > self.ttl_seconds


class SearchResultCache:
    """Bounded TTL cache keyed by a canonical parameter fingerprint."""

    def __init__(
        self,
        max_entries: int = 1000,
        default_ttl_seconds: float = 300,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_entries <= 0:
            raise ValueError("max_entries must be positive")
        self.max_entries = max_entries
        self.default_ttl_seconds = default_ttl_seconds
        self._clock = clock
        # dicts keep insertion order, so the first key is the oldest entry
        self._entries: Dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        """Return the cached value, or None when absent or expired."""
        now = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expired(now):
                del self._entries[key]
                return None
            return entry.value

    def set(self, key: str, value: Any, ttl_seconds: Optional[float] = None) -> None:
        ttl = self.default_ttl_seconds if ttl_seconds is None else ttl_seconds
        now = self._clock()
        with self._lock:
            if key in self._entries:
                # Re-inserting moves the key to the newest position
                del self._entries[key]
            elif len(self._entries) >= self.max_entries:
                oldest_key = next(iter(self._entries))
                del self._entries[oldest_key]
            self._entries[key] = _CacheEntry(value=value, inserted_at=now, ttl_seconds=ttl)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def cleanup(self) -> int:
        """Evict every expired entry. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._entries.items() if entry.expired(now)]
            for key in expired:
                del self._entries[key]
        if expired:
            logger.debug("Search cache evicted %d expired entries", len(expired))
        return len(expired)


def build_cache_key(params: SearchParams) -> str:
    """Canonical key: sorted query-string names, absent values omitted."""
    return CACHE_KEY_PREFIX + canonical_dumps(strip_empty(params.fingerprint()))
