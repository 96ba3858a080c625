"""Fixed-window, per-client request limiter kept in process memory.

Each client gets a window that starts on its first request. Requests are
admitted until the count reaches max_requests; the window resets once the
clock passes reset_time. Expired entries are dropped by cleanup(), which
the housekeeping worker calls on an interval.
"""

from __future__ import annotations

import logging
import math
import threading
import time
from dataclasses import dataclass
from typing import Callable, Dict, Mapping

logger = logging.getLogger(__name__)

USER_AGENT_PREFIX_LENGTH = 50


@dataclass
class _WindowEntry:
    count: int
    reset_time: float


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of a single admission check. reset_time is Unix seconds."""

    allowed: bool
    remaining: int
    reset_time: float
    limit: int

    def retry_after_seconds(self, now: float) -> int:
        return max(0, math.ceil(self.reset_time - now))


class RateLimiter:
    """Admit or reject requests per client id within fixed windows."""

    def __init__(
        self,
        max_requests: int = 100,
        window_seconds: float = 900,
        clock: Callable[[], float] = time.time,
    ) -> None:
        if max_requests <= 0:
            raise ValueError("max_requests must be positive")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._clients: Dict[str, _WindowEntry] = {}
        self._lock = threading.Lock()

    def now(self) -> float:
        return self._clock()

    def check(self, client_id: str) -> RateLimitDecision:
        """Record a request for client_id and report whether it is admitted."""
        now = self._clock()
        with self._lock:
            entry = self._clients.get(client_id)

            if entry is None or now > entry.reset_time:
                entry = _WindowEntry(count=1, reset_time=now + self.window_seconds)
                self._clients[client_id] = entry
                return RateLimitDecision(
                    allowed=True,
                    remaining=self.max_requests - 1,
                    reset_time=entry.reset_time,
                    limit=self.max_requests,
                )

            if entry.count >= self.max_requests:
                return RateLimitDecision(
                    allowed=False,
                    remaining=0,
                    reset_time=entry.reset_time,
                    limit=self.max_requests,
                )

            entry.count += 1
            return RateLimitDecision(
                allowed=True,
                remaining=self.max_requests - entry.count,
                reset_time=entry.reset_time,
                limit=self.max_requests,
            )

    def cleanup(self) -> int:
        """Drop entries whose window has elapsed. Returns how many were removed."""
        now = self._clock()
        with self._lock:
            expired = [key for key, entry in self._clients.items() if now > entry.reset_time]
            for key in expired:
                del self._clients[key]
        if expired:
            logger.debug("Rate limiter dropped %d expired client windows", len(expired))
        return len(expired)

    def size(self) -> int:
        with self._lock:
            return len(self._clients)


def client_id_from_headers(headers: Mapping[str, str]) -> str:
    """
    Derive the client identifier used as the rate-limit key.

    The address is the first hop of X-Forwarded-For, else X-Real-IP, else
    CF-Connecting-IP, else "unknown". A truncated User-Agent is appended so
    clients sharing one NAT address are told apart.
    """
    forwarded = headers.get("x-forwarded-for") or ""
    first_hop = forwarded.split(",")[0].strip()
    ip = first_hop or headers.get("x-real-ip") or headers.get("cf-connecting-ip") or "unknown"

    user_agent = headers.get("user-agent") or ""
    return f"{ip}:{user_agent[:USER_AGENT_PREFIX_LENGTH]}"
