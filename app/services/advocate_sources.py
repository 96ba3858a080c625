"""Data sources that can answer an advocate search.

PrimaryAdvocateSource queries the database; FallbackAdvocateSource serves a
static in-memory dataset. Both return a SourceResult. The primary never
raises for store problems: connection errors, query errors and timeouts come
back as a StoreFailure so the caller decides what to do next.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Union

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.db.session import session_scope
from app.repositories.advocate_repository import AdvocateRepository
from app.schemas.advocate import AdvocateRead
from app.schemas.search import SearchParams
from app.services.advocate_filters import search_in_memory

logger = logging.getLogger(__name__)

PRIMARY = "primary"
FALLBACK = "fallback"


@dataclass(frozen=True)
class AdvocatePage:
    """A page of matching advocates and the total before pagination."""

    rows: List[AdvocateRead]
    total: int
    source: str


@dataclass(frozen=True)
class StoreFailure:
    """The primary store could not answer; reason is safe to log, not to return."""

    reason: str
    error_type: str


SourceResult = Union[AdvocatePage, StoreFailure]


class PrimaryAdvocateSource:
    """Searches the advocates table, bounded by a query timeout."""

    def __init__(
        self,
        session_maker: Optional[async_sessionmaker[AsyncSession]],
        timeout_seconds: float = 3.0,
    ) -> None:
        self.session_maker = session_maker
        self.timeout_seconds = timeout_seconds

    @property
    def is_configured(self) -> bool:
        return self.session_maker is not None

    async def search(self, params: SearchParams) -> SourceResult:
        if self.session_maker is None:
            return StoreFailure(reason="database is not configured", error_type="NotConfigured")

        try:
            rows, total = await asyncio.wait_for(self._run(params), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            return StoreFailure(
                reason=f"query exceeded {self.timeout_seconds}s",
                error_type="TimeoutError",
            )
        except (SQLAlchemyError, OSError) as exc:
            return StoreFailure(reason=str(exc), error_type=type(exc).__name__)

        return AdvocatePage(rows=rows, total=total, source=PRIMARY)

    async def _run(self, params: SearchParams):
        async with session_scope(self.session_maker) as session:
            advocates, total = await AdvocateRepository(session).search(params)
            return [AdvocateRead.model_validate(advocate) for advocate in advocates], total

    async def ping(self) -> Optional[StoreFailure]:
        """None when the store answers a trivial query within the timeout."""
        if self.session_maker is None:
            return StoreFailure(reason="database is not configured", error_type="NotConfigured")

        async def _ping() -> None:
            async with session_scope(self.session_maker) as session:
                await AdvocateRepository(session).ping()

        try:
            await asyncio.wait_for(_ping(), timeout=self.timeout_seconds)
        except asyncio.TimeoutError:
            return StoreFailure(reason=f"ping exceeded {self.timeout_seconds}s", error_type="TimeoutError")
        except (SQLAlchemyError, OSError) as exc:
            return StoreFailure(reason=str(exc), error_type=type(exc).__name__)
        return None


class FallbackAdvocateSource:
    """Serves a static, pre-loaded dataset with the same search semantics."""

    def __init__(self, records: Sequence[AdvocateRead]) -> None:
        self._records = tuple(records)

    async def search(self, params: SearchParams) -> AdvocatePage:
        rows, total = search_in_memory(self._records, params)
        return AdvocatePage(rows=rows, total=total, source=FALLBACK)
