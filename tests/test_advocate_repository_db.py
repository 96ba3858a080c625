"""Advocate search against a real PostgreSQL database.

Requires DATABASE_URL and RUN_DB_TESTS=1. Everything runs inside one
transaction that is rolled back, so the database is left untouched.
"""

import asyncio

import pytest

from app.core.config import settings
from app.db.base import Base
from app.db.seed_data import fallback_records, seed_records
from app.db.session import build_engine
from app.repositories.advocate_repository import AdvocateRepository
from app.schemas.search import parse_search_params
from app.services.advocate_filters import search_in_memory
from sqlalchemy.ext.asyncio import AsyncSession


@pytest.mark.db
def test_search_matches_in_memory_semantics():
    async def main():
        engine = build_engine(settings)
        assert engine is not None, "DATABASE_URL must be set for db tests"
        try:
            async with engine.connect() as conn:
                trans = await conn.begin()
                try:
                    await conn.run_sync(Base.metadata.create_all)
                    session = AsyncSession(bind=conn, expire_on_commit=False)
                    repo = AdvocateRepository(session)
                    await repo.create_many(seed_records())

                    rows, total = await repo.search(parse_search_params({"city": "san"}))
                    assert total >= 4
                    assert all("san" in row.city.lower() for row in rows)

                    rows, total = await repo.search(parse_search_params({
                        "q": "10",
                        "sortBy": "yearsOfExperience",
                        "sortOrder": "desc",
                    }))
                    assert total >= 2
                    assert all("10" in str(row.years_of_experience) for row in rows)
                    years = [row.years_of_experience for row in rows]
                    assert years == sorted(years, reverse=True)

                    rows, total = await repo.search(parse_search_params({"q": "100%"}))
                    assert (rows, total) == ([], 0)

                    # JSON punctuation of the stored array never matches
                    for raw in ({"q": '"'}, {"specialties": '", "'}, {"q": '["'}):
                        rows, total = await repo.search(parse_search_params(raw))
                        assert (rows, total) == ([], 0)

                    rows, total = await repo.search(
                        parse_search_params({"specialties": "trauma", "limit": "100"})
                    )
                    expected, expected_total = search_in_memory(
                        fallback_records(), parse_search_params({"specialties": "trauma"})
                    )
                    assert total >= expected_total
                    names = {row.first_name for row in rows}
                    assert {row.first_name for row in expected} <= names

                    rows, total = await repo.search(parse_search_params({"page": "500"}))
                    assert rows == []
                    assert total >= 15

                    await session.close()
                finally:
                    await trans.rollback()
        finally:
            await engine.dispose()

    asyncio.run(main())
