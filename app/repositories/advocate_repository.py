"""
Advocate repository - database operations for Advocate.
"""

from typing import List, Sequence, Tuple

from sqlalchemy import Select, String, and_, cast, func, literal_column, or_, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from app.models.advocate import Advocate
from app.schemas.advocate import AdvocateCreate
from app.schemas.search import SearchParams, SortField, SortOrder

LIKE_ESCAPE = "\\"

SORT_COLUMNS = {
    SortField.FIRST_NAME: Advocate.first_name,
    SortField.LAST_NAME: Advocate.last_name,
    SortField.YEARS_OF_EXPERIENCE: Advocate.years_of_experience,
    SortField.CITY: Advocate.city,
}


def like_pattern(term: str) -> str:
    """Wrap term in % wildcards, escaping any LIKE metacharacters it contains."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return f"%{escaped}%"


def _ilike(column, term: str) -> ColumnElement[bool]:
    return column.ilike(like_pattern(term), escape=LIKE_ESCAPE)


def _any_specialty_ilike(term: str) -> ColumnElement[bool]:
    """EXISTS over the JSONB array elements, matching each specialty on its own."""
    specialty = (
        func.jsonb_array_elements_text(Advocate.specialties)
        .table_valued("value")
        .alias("specialty")
    )
    return (
        select(literal_column("1"))
        .select_from(specialty)
        .where(_ilike(specialty.c.value, term))
        .exists()
    )


def build_conditions(params: SearchParams) -> List[ColumnElement[bool]]:
    """
    Translate search params into WHERE conditions.

    Conditions are ANDed together; the free-text query is an OR across
    the text columns, each specialty and the experience value.
    """
    conditions: List[ColumnElement[bool]] = []

    if params.query:
        conditions.append(
            or_(
                _ilike(Advocate.first_name, params.query),
                _ilike(Advocate.last_name, params.query),
                _ilike(Advocate.city, params.query),
                _ilike(Advocate.degree, params.query),
                _any_specialty_ilike(params.query),
                _ilike(cast(Advocate.years_of_experience, String), params.query),
            )
        )

    if params.city:
        conditions.append(_ilike(Advocate.city, params.city))

    if params.degree:
        conditions.append(_ilike(Advocate.degree, params.degree))

    if params.specialties:
        conditions.append(_any_specialty_ilike(params.specialties))

    if params.min_experience is not None:
        conditions.append(Advocate.years_of_experience >= params.min_experience)

    if params.max_experience is not None:
        conditions.append(Advocate.years_of_experience <= params.max_experience)

    return conditions


def _apply_where(query: Select, conditions: Sequence[ColumnElement[bool]]) -> Select:
    if conditions:
        query = query.where(and_(*conditions))
    return query


def build_search_query(params: SearchParams) -> Select:
    """
    One statement returning the requested page plus a windowed total.

    Each row carries count(*) OVER () so the total comes back with the page.
    id is the secondary sort key so pages are stable across requests.
    """
    sort_column = SORT_COLUMNS[params.sort_by]
    if params.sort_order == SortOrder.DESC:
        ordering = (sort_column.desc(), Advocate.id.desc())
    else:
        ordering = (sort_column.asc(), Advocate.id.asc())

    query = select(Advocate, func.count().over().label("total_count"))
    query = _apply_where(query, build_conditions(params))
    return query.order_by(*ordering).limit(params.limit).offset(params.offset)


def build_count_query(params: SearchParams) -> Select:
    query = select(func.count()).select_from(Advocate)
    return _apply_where(query, build_conditions(params))


class AdvocateRepository:
    """Repository for Advocate database operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def search(self, params: SearchParams) -> Tuple[List[Advocate], int]:
        """Return (page of advocates, total matching the filters)."""
        result = await self.db.execute(build_search_query(params))
        rows = result.all()
        if rows:
            return [row[0] for row in rows], int(rows[0].total_count)

        # An empty page past the end carries no window count
        if params.offset == 0:
            return [], 0
        total = await self.db.scalar(build_count_query(params))
        return [], int(total or 0)

    async def create_many(self, records: Sequence[AdvocateCreate]) -> List[Advocate]:
        """Insert advocates and return them with ids assigned."""
        advocates = [
            Advocate(
                first_name=record.first_name,
                last_name=record.last_name,
                city=record.city,
                degree=record.degree,
                specialties=list(record.specialties),
                years_of_experience=record.years_of_experience,
                phone_number=record.phone_digits(),
            )
            for record in records
        ]
        self.db.add_all(advocates)
        await self.db.flush()
        for advocate in advocates:
            await self.db.refresh(advocate)
        return advocates

    async def count(self) -> int:
        return int(await self.db.scalar(select(func.count()).select_from(Advocate)) or 0)

    async def ping(self) -> None:
        """Round-trip a trivial statement; raises when the store is unreachable."""
        await self.db.execute(text("SELECT 1"))
