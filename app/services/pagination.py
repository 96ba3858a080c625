"""Pagination metadata and search payload assembly."""

import math
from typing import Any, Dict, Sequence

from app.schemas.advocate import AdvocateRead
from app.schemas.search import DEFAULT_LIMIT, PaginationMeta, SearchParams, SearchResponse


def build_pagination(total: int, page: int, limit: int) -> PaginationMeta:
    total_pages = math.ceil(total / limit) if total > 0 else 0
    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )


# Returned with 500 responses so clients always get a well-formed block
EMPTY_PAGINATION: Dict[str, Any] = build_pagination(0, 1, DEFAULT_LIMIT).model_dump(by_alias=True)


def assemble_search_response(
    rows: Sequence[AdvocateRead],
    total: int,
    params: SearchParams,
) -> Dict[str, Any]:
    """Shape the JSON-ready payload for one page of results."""
    response = SearchResponse(
        data=list(rows),
        pagination=build_pagination(total, params.page, params.limit),
        filters=params.filters_echo(),
    )
    return response.model_dump(mode="json", by_alias=True)
