"""
Schemas package.

Import all schemas here for easy access.
"""

from app.schemas.advocate import AdvocateCreate, AdvocateRead
from app.schemas.search import (
    PaginationMeta,
    SearchParams,
    SearchParamsError,
    SearchResponse,
    SortField,
    SortOrder,
    parse_search_params,
)

__all__ = [
    "AdvocateCreate",
    "AdvocateRead",
    "PaginationMeta",
    "SearchParams",
    "SearchParamsError",
    "SearchResponse",
    "SortField",
    "SortOrder",
    "parse_search_params",
]
