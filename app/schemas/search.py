"""
Search schemas - query parameters and response payloads for advocate search.

Raw query-string values are validated strictly: malformed or out-of-range
numbers and unknown sort options are rejected rather than clamped.
"""

import re
from enum import Enum
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from app.schemas.advocate import AdvocateRead

DIGITS_ONLY = re.compile(r"[0-9]+")

DEFAULT_PAGE = 1
MAX_PAGE = 10_000
DEFAULT_LIMIT = 20
MAX_LIMIT = 100
MAX_EXPERIENCE = 50


class SortField(str, Enum):
    FIRST_NAME = "firstName"
    LAST_NAME = "lastName"
    YEARS_OF_EXPERIENCE = "yearsOfExperience"
    CITY = "city"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SearchParamsError(Exception):
    """Raised when raw search parameters fail validation."""

    def __init__(self, issues: List[Dict[str, str]]):
        super().__init__("Invalid search parameters")
        self.issues = issues


class SearchParams(BaseModel):
    """
    Validated, fully bounded search parameters.

    Field aliases match the query-string names (q, minExperience, sortBy, ...).
    Text filters are trimmed; blank values count as absent.
    """

    query: Optional[str] = Field(None, alias="q", max_length=100)
    city: Optional[str] = Field(None, max_length=50)
    degree: Optional[str] = Field(None, max_length=50)
    specialties: Optional[str] = Field(None, max_length=100)
    min_experience: Optional[int] = Field(None, alias="minExperience", ge=0, le=MAX_EXPERIENCE)
    max_experience: Optional[int] = Field(None, alias="maxExperience", ge=0, le=MAX_EXPERIENCE)
    page: int = Field(DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    limit: int = Field(DEFAULT_LIMIT, ge=1, le=MAX_LIMIT)
    sort_by: SortField = Field(SortField.FIRST_NAME, alias="sortBy")
    sort_order: SortOrder = Field(SortOrder.ASC, alias="sortOrder")

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    @field_validator("query", "city", "degree", "specialties", mode="before")
    @classmethod
    def _trim_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip() or None
        return value

    @field_validator("page", "limit", "min_experience", "max_experience", mode="before")
    @classmethod
    def _digits_only(cls, value: Any) -> Any:
        if isinstance(value, str):
            if not DIGITS_ONLY.fullmatch(value):
                raise ValueError("must contain digits only")
            return int(value)
        return value

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    def filters_echo(self) -> Dict[str, Any]:
        """Applied filters as echoed back to the client."""
        echo = {
            "query": self.query,
            "city": self.city,
            "degree": self.degree,
            "specialties": self.specialties,
            "minExperience": self.min_experience,
            "maxExperience": self.max_experience,
            "sortBy": self.sort_by.value,
            "sortOrder": self.sort_order.value,
        }
        return {key: value for key, value in echo.items() if value is not None}

    def fingerprint(self) -> Dict[str, Any]:
        """Every applied value keyed by its query-string name; absent values omitted."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def parse_search_params(raw: Mapping[str, str]) -> SearchParams:
    """
    Validate raw query-string values into SearchParams.

    Empty values are treated as not supplied, so defaults apply.
    Raises SearchParamsError with one issue per offending field.
    """
    supplied = {key: value for key, value in raw.items() if value not in (None, "")}
    try:
        return SearchParams.model_validate(supplied)
    except ValidationError as exc:
        issues = []
        for error in exc.errors():
            field = ".".join(str(part) for part in error["loc"]) or "query"
            issues.append({"field": field, "message": error["msg"]})
        raise SearchParamsError(issues) from exc


class PaginationMeta(BaseModel):
    """Pagination block returned with every search response."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SearchResponse(BaseModel):
    """Full search payload: one page of advocates plus metadata."""

    data: List[AdvocateRead]
    pagination: PaginationMeta
    filters: Dict[str, Any]

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
