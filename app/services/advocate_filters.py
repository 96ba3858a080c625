"""
In-process filter, sort and pagination over advocate read models.

Mirrors the SQL composed by AdvocateRepository so the fallback dataset
answers a search the same way the database would.
"""

import unicodedata
from typing import Callable, Iterable, List, Sequence, Tuple

from app.schemas.advocate import AdvocateRead
from app.schemas.search import SearchParams, SortField, SortOrder

Predicate = Callable[[AdvocateRead], bool]


def _contains(haystack: str, needle: str) -> bool:
    return needle in haystack.lower()


def _matches_query(advocate: AdvocateRead, term: str) -> bool:
    return (
        _contains(advocate.first_name, term)
        or _contains(advocate.last_name, term)
        or _contains(advocate.city, term)
        or _contains(advocate.degree, term)
        or any(_contains(specialty, term) for specialty in advocate.specialties)
        or term in str(advocate.years_of_experience)
    )


def build_predicates(params: SearchParams) -> List[Predicate]:
    """One predicate per supplied filter; all of them must hold."""
    predicates: List[Predicate] = []

    if params.query:
        term = params.query.lower()
        predicates.append(lambda a: _matches_query(a, term))

    if params.city:
        city = params.city.lower()
        predicates.append(lambda a: _contains(a.city, city))

    if params.degree:
        degree = params.degree.lower()
        predicates.append(lambda a: _contains(a.degree, degree))

    if params.specialties:
        specialty = params.specialties.lower()
        predicates.append(lambda a: any(_contains(s, specialty) for s in a.specialties))

    if params.min_experience is not None:
        minimum = params.min_experience
        predicates.append(lambda a: a.years_of_experience >= minimum)

    if params.max_experience is not None:
        maximum = params.max_experience
        predicates.append(lambda a: a.years_of_experience <= maximum)

    return predicates


def filter_advocates(records: Iterable[AdvocateRead], params: SearchParams) -> List[AdvocateRead]:
    predicates = build_predicates(params)
    return [record for record in records if all(check(record) for check in predicates)]


def _strip_accents(value: str) -> str:
    decomposed = unicodedata.normalize("NFKD", value)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def _text_key(value: str) -> Tuple[str, str, str]:
    """Collation key: base letters first, then accents, then case."""
    folded = value.casefold()
    return (_strip_accents(folded), folded, value)


SORT_KEYS = {
    SortField.FIRST_NAME: lambda a: _text_key(a.first_name),
    SortField.LAST_NAME: lambda a: _text_key(a.last_name),
    SortField.CITY: lambda a: _text_key(a.city),
    SortField.YEARS_OF_EXPERIENCE: lambda a: a.years_of_experience,
}


def sort_advocates(records: Sequence[AdvocateRead], params: SearchParams) -> List[AdvocateRead]:
    """Single-key sort; records with equal keys keep their dataset order."""
    return sorted(
        records,
        key=SORT_KEYS[params.sort_by],
        reverse=params.sort_order == SortOrder.DESC,
    )


def paginate(records: Sequence[AdvocateRead], params: SearchParams) -> List[AdvocateRead]:
    return list(records[params.offset:params.offset + params.limit])


def search_in_memory(
    records: Sequence[AdvocateRead],
    params: SearchParams,
) -> Tuple[List[AdvocateRead], int]:
    """Filter, sort and slice records. Returns (page, total matching)."""
    matched = sort_advocates(filter_advocates(records, params), params)
    return paginate(matched, params), len(matched)
