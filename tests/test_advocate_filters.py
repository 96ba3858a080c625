"""Unit tests for in-process filtering, sorting and pagination."""

import pytest

from app.schemas.search import parse_search_params
from app.services.advocate_filters import search_in_memory, sort_advocates
from tests.conftest import make_advocate


@pytest.fixture
def records():
    return [
        make_advocate(first_name="alice", last_name="Smith", city="Springfield", degree="MD",
                      specialties=["Bipolar", "Trauma & PTSD"], years_of_experience=5),
        make_advocate(first_name="Bob", last_name="Jones", city="Boston", degree="PhD",
                      specialties=["Sleep issues"], years_of_experience=10),
        make_advocate(first_name="Carol", last_name="Stone", city="West Springfield", degree="MSW",
                      specialties=["Chronic pain"], years_of_experience=21),
        make_advocate(first_name="Dan", last_name="Brown", city="Austin", degree="MD",
                      specialties=[], years_of_experience=10),
    ]


def _names(rows):
    return [row.first_name for row in rows]


@pytest.mark.unit
def test_city_filter_is_case_insensitive_substring(records):
    rows, total = search_in_memory(records, parse_search_params({"city": "SPRINGFIELD"}))

    assert total == 2
    assert _names(rows) == ["alice", "Carol"]


@pytest.mark.unit
def test_query_matches_any_column_or_specialty(records):
    rows, _ = search_in_memory(records, parse_search_params({"q": "ptsd"}))
    assert _names(rows) == ["alice"]

    rows, _ = search_in_memory(records, parse_search_params({"q": "jones"}))
    assert _names(rows) == ["Bob"]


@pytest.mark.unit
def test_query_matches_experience_as_text(records):
    rows, total = search_in_memory(records, parse_search_params({"q": "1"}))

    # 10, 21 and 10 contain a "1"
    assert total == 3
    assert _names(rows) == ["Bob", "Carol", "Dan"]


@pytest.mark.unit
def test_filters_are_conjunctive(records):
    rows, total = search_in_memory(records, parse_search_params({"degree": "md", "city": "austin"}))

    assert total == 1
    assert _names(rows) == ["Dan"]


@pytest.mark.unit
def test_specialties_filter_matches_any_element(records):
    rows, _ = search_in_memory(records, parse_search_params({"specialties": "pain"}))
    assert _names(rows) == ["Carol"]


@pytest.mark.unit
@pytest.mark.parametrize("raw", [{"q": '"'}, {"specialties": '", "'}, {"q": '["'}])
def test_list_punctuation_is_not_searchable(records, raw):
    assert search_in_memory(records, parse_search_params(raw)) == ([], 0)


@pytest.mark.unit
def test_experience_range_is_inclusive(records):
    rows, total = search_in_memory(
        records, parse_search_params({"minExperience": "5", "maxExperience": "10"})
    )

    assert total == 3
    assert _names(rows) == ["alice", "Bob", "Dan"]


@pytest.mark.unit
def test_min_above_max_yields_nothing(records):
    rows, total = search_in_memory(
        records, parse_search_params({"minExperience": "20", "maxExperience": "5"})
    )
    assert (rows, total) == ([], 0)


@pytest.mark.unit
def test_two_record_example():
    dataset = [
        make_advocate(first_name="Alice", last_name="Smith", city="Austin", years_of_experience=5),
        make_advocate(first_name="Bob", last_name="Jones", city="Boston", years_of_experience=10),
    ]

    rows, total = search_in_memory(dataset, parse_search_params({"minExperience": "6"}))

    assert total == 1
    assert _names(rows) == ["Bob"]


@pytest.mark.unit
def test_string_sort_ignores_case(records):
    rows = sort_advocates(records, parse_search_params({}))
    assert _names(rows) == ["alice", "Bob", "Carol", "Dan"]

    rows = sort_advocates(records, parse_search_params({"sortOrder": "desc"}))
    assert _names(rows) == ["Dan", "Carol", "Bob", "alice"]


@pytest.mark.unit
def test_accented_names_sort_with_their_base_letter():
    dataset = [
        make_advocate(first_name="Zoe", city="Zürich"),
        make_advocate(first_name="Émile", city="Orléans"),
        make_advocate(first_name="Adam", city="Austin"),
        make_advocate(first_name="Eve", city="Évry"),
        make_advocate(first_name="emile", city="Öhringen"),
    ]

    rows = sort_advocates(dataset, parse_search_params({}))
    assert _names(rows) == ["Adam", "emile", "Émile", "Eve", "Zoe"]

    rows = sort_advocates(dataset, parse_search_params({"sortBy": "city"}))
    assert [row.city for row in rows] == ["Austin", "Évry", "Öhringen", "Orléans", "Zürich"]


@pytest.mark.unit
def test_numeric_sort_keeps_dataset_order_for_ties(records):
    asc = sort_advocates(records, parse_search_params({"sortBy": "yearsOfExperience"}))
    assert _names(asc) == ["alice", "Bob", "Dan", "Carol"]

    desc = sort_advocates(
        records, parse_search_params({"sortBy": "yearsOfExperience", "sortOrder": "desc"})
    )
    assert _names(desc) == ["Carol", "Bob", "Dan", "alice"]


@pytest.mark.unit
def test_pagination_slices_after_sort_and_counts_before(records):
    params = parse_search_params({"limit": "2", "page": "2", "sortBy": "lastName"})

    rows, total = search_in_memory(records, params)

    # Brown, Jones | Smith, Stone
    assert total == 4
    assert [row.last_name for row in rows] == ["Smith", "Stone"]


@pytest.mark.unit
def test_page_past_the_end_is_empty_but_counted(records):
    rows, total = search_in_memory(records, parse_search_params({"page": "9"}))
    assert rows == []
    assert total == 4
