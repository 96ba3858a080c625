"""Unit tests for search parameter validation."""

import pytest

from app.schemas.search import MAX_PAGE, SearchParamsError, SortField, SortOrder, parse_search_params


def _issue_fields(raw):
    with pytest.raises(SearchParamsError) as excinfo:
        parse_search_params(raw)
    return {issue["field"] for issue in excinfo.value.issues}


@pytest.mark.unit
def test_defaults_when_nothing_supplied():
    params = parse_search_params({})

    assert params.page == 1
    assert params.limit == 20
    assert params.sort_by == SortField.FIRST_NAME
    assert params.sort_order == SortOrder.ASC
    assert params.query is None
    assert params.min_experience is None
    assert params.offset == 0


@pytest.mark.unit
def test_numbers_and_enums_are_coerced():
    params = parse_search_params({
        "page": "3",
        "limit": "25",
        "minExperience": "2",
        "maxExperience": "40",
        "sortBy": "yearsOfExperience",
        "sortOrder": "desc",
    })

    assert params.page == 3
    assert params.limit == 25
    assert params.offset == 50
    assert params.min_experience == 2
    assert params.max_experience == 40
    assert params.sort_by == SortField.YEARS_OF_EXPERIENCE
    assert params.sort_order == SortOrder.DESC


@pytest.mark.unit
def test_limit_boundary():
    assert parse_search_params({"limit": "100"}).limit == 100
    assert _issue_fields({"limit": "101"}) == {"limit"}
    assert _issue_fields({"limit": "0"}) == {"limit"}


@pytest.mark.unit
def test_page_zero_is_rejected_not_clamped():
    assert _issue_fields({"page": "0"}) == {"page"}


@pytest.mark.unit
def test_page_has_an_upper_bound():
    params = parse_search_params({"page": str(MAX_PAGE), "limit": "100"})
    assert params.offset == (MAX_PAGE - 1) * 100

    assert _issue_fields({"page": str(MAX_PAGE + 1)}) == {"page"}
    assert _issue_fields({"page": "9" * 40}) == {"page"}


@pytest.mark.unit
@pytest.mark.parametrize("value", ["-1", "1.5", "abc", " 2", "1e3", "+4"])
def test_numeric_fields_require_digits_only(value):
    assert _issue_fields({"page": value}) == {"page"}


@pytest.mark.unit
def test_experience_bounds():
    assert parse_search_params({"maxExperience": "50"}).max_experience == 50
    assert _issue_fields({"minExperience": "51"}) == {"minExperience"}


@pytest.mark.unit
def test_min_greater_than_max_is_accepted():
    params = parse_search_params({"minExperience": "20", "maxExperience": "10"})
    assert (params.min_experience, params.max_experience) == (20, 10)


@pytest.mark.unit
def test_unknown_sort_values_rejected():
    assert _issue_fields({"sortBy": "id", "sortOrder": "sideways"}) == {"sortBy", "sortOrder"}


@pytest.mark.unit
def test_text_is_trimmed_and_blank_means_absent():
    params = parse_search_params({"q": "  anxiety  ", "city": "   ", "degree": ""})

    assert params.query == "anxiety"
    assert params.city is None
    assert params.degree is None


@pytest.mark.unit
def test_text_over_max_length_rejected_not_truncated():
    assert parse_search_params({"q": "x" * 100}).query == "x" * 100
    assert _issue_fields({"q": "x" * 101}) == {"q"}
    assert _issue_fields({"city": "y" * 51}) == {"city"}
    assert parse_search_params({"specialties": "z" * 100}).specialties == "z" * 100


@pytest.mark.unit
def test_unknown_parameters_ignored():
    params = parse_search_params({"foo": "bar", "page": "2"})
    assert params.page == 2


@pytest.mark.unit
def test_every_offending_field_reported():
    fields = _issue_fields({"page": "x", "limit": "500", "sortBy": "phone"})
    assert fields == {"page", "limit", "sortBy"}


@pytest.mark.unit
def test_filters_echo_omits_absent_values():
    params = parse_search_params({"q": "smith", "minExperience": "3"})

    assert params.filters_echo() == {
        "query": "smith",
        "minExperience": 3,
        "sortBy": "firstName",
        "sortOrder": "asc",
    }
