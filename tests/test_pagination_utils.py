import pytest
from assessment_reports.utils.pagination.pagination_utils import (
    build_paginated_response, calculate_skip, calculate_total_pages, get_pagination_params, parse_int
)


@pytest.mark.parametrize("raw, expected", [
    ("3", 3), ("12abc", 12), ("  7", 7), ("-2", -2), (5, 5), (2.9, 2),
    ("abc", None), ("", None), (None, None), (True, None),
])
def test_parse_int_is_lenient(raw, expected):
    assert parse_int(raw) == expected


def test_defaults_when_params_missing():
    assert get_pagination_params(None, None, 20, 100) == (1, 20)


@pytest.mark.parametrize("page, expected_page", [("0", 1), ("-4", 1), ("x", 1), ("3", 3)])
def test_page_never_below_one(page, expected_page):
    page_out, _ = get_pagination_params(page, None, 50, 200)
    assert page_out == expected_page


@pytest.mark.parametrize("limit, expected_limit", [
    ("0", 50),      # zero means "not given"
    ("-10", 1),
    ("junk", 50),
    ("500", 200),
    ("150", 150),
])
def test_limit_clamped_to_collection_bounds(limit, expected_limit):
    _, limit_out = get_pagination_params("1", limit, 50, 200)
    assert limit_out == expected_limit


def test_skip_follows_page_and_limit():
    for page in range(1, 6):
        for limit in (1, 20, 100):
            assert calculate_skip(page, limit) == (page - 1) * limit


@pytest.mark.parametrize("total, limit, pages", [(0, 20, 1), (1, 20, 1), (20, 20, 1), (21, 20, 2), (401, 200, 3)])
def test_total_pages_has_minimum_of_one(total, limit, pages):
    assert calculate_total_pages(total, limit) == pages


def test_paginated_response_envelope():
    response = build_paginated_response([{"a": 1}], page=2, limit=10, total=11)
    assert response == {"data": [{"a": 1}], "page": 2, "limit": 10, "total": 11, "totalPages": 2}
