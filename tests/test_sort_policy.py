import pytest
from assessment_reports.utils.query.sort_policy import resolve_assessment_sort, resolve_submission_sort


def test_default_assessment_sort_is_newest_first():
    assert resolve_assessment_sort() == [("createdAt", -1)]


@pytest.mark.parametrize("sort_by, sort_order, expected", [
    ("name", "asc", [("name", 1)]),
    ("name", "desc", [("name", -1)]),
    ("createdAt", "ASC", [("createdAt", 1)]),
    ("createdAt", "sideways", [("createdAt", -1)]),
])
def test_allowed_fields(sort_by, sort_order, expected):
    assert resolve_assessment_sort(sort_by, sort_order) == expected


@pytest.mark.parametrize("sort_by", ["description", "metadata.owner", "$where", "", "NAME"])
def test_unknown_field_falls_back_without_error(sort_by):
    assert resolve_assessment_sort(sort_by, "asc") == [("createdAt", 1)]


def test_submission_sort_breaks_ties_on_id():
    assert resolve_submission_sort() == [("submittedAt", -1), ("_id", -1)]


def test_submission_sort_is_a_fresh_copy():
    resolve_submission_sort().append(("score", 1))
    assert resolve_submission_sort() == [("submittedAt", -1), ("_id", -1)]
