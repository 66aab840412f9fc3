import re
from datetime import datetime, timedelta

import pytest
from bson import ObjectId
from assessment_reports.exceptions.exceptions import InvalidInputError, MissingTenantError
from assessment_reports.utils.query.filter_builder import (
    build_assessment_filter, build_date_range, build_prefix_regex, build_submission_filter
)


def test_assessment_filter_starts_from_tenant():
    assert build_assessment_filter("t1") == {"tenantId": "t1"}


def test_filters_refuse_missing_tenant():
    with pytest.raises(MissingTenantError):
        build_assessment_filter("")
    with pytest.raises(MissingTenantError):
        build_submission_filter(None)


def test_assessment_filter_with_status_and_search():
    match_filter = build_assessment_filter("t1", status="active", search="  Java ")
    assert match_filter["tenantId"] == "t1"
    assert match_filter["status"] == "active"
    assert match_filter["name"] == {"$regex": "^Java", "$options": "i"}


def test_blank_search_is_ignored():
    assert build_prefix_regex("   ") is None
    assert "name" not in build_assessment_filter("t1", search="")


def test_search_metacharacters_match_only_the_literal_prefix():
    condition = build_prefix_regex("a.b*c")
    pattern = re.compile(condition["$regex"], re.IGNORECASE)

    assert condition["$regex"].startswith("^")
    assert pattern.match("a.b*c exam")
    assert pattern.match("A.B*C")
    assert not pattern.match("axbbbc")
    assert not pattern.match("abc")
    assert not pattern.match("the a.b*c")


@pytest.mark.parametrize("search", ["(", "[a-z]+", "^$", "a|b", "\\d{3}", "?"])
def test_search_never_compiles_to_a_general_pattern(search):
    pattern = re.compile(build_prefix_regex(search)["$regex"])
    assert pattern.match(search)
    assert pattern.pattern.startswith("^")


def test_submission_filter_validates_assessment_id():
    oid = ObjectId()
    match_filter = build_submission_filter("t1", assessment_id=str(oid), candidate_id="c-1", status="completed")
    assert match_filter == {"tenantId": "t1", "assessmentId": oid, "candidateId": "c-1", "status": "completed"}

    with pytest.raises(InvalidInputError):
        build_submission_filter("t1", assessment_id="not-an-id")


def test_date_range_with_both_bounds():
    condition = build_date_range("2024-01-01", "2024-01-03T12:00:00")
    assert condition == {"$gte": datetime(2024, 1, 1), "$lte": datetime(2024, 1, 3, 12)}


def test_date_only_upper_bound_covers_the_whole_day():
    condition = build_date_range(None, "2024-01-03")
    assert condition == {"$lt": datetime(2024, 1, 3) + timedelta(days=1)}


def test_invalid_bounds_are_dropped():
    assert build_date_range("yesterday", "2024-02-01") == {"$lt": datetime(2024, 2, 2)}
    assert build_date_range("2024-13-45", "nope") is None
    assert build_date_range(None, None) is None


def test_submission_filter_omits_empty_range():
    match_filter = build_submission_filter("t1", date_from="bad", date_to="also bad")
    assert match_filter == {"tenantId": "t1"}


def test_date_only_upper_bound_on_the_last_representable_day():
    condition = build_date_range(None, "9999-12-31")
    assert condition == {"$lte": datetime(9999, 12, 31, 23, 59, 59, 999999)}
    assert build_submission_filter("t1", date_to="9999-12-31")["submittedAt"] == condition
