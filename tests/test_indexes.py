from unittest.mock import MagicMock

import pytest
from pymongo.errors import OperationFailure
from assessment_reports.repositories.core.indexes import ensure_indexes, index_name

DECLARED = {
    "submissions": [
        [("tenantId", 1), ("assessmentId", 1)],
        [("tenantId", 1), ("submittedAt", -1)],
    ]
}


def collection_with(*existing):
    coll = MagicMock()
    info = {"_id_": {"key": [("_id", 1)], "v": 2}}
    for spec in existing:
        info[index_name(spec)] = {"key": list(spec), "v": 2}
    coll.index_information.return_value = info
    coll.create_index.side_effect = lambda spec: index_name(spec)
    return coll


def test_index_name_matches_mongo_default():
    assert index_name([("tenantId", 1), ("createdAt", -1)]) == "tenantId_1_createdAt_-1"


def test_creates_only_missing_indexes():
    coll = collection_with([("tenantId", 1), ("assessmentId", 1)])

    created = ensure_indexes({"submissions": coll}, DECLARED)

    assert created == ["tenantId_1_submittedAt_-1"]
    coll.create_index.assert_called_once_with([("tenantId", 1), ("submittedAt", -1)])


def test_second_run_is_a_no_op():
    coll = collection_with(*DECLARED["submissions"])
    assert ensure_indexes({"submissions": coll}, DECLARED) == []
    coll.create_index.assert_not_called()


def test_create_failure_is_raised():
    coll = collection_with()
    coll.create_index.side_effect = OperationFailure("not authorized")
    with pytest.raises(OperationFailure):
        ensure_indexes({"submissions": coll}, DECLARED)
