import threading
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import MagicMock

import pytest
from pymongo.errors import ServerSelectionTimeoutError
from assessment_reports.repositories.core.list_query_executor import ListQueryExecutor


@pytest.fixture
def executor():
    pool = ThreadPoolExecutor(max_workers=2)
    yield pool
    pool.shutdown(wait=True)


def test_fetch_page_applies_sort_skip_limit_and_projection(executor):
    collection = MagicMock()
    docs = [{"_id": 1, "tenantId": "t1"}, {"_id": 2, "tenantId": "t1"}]
    collection.find.return_value.sort.return_value.skip.return_value.limit.return_value = docs
    collection.count_documents.return_value = 42

    items, total = ListQueryExecutor(collection, executor).fetch_page(
        {"tenantId": "t1"}, [("createdAt", -1)], {"name": 1}, skip=20, limit=10
    )

    assert items == docs
    assert total == 42
    collection.find.assert_called_once_with({"tenantId": "t1"}, {"name": 1})
    collection.find.return_value.sort.assert_called_once_with([("createdAt", -1)])
    collection.find.return_value.sort.return_value.skip.assert_called_once_with(20)
    collection.find.return_value.sort.return_value.skip.return_value.limit.assert_called_once_with(10)
    collection.count_documents.assert_called_once_with({"tenantId": "t1"})


def test_fetch_and_count_run_concurrently(executor):
    # each read waits for the other; a sequential executor would time out
    barrier = threading.Barrier(2, timeout=5)
    collection = MagicMock()

    def find(*args):
        barrier.wait()
        cursor = MagicMock()
        cursor.sort.return_value.skip.return_value.limit.return_value = [{"_id": 1}]
        return cursor

    def count(*args):
        barrier.wait()
        return 1

    collection.find.side_effect = find
    collection.count_documents.side_effect = count

    items, total = ListQueryExecutor(collection, executor).fetch_page({"tenantId": "t1"}, [], {}, 0, 10)
    assert items == [{"_id": 1}]
    assert total == 1


def test_store_errors_propagate_unchanged(executor):
    collection = MagicMock()
    collection.count_documents.side_effect = ServerSelectionTimeoutError("no primary")

    with pytest.raises(ServerSelectionTimeoutError):
        ListQueryExecutor(collection, executor).fetch_page({"tenantId": "t1"}, [], {}, 0, 10)
