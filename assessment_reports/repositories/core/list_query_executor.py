"""List Query Executor - bounded page fetch and total count run concurrently"""
from concurrent.futures import Executor
from typing import Dict, List, Tuple
from pymongo.collection import Collection


class ListQueryExecutor:
    """
    Runs a tenant-scoped list query against one collection.

    The page fetch and count_documents are independent reads of the same
    predicate, so they are submitted together and joined before returning.
    No snapshot is taken: under concurrent writes `total` can briefly disagree
    with the items on a page boundary. Errors from either read propagate as-is.
    Predicates are assumed validated upstream; nothing is re-checked here.
    """

    def __init__(self, collection: Collection, executor: Executor):
        self.collection = collection
        self.executor = executor

    def _fetch_items(self, match_filter: Dict, sort: List[Tuple[str, int]], projection: Dict, skip: int, limit: int) -> List[Dict]:
        cursor = self.collection.find(match_filter, projection).sort(sort).skip(skip).limit(limit)
        return list(cursor)

    def _count(self, match_filter: Dict) -> int:
        return self.collection.count_documents(match_filter)

    def fetch_page(
        self,
        match_filter: Dict,
        sort: List[Tuple[str, int]],
        projection: Dict,
        skip: int,
        limit: int
    ) -> Tuple[List[Dict], int]:
        items_future = self.executor.submit(self._fetch_items, match_filter, sort, projection, skip, limit)
        count_future = self.executor.submit(self._count, match_filter)
        return items_future.result(), count_future.result()
