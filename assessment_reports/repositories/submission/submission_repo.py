"""Submission Repository - Data Access Layer (SoC)"""
from concurrent.futures import Executor
from typing import Dict, List, Tuple
from pymongo.collection import Collection
from assessment_reports.repositories.core.list_query_executor import ListQueryExecutor

class SubmissionRepo:
    def __init__(self, collection: Collection, executor: Executor):
        self.collection = collection
        self.list_executor = ListQueryExecutor(collection, executor)

    def list_page(self, match_filter: Dict, sort: List[Tuple[str, int]], projection: Dict, skip: int, limit: int) -> Tuple[List[Dict], int]:
        return self.list_executor.fetch_page(match_filter, sort, projection, skip, limit)

    def insert(self, document: Dict) -> Dict:
        result = self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document
