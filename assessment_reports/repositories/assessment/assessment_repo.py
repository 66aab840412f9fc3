"""Assessment Repository - Data Access Layer (SoC)"""
from concurrent.futures import Executor
from typing import Dict, List, Optional, Tuple
from bson import ObjectId
from pymongo.collection import Collection
from assessment_reports.config.settings import ASSESSMENT_DETAIL_PROJECTION, ASSESSMENT_LIST_PROJECTION
from assessment_reports.repositories.core.list_query_executor import ListQueryExecutor

class AssessmentRepo:
    def __init__(self, collection: Collection, executor: Executor):
        self.collection = collection
        self.list_executor = ListQueryExecutor(collection, executor)

    def list_page(self, match_filter: Dict, sort: List[Tuple[str, int]], skip: int, limit: int) -> Tuple[List[Dict], int]:
        return self.list_executor.fetch_page(match_filter, sort, ASSESSMENT_LIST_PROJECTION, skip, limit)

    def find_for_tenant(self, tenant_id: str, assessment_id: ObjectId) -> Optional[Dict]:
        return self.collection.find_one(
            {"_id": assessment_id, "tenantId": tenant_id},
            ASSESSMENT_DETAIL_PROJECTION
        )
