"""Report Repository - Data Access Layer (SoC)"""
from typing import Dict, Iterator, Optional
from bson import ObjectId
from pymongo.collection import Collection
from assessment_reports.repositories.report.report_pipelines import (
    build_daily_activity_pipeline, build_summary_pipeline
)

class ReportRepo:
    """Server-side aggregations over the submissions collection"""

    def __init__(self, collection: Collection):
        self.collection = collection

    def get_summary(self, tenant_id: str, assessment_id: ObjectId) -> Optional[Dict]:
        pipeline = build_summary_pipeline(tenant_id, assessment_id)
        results = list(self.collection.aggregate(pipeline, allowDiskUse=True))
        return results[0] if results else None

    def iter_daily_activity(
        self,
        tenant_id: str,
        assessment_id: ObjectId,
        date_from: Optional[str] = None,
        date_to: Optional[str] = None
    ) -> Iterator[Dict]:
        """Yield {date, count} buckets straight from the cursor"""
        pipeline = build_daily_activity_pipeline(tenant_id, assessment_id, date_from, date_to)
        with self.collection.aggregate(pipeline, allowDiskUse=True) as cursor:
            yield from cursor
