"""Report Service - Business Logic Layer (SoC)"""
from datetime import datetime
from typing import Dict, Iterator
from assessment_reports.repositories.core.repository_factory import RepositoryFactory
from assessment_reports.repositories.report.report_pipelines import empty_summary
from assessment_reports.utils.formatting.json_utils import sanitize_mongo_document
from assessment_reports.utils.security.security_utils import parse_object_id
from assessment_reports.utils.validation.input_validator import DateRangeOptions

class ReportService:
    def __init__(self, repo_factory: RepositoryFactory):
        self.repo_factory = repo_factory

    def get_assessment_summary(self, tenant_id: str, assessment_id: str) -> Dict:
        """Compact statistics for one assessment; always returns the summary shape"""
        assessment_oid = parse_object_id(assessment_id, "assessmentId")
        summary = self.repo_factory.get_report_repo().get_summary(tenant_id, assessment_oid)
        if not summary:
            summary = empty_summary(str(assessment_oid))
        return {"data": sanitize_mongo_document(summary)}

    def iter_daily_activity(self, tenant_id: str, assessment_id: str, date_range: DateRangeOptions) -> Iterator[Dict]:
        """
        Yield {"date": "YYYY-MM-DD", "count": n} in ascending date order.

        Only days with at least one submission appear; a missing day means
        zero submissions on that day.
        """
        assessment_oid = parse_object_id(assessment_id, "assessmentId")
        buckets = self.repo_factory.get_report_repo().iter_daily_activity(
            tenant_id, assessment_oid, date_range.date_from, date_range.date_to
        )
        for bucket in buckets:
            day = bucket.get("date")
            yield {
                "date": day.strftime("%Y-%m-%d") if isinstance(day, datetime) else day,
                "count": bucket.get("count", 0)
            }

    def get_daily_activity(self, tenant_id: str, assessment_id: str, date_range: DateRangeOptions) -> Dict:
        return {"data": list(self.iter_daily_activity(tenant_id, assessment_id, date_range))}
