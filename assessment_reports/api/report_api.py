"""Report API - Presentation Layer (SoC)"""
from flask_restful import Resource
from assessment_reports.exceptions.error_handler import handle_service_error
from assessment_reports.middleware.tenant_context import tenant_required
from assessment_reports.services.report.report_service import ReportService
from assessment_reports.utils.validation.input_validator import DateRangeOptions, get_query_args

class AssessmentSummary(Resource):
    def __init__(self, repo_factory):
        self.service = ReportService(repo_factory)

    @tenant_required
    def get(self, tenant_id, assessment_id):
        try:
            return self.service.get_assessment_summary(tenant_id, assessment_id), 200
        except Exception as e:
            return handle_service_error(e)

class AssessmentDailyActivity(Resource):
    """
    Submissions per calendar day (UTC) for one assessment, ascending.

    Days without submissions are not returned; a gap in the sequence means
    zero submissions on that day.
    """
    def __init__(self, repo_factory):
        self.service = ReportService(repo_factory)

    @tenant_required
    def get(self, tenant_id, assessment_id):
        try:
            date_range = DateRangeOptions.from_args(get_query_args())
            return self.service.get_daily_activity(tenant_id, assessment_id, date_range), 200
        except Exception as e:
            return handle_service_error(e)
