"""Assessment API - Presentation Layer (SoC)"""
from flask_restful import Resource
from assessment_reports.exceptions.error_handler import handle_service_error
from assessment_reports.middleware.tenant_context import tenant_required
from assessment_reports.services.assessment.assessment_service import AssessmentService
from assessment_reports.utils.validation.input_validator import AssessmentListOptions, get_query_args

class AssessmentList(Resource):
    def __init__(self, repo_factory):
        self.service = AssessmentService(repo_factory)

    @tenant_required
    def get(self, tenant_id):
        try:
            options = AssessmentListOptions.from_args(get_query_args())
            return self.service.list_assessments(tenant_id, options), 200
        except Exception as e:
            return handle_service_error(e)

class AssessmentDetail(Resource):
    def __init__(self, repo_factory):
        self.service = AssessmentService(repo_factory)

    @tenant_required
    def get(self, tenant_id, assessment_id):
        try:
            return self.service.get_assessment(tenant_id, assessment_id), 200
        except Exception as e:
            return handle_service_error(e)
