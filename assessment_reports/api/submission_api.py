"""Submission API - Presentation Layer (SoC)"""
from flask_restful import Resource
from assessment_reports.config.settings import SUBMISSION_PAGE_DEFAULT, SUBMISSION_PAGE_MAX
from assessment_reports.exceptions.error_handler import handle_service_error
from assessment_reports.middleware.tenant_context import tenant_required
from assessment_reports.services.submission.submission_service import SubmissionService
from assessment_reports.utils.validation.input_validator import (
    PageOptions, SubmissionListOptions, get_json_data, get_query_args
)

class SubmissionList(Resource):
    def __init__(self, repo_factory):
        self.service = SubmissionService(repo_factory)

    @tenant_required
    def get(self, tenant_id):
        try:
            options = SubmissionListOptions.from_args(get_query_args())
            return self.service.list_submissions(tenant_id, options), 200
        except Exception as e:
            return handle_service_error(e)

    @tenant_required
    def post(self, tenant_id):
        try:
            return self.service.create_submission(tenant_id, get_json_data()), 201
        except Exception as e:
            return handle_service_error(e)

class AssessmentSubmissionList(Resource):
    def __init__(self, repo_factory):
        self.service = SubmissionService(repo_factory)

    @tenant_required
    def get(self, tenant_id, assessment_id):
        try:
            paging = PageOptions.from_args(get_query_args(), SUBMISSION_PAGE_DEFAULT, SUBMISSION_PAGE_MAX)
            return self.service.list_for_assessment(tenant_id, assessment_id, paging), 200
        except Exception as e:
            return handle_service_error(e)
