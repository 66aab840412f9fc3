from flask import Flask
from flask_cors import CORS
from flask_restful import Api
from werkzeug.exceptions import HTTPException
from assessment_reports.config.settings import AppConfig, MongoConfig
from assessment_reports.exceptions.error_handler import build_error_response, handle_service_error
from assessment_reports.logging_config.log_config import get_logger, setup_logging
from assessment_reports.repositories.core.repository_factory import RepositoryFactory

# Reporting APIs
from assessment_reports.api.health_api import HealthCheck
from assessment_reports.api.assessment_api import AssessmentList, AssessmentDetail
from assessment_reports.api.submission_api import SubmissionList, AssessmentSubmissionList
from assessment_reports.api.report_api import AssessmentSummary, AssessmentDailyActivity

API_ROOT = "/api"
TENANT_ROOT = f"{API_ROOT}/tenants/<string:tenant_id>"

logger = get_logger("app")

HTTP_ERROR_CODES = {404: "not_found", 405: "method_not_allowed"}


def http_error_response(e: HTTPException):
    code = HTTP_ERROR_CODES.get(e.code, "http_error")
    message = "Route not found" if e.code == 404 else e.description
    return build_error_response(code, message), e.code


class ReportingApi(Api):
    """flask-restful Api answering with the shared {"error": {...}} envelope"""

    def handle_error(self, e):
        if isinstance(e, HTTPException):
            payload, status = http_error_response(e)
        else:
            payload, status = handle_service_error(e)
        return self.make_response(payload, status)


class ReportingFlask(Flask):
    def __init__(self, *args, db=None, **kwargs):
        super().__init__(*args, **kwargs)

        if db is None:
            from assessment_reports.db import connect_to_database
            db = connect_to_database()
            if MongoConfig.ENSURE_INDEXES:
                from assessment_reports.repositories.core.indexes import ensure_indexes
                ensure_indexes(db)
        self.db = db
        self.repo_factory = RepositoryFactory(db)

    def add_api(self):
        api = ReportingApi(self)
        deps = {"repo_factory": self.repo_factory}

        api.add_resource(HealthCheck, f"{API_ROOT}/health")

        # Every tenant route is also served without the path segment (x-tenant-id header)
        api.add_resource(AssessmentList,
                         f"{TENANT_ROOT}/assessments",
                         f"{API_ROOT}/assessments",
                         resource_class_kwargs=deps)
        api.add_resource(AssessmentDetail,
                         f"{TENANT_ROOT}/assessments/<string:assessment_id>",
                         f"{API_ROOT}/assessments/<string:assessment_id>",
                         resource_class_kwargs=deps)
        api.add_resource(AssessmentSubmissionList,
                         f"{TENANT_ROOT}/assessments/<string:assessment_id>/submissions",
                         f"{API_ROOT}/assessments/<string:assessment_id>/submissions",
                         resource_class_kwargs=deps)

        # Reporting endpoints under the assessment resource
        api.add_resource(AssessmentSummary,
                         f"{TENANT_ROOT}/assessments/<string:assessment_id>/summary",
                         f"{API_ROOT}/assessments/<string:assessment_id>/summary",
                         resource_class_kwargs=deps)
        api.add_resource(AssessmentDailyActivity,
                         f"{TENANT_ROOT}/assessments/<string:assessment_id>/daily-activity",
                         f"{API_ROOT}/assessments/<string:assessment_id>/daily-activity",
                         resource_class_kwargs=deps)

        api.add_resource(SubmissionList,
                         f"{TENANT_ROOT}/submissions",
                         f"{API_ROOT}/submissions",
                         resource_class_kwargs=deps)
        return api


def create_app(db=None) -> ReportingFlask:
    """Build the app; `db` is the injected Mongo database handle (connects from env when None)"""
    setup_logging()

    app = ReportingFlask(__name__, db=db)
    CORS(app)
    app.add_api()

    @app.errorhandler(404)
    def route_not_found(e):
        return http_error_response(e)

    @app.errorhandler(405)
    def method_not_allowed(e):
        return http_error_response(e)

    return app


if __name__ == "__main__":
    application = create_app()
    logger.info(f"Server listening on port {AppConfig.PORT}")
    application.run(host="0.0.0.0", port=AppConfig.PORT)
