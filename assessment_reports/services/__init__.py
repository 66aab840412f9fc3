"""Service layer - Business logic per resource family"""

from .assessment.assessment_service import AssessmentService
from .submission.submission_service import SubmissionService
from .report.report_service import ReportService

__all__ = [
    'AssessmentService',
    'SubmissionService',
    'ReportService'
]
