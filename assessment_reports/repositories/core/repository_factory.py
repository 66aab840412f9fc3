"""Repository Factory - DRY Implementation"""
from concurrent.futures import ThreadPoolExecutor
from typing import Optional
from pymongo.database import Database
from assessment_reports.config.settings import ASSESSMENTS_COLLECTION, AppConfig, SUBMISSIONS_COLLECTION
from assessment_reports.repositories.assessment.assessment_repo import AssessmentRepo
from assessment_reports.repositories.report.report_repo import ReportRepo
from assessment_reports.repositories.submission.submission_repo import SubmissionRepo

class RepositoryFactory:
    """Repository creation bound to one injected database handle"""

    def __init__(self, db: Database, max_workers: Optional[int] = None):
        self.db = db
        self.executor = ThreadPoolExecutor(
            max_workers=max_workers or AppConfig.QUERY_WORKERS,
            thread_name_prefix="ListQuery-"
        )
        self._assessment_repo = None
        self._submission_repo = None
        self._report_repo = None

    def get_assessment_repo(self) -> AssessmentRepo:
        if self._assessment_repo is None:
            self._assessment_repo = AssessmentRepo(self.db[ASSESSMENTS_COLLECTION], self.executor)
        return self._assessment_repo

    def get_submission_repo(self) -> SubmissionRepo:
        if self._submission_repo is None:
            self._submission_repo = SubmissionRepo(self.db[SUBMISSIONS_COLLECTION], self.executor)
        return self._submission_repo

    def get_report_repo(self) -> ReportRepo:
        if self._report_repo is None:
            self._report_repo = ReportRepo(self.db[SUBMISSIONS_COLLECTION])
        return self._report_repo

    def shutdown(self) -> None:
        self.executor.shutdown(wait=False)
