"""Submission Service - listing and the validated create path"""
import logging
from datetime import datetime, timezone
from numbers import Real
from typing import Any, Dict
from assessment_reports.config.settings import (
    ASSESSMENT_SUBMISSIONS_PROJECTION, DEFAULT_SUBMISSION_STATUS, MAX_SCORE, MIN_SCORE,
    SUBMISSION_LIST_PROJECTION, SUBMISSION_STATUSES
)
from assessment_reports.exceptions.exceptions import InvalidInputError
from assessment_reports.repositories.core.repository_factory import RepositoryFactory
from assessment_reports.utils.formatting.json_utils import sanitize_mongo_document
from assessment_reports.utils.pagination.pagination_utils import build_paginated_response
from assessment_reports.utils.query.filter_builder import build_submission_filter, parse_date_bound
from assessment_reports.utils.query.sort_policy import resolve_submission_sort
from assessment_reports.utils.security.security_utils import parse_object_id, sanitize_string_input
from assessment_reports.utils.validation.input_validator import PageOptions, SubmissionListOptions

logger = logging.getLogger(__name__)

def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)

class SubmissionService:
    def __init__(self, repo_factory: RepositoryFactory):
        self.repo_factory = repo_factory

    def list_submissions(self, tenant_id: str, options: SubmissionListOptions) -> Dict:
        """Tenant-wide submission list; `responses` is never projected"""
        match_filter = build_submission_filter(
            tenant_id,
            assessment_id=options.assessment_id,
            candidate_id=options.candidate_id,
            status=options.status,
            date_from=options.date_from,
            date_to=options.date_to
        )
        return self._list(match_filter, SUBMISSION_LIST_PROJECTION, options.paging)

    def list_for_assessment(self, tenant_id: str, assessment_id: str, paging: PageOptions) -> Dict:
        """High-volume list used by reporting UIs"""
        match_filter = build_submission_filter(tenant_id, assessment_id=assessment_id)
        return self._list(match_filter, ASSESSMENT_SUBMISSIONS_PROJECTION, paging)

    def _list(self, match_filter: Dict, projection: Dict, paging: PageOptions) -> Dict:
        items, total = self.repo_factory.get_submission_repo().list_page(
            match_filter, resolve_submission_sort(), projection, paging.skip, paging.limit
        )
        return sanitize_mongo_document(build_paginated_response(items, paging.page, paging.limit, total))

    def create_submission(self, tenant_id: str, payload: Dict) -> Dict:
        """Validate and insert one submission; tenantId always comes from the request scope"""
        document = self._build_document(tenant_id, payload)
        stored = self.repo_factory.get_submission_repo().insert(document)
        logger.info(f"Created submission {stored['_id']} for tenant {tenant_id}")
        return {"data": sanitize_mongo_document(stored)}

    @staticmethod
    def _build_document(tenant_id: str, payload: Any) -> Dict:
        if not isinstance(payload, dict):
            raise InvalidInputError("Request body must be a JSON object")

        assessment_id = payload.get("assessmentId")
        if not assessment_id:
            raise InvalidInputError("A valid assessmentId must be provided")
        assessment_oid = parse_object_id(assessment_id, "assessmentId")

        candidate_id = sanitize_string_input(payload.get("candidateId"), "candidateId")
        if not candidate_id:
            raise InvalidInputError("candidateId is required")

        status = payload.get("status") or DEFAULT_SUBMISSION_STATUS
        if status not in SUBMISSION_STATUSES:
            raise InvalidInputError(f"status must be one of: {', '.join(sorted(SUBMISSION_STATUSES))}")

        score = payload.get("score")
        if score is not None and (not _is_number(score) or not MIN_SCORE <= score <= MAX_SCORE):
            raise InvalidInputError(f"score must be a number between {MIN_SCORE} and {MAX_SCORE}")

        duration = payload.get("durationSeconds")
        if duration is not None and (not _is_number(duration) or duration < 0):
            raise InvalidInputError("durationSeconds must be a non-negative number")

        responses = payload.get("responses")
        if responses is None:
            responses = {}
        elif not isinstance(responses, (dict, list)):
            raise InvalidInputError("responses must be an object or array")

        now = datetime.now(timezone.utc)
        submitted_at = now
        if payload.get("submittedAt"):
            submitted_at = parse_date_bound(payload["submittedAt"])
            if submitted_at is None:
                raise InvalidInputError("submittedAt must be an ISO-8601 date")

        return {
            "tenantId": tenant_id,
            "assessmentId": assessment_oid,
            "candidateId": candidate_id,
            "status": status,
            "score": score,
            "submittedAt": submitted_at,
            "durationSeconds": duration,
            "responses": responses,
            "createdAt": now,
            "updatedAt": now
        }
