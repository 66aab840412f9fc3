"""Assessment Service - Business Logic Layer (SoC)"""
import logging
from typing import Dict
from assessment_reports.exceptions.exceptions import NotFoundError
from assessment_reports.repositories.core.repository_factory import RepositoryFactory
from assessment_reports.utils.formatting.json_utils import sanitize_mongo_document
from assessment_reports.utils.pagination.pagination_utils import build_paginated_response
from assessment_reports.utils.query.filter_builder import build_assessment_filter
from assessment_reports.utils.query.sort_policy import resolve_assessment_sort
from assessment_reports.utils.security.security_utils import parse_object_id
from assessment_reports.utils.validation.input_validator import AssessmentListOptions

logger = logging.getLogger(__name__)

class AssessmentService:
    def __init__(self, repo_factory: RepositoryFactory):
        self.repo_factory = repo_factory

    def list_assessments(self, tenant_id: str, options: AssessmentListOptions) -> Dict:
        """Page of assessments for a tenant, filtered by status and name prefix"""
        match_filter = build_assessment_filter(tenant_id, status=options.status, search=options.search)
        sort = resolve_assessment_sort(options.sort_by, options.sort_order)
        paging = options.paging

        items, total = self.repo_factory.get_assessment_repo().list_page(match_filter, sort, paging.skip, paging.limit)
        logger.debug(f"Listed {len(items)}/{total} assessments for tenant {tenant_id}")

        return sanitize_mongo_document(build_paginated_response(items, paging.page, paging.limit, total))

    def get_assessment(self, tenant_id: str, assessment_id: str) -> Dict:
        assessment_oid = parse_object_id(assessment_id, "assessmentId")
        assessment = self.repo_factory.get_assessment_repo().find_for_tenant(tenant_id, assessment_oid)
        if not assessment:
            raise NotFoundError("Assessment not found for this tenant")
        return {"data": sanitize_mongo_document(assessment)}
