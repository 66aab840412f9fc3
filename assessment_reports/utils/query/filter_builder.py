"""Filter Builder - tenant scoped Mongo predicates from allow-listed params (SoC)

Every predicate starts from {"tenantId": ...}. Only exact matches, a bounded
date range and an anchored, escaped name prefix are supported so each filter
stays on a declared compound index.
"""
import re
from datetime import datetime, timedelta
from typing import Dict, Optional
from dateutil import parser
from assessment_reports.exceptions.exceptions import MissingTenantError
from assessment_reports.utils.security.security_utils import parse_object_id, sanitize_regex_input

_DATE_ONLY = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_date_bound(value: Optional[str]) -> Optional[datetime]:
    """Parse an ISO date/datetime string; invalid or empty input gives None"""
    if not value or not isinstance(value, str) or not value.strip():
        return None
    try:
        return parser.isoparse(value.strip())
    except (ValueError, OverflowError):
        return None


def build_date_range(date_from: Optional[str], date_to: Optional[str]) -> Optional[Dict]:
    """
    Build a submittedAt range condition

    Invalid bounds are dropped silently; a range without any valid bound is
    omitted (None). A date-only `to` covers that whole calendar day.
    """
    condition = {}

    start = parse_date_bound(date_from)
    if start is not None:
        condition["$gte"] = start

    end = parse_date_bound(date_to)
    if end is not None:
        if _DATE_ONLY.match(date_to.strip()):
            try:
                condition["$lt"] = end + timedelta(days=1)
            except OverflowError:
                # 9999-12-31 has no next midnight
                condition["$lte"] = end.replace(hour=23, minute=59, second=59, microsecond=999999)
        else:
            condition["$lte"] = end

    return condition or None


def build_prefix_regex(search: Optional[str]) -> Optional[Dict]:
    """Case-insensitive anchored prefix match with every metacharacter escaped"""
    if not search or not isinstance(search, str) or not search.strip():
        return None
    return {"$regex": f"^{sanitize_regex_input(search)}", "$options": "i"}


def tenant_scope(tenant_id: str) -> Dict:
    """Base predicate; refuses to build anything without a tenant"""
    if not isinstance(tenant_id, str) or not tenant_id.strip():
        raise MissingTenantError()
    return {"tenantId": tenant_id}


def build_assessment_filter(
    tenant_id: str,
    status: Optional[str] = None,
    search: Optional[str] = None
) -> Dict:
    match_filter = tenant_scope(tenant_id)

    if status:
        match_filter["status"] = status

    name_condition = build_prefix_regex(search)
    if name_condition:
        match_filter["name"] = name_condition

    return match_filter


def build_submission_filter(
    tenant_id: str,
    assessment_id: Optional[str] = None,
    candidate_id: Optional[str] = None,
    status: Optional[str] = None,
    date_from: Optional[str] = None,
    date_to: Optional[str] = None
) -> Dict:
    """Submission predicate; a malformed assessment_id raises InvalidInputError"""
    match_filter = tenant_scope(tenant_id)

    if assessment_id:
        match_filter["assessmentId"] = parse_object_id(assessment_id, "assessmentId")

    if candidate_id:
        match_filter["candidateId"] = candidate_id

    if status:
        match_filter["status"] = status

    submitted_range = build_date_range(date_from, date_to)
    if submitted_range:
        match_filter["submittedAt"] = submitted_range

    return match_filter
