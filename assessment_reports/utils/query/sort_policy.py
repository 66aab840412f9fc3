"""Sort Policy - allow-listed, index backed sort specs"""
from typing import List, Optional, Tuple
from assessment_reports.config.settings import (
    ASSESSMENT_DEFAULT_SORT_FIELD, ASSESSMENT_SORT_FIELDS, SUBMISSION_SORT
)

SortSpec = List[Tuple[str, int]]


def resolve_sort_direction(sort_order: Optional[str]) -> int:
    """"asc" sorts ascending; anything else (including nothing) descending"""
    return 1 if isinstance(sort_order, str) and sort_order.strip().lower() == "asc" else -1


def resolve_assessment_sort(sort_by: Optional[str] = None, sort_order: Optional[str] = None) -> SortSpec:
    """Unknown sort fields fall back to createdAt instead of erroring"""
    field = sort_by if sort_by in ASSESSMENT_SORT_FIELDS else ASSESSMENT_DEFAULT_SORT_FIELD
    return [(field, resolve_sort_direction(sort_order))]


def resolve_submission_sort() -> SortSpec:
    # _id breaks ties between equal submittedAt values so pages never overlap
    return list(SUBMISSION_SORT)
