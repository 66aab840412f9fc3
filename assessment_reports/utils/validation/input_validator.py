"""Centralized Input Validation - raw request params to typed query options"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional
from assessment_reports.config import settings
from assessment_reports.utils.pagination.pagination_utils import calculate_skip, get_pagination_params


def _text(args: Mapping[str, Any], name: str) -> Optional[str]:
    """Single string param, None when absent or not a string"""
    value = args.get(name)
    return value if isinstance(value, str) and value != "" else None


@dataclass(frozen=True)
class PageOptions:
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return calculate_skip(self.page, self.limit)

    @classmethod
    def from_args(cls, args: Mapping[str, Any], default_limit: int, max_limit: int) -> "PageOptions":
        page, limit = get_pagination_params(args.get("page"), args.get("limit"), default_limit, max_limit)
        return cls(page=page, limit=limit)


@dataclass(frozen=True)
class AssessmentListOptions:
    paging: PageOptions
    status: Optional[str] = None
    search: Optional[str] = None
    sort_by: Optional[str] = None
    sort_order: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "AssessmentListOptions":
        return cls(
            paging=PageOptions.from_args(args, settings.ASSESSMENT_PAGE_DEFAULT, settings.ASSESSMENT_PAGE_MAX),
            status=_text(args, "status"),
            search=_text(args, "search"),
            sort_by=_text(args, "sortBy"),
            sort_order=_text(args, "sortOrder"),
        )


@dataclass(frozen=True)
class SubmissionListOptions:
    paging: PageOptions
    assessment_id: Optional[str] = None
    candidate_id: Optional[str] = None
    status: Optional[str] = None
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "SubmissionListOptions":
        return cls(
            paging=PageOptions.from_args(args, settings.SUBMISSION_PAGE_DEFAULT, settings.SUBMISSION_PAGE_MAX),
            assessment_id=_text(args, "assessmentId"),
            candidate_id=_text(args, "candidateId"),
            status=_text(args, "status"),
            date_from=_text(args, "from"),
            date_to=_text(args, "to"),
        )


@dataclass(frozen=True)
class DateRangeOptions:
    date_from: Optional[str] = None
    date_to: Optional[str] = None

    @classmethod
    def from_args(cls, args: Mapping[str, Any]) -> "DateRangeOptions":
        return cls(date_from=_text(args, "from"), date_to=_text(args, "to"))


def get_query_args() -> Mapping[str, Any]:
    """Centralized query parameter access"""
    from flask import request
    return request.args

def get_json_data() -> Any:
    """Centralized JSON parsing"""
    from flask import request
    return request.get_json(silent=True) or {}
