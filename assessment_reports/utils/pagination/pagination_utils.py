"""Pagination Utilities - DRY Implementation for Consistent Pagination (SoC)"""
import re
from math import ceil
from typing import Any, Dict, List, Optional, Tuple

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int(value: Any) -> Optional[int]:
    """
    Lenient integer parsing - reads the leading integer of a string

    Returns None for absent or non-numeric input instead of raising.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def get_pagination_params(
    page_param: Any,
    limit_param: Any,
    default_limit: int,
    max_limit: int
) -> Tuple[int, int]:
    """
    Extract and validate pagination parameters - DRY utility

    Args:
        page_param: Raw page value (any form, possibly missing)
        limit_param: Raw limit value (any form, possibly missing)
        default_limit: Collection default page size
        max_limit: Collection page size ceiling

    Returns:
        Tuple of (page, limit) as integers; never raises
    """
    # 0 and garbage both mean "not given", as with parseInt(x) || default
    page = parse_int(page_param) or 1
    page = max(page, 1)

    limit = parse_int(limit_param) or default_limit
    limit = min(max(limit, 1), max_limit)

    return page, limit


def calculate_skip(page: int, limit: int) -> int:
    return (page - 1) * limit


def calculate_total_pages(total: int, limit: int) -> int:
    """ceil(total / limit), never below 1 so an empty result still has a page"""
    return max(1, ceil(total / limit)) if limit > 0 else 1


def build_paginated_response(data: List[Any], page: int, limit: int, total: int) -> Dict:
    """
    Build standardized paginated response - DRY utility

    Args:
        data: Items of the current page
        page: Page number
        limit: Items per page
        total: Total matching items

    Returns:
        {data, page, limit, total, totalPages}
    """
    return {
        "data": data,
        "page": page,
        "limit": limit,
        "total": total,
        "totalPages": calculate_total_pages(total, limit)
    }
