"""Query utilities - tenant scoped filters and index backed sorts"""
from .filter_builder import (
    build_assessment_filter, build_submission_filter, build_date_range, build_prefix_regex
)
from .sort_policy import resolve_assessment_sort, resolve_submission_sort
