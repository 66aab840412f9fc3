"""Validation utilities - raw request params to typed query options"""
from .input_validator import (
    PageOptions, AssessmentListOptions, SubmissionListOptions, DateRangeOptions,
    get_json_data, get_query_args
)
