"""Centralized error handling and responses - DRY principle"""
import logging
import traceback
from typing import Tuple
from assessment_reports.config.settings import AppConfig
from assessment_reports.exceptions.exceptions import ReportingError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_CODE = "internal_error"
INTERNAL_ERROR_MESSAGE = "An unexpected error occurred"


def build_error_response(code: str, message: str, details: str = None) -> dict:
    """Build the {"error": {...}} envelope; details are dropped in production"""
    payload = {"error": {"code": code, "message": message}}
    if details and not AppConfig.is_production():
        payload["error"]["details"] = details
    return payload


# ============= ERROR HANDLERS =============

def handle_service_error(e: Exception) -> Tuple[dict, int]:
    """Centralized error handling for services"""

    if isinstance(e, ReportingError):
        return build_error_response(e.code, e.message, details=repr(e)), e.status

    sanitized_error = str(e).replace('\n', ' ').replace('\r', ' ')[:500]
    logger.error(f"Unexpected error: {type(e).__name__}: {sanitized_error}")
    details = "".join(traceback.format_exception(type(e), e, e.__traceback__))
    return build_error_response(INTERNAL_ERROR_CODE, INTERNAL_ERROR_MESSAGE, details=details), 500
