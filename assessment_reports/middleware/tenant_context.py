"""Tenant scope guard for every tenant-bound endpoint

The tenant id comes from the <tenant_id> path segment, falling back to the
x-tenant-id header. Requests without one are rejected before the view runs,
so no store call can happen without tenant scoping.
"""
from functools import wraps
from typing import Optional
from flask import g, request
from assessment_reports.config.settings import TENANT_HEADER
from assessment_reports.exceptions.error_handler import handle_service_error
from assessment_reports.exceptions.exceptions import MissingTenantError


def resolve_tenant_id(path_value: Optional[str], header_value: Optional[str]) -> str:
    """Trimmed tenant id from path, then header; MissingTenantError if neither"""
    for candidate in (path_value, header_value):
        if isinstance(candidate, str) and candidate.strip():
            return candidate.strip()
    raise MissingTenantError()


def tenant_required(f):
    """Decorator resolving the tenant and passing it to the view as tenant_id"""
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            tenant_id = resolve_tenant_id(kwargs.pop("tenant_id", None), request.headers.get(TENANT_HEADER))
        except MissingTenantError as e:
            return handle_service_error(e)
        g.tenant_id = tenant_id
        return f(*args, tenant_id=tenant_id, **kwargs)
    return decorated_function
