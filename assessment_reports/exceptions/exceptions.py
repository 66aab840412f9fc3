"""Custom exceptions - SoC principle"""

class ReportingError(Exception):
    """Base exception for the reporting API"""
    code = "internal_error"
    status = 500

    def __init__(self, message: str = None):
        super().__init__(message or self.__class__.__doc__)
        self.message = message or self.__class__.__doc__

class MissingTenantError(ReportingError):
    """Tenant id must be provided as path parameter or x-tenant-id header"""
    code = "missing_tenant"
    status = 400

class InvalidInputError(ReportingError):
    """Invalid input"""
    code = "invalid_input"
    status = 400

class NotFoundError(ReportingError):
    """Resource not found"""
    code = "not_found"
    status = 404
