# File: bobo_site/core/exceptions.py

"""
Errors raised by the storage layer and translated to HTTP responses in
bobo_site.api.errors.

ValidationError -> 400, NotFoundError -> 404, StorageFault -> 500.
"""

from typing import Optional


class SiteError(Exception):
    """Base class for all errors the API knows how to answer."""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(SiteError):
    status_code = 400

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class NotFoundError(SiteError):
    status_code = 404

    def __init__(self, project_id: int):
        super().__init__("Project not found")
        self.project_id = project_id


class StorageFault(SiteError):
    """Unexpected database or filesystem failure. Never shown verbatim to clients."""

    status_code = 500

    def __init__(self, message: str, operation: Optional[str] = None):
        super().__init__(message)
        self.operation = operation
