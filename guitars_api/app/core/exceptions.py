"""
Custom exceptions for the application.

Each exception carries the HTTP status code it maps to so the
handlers in ``exception_handlers`` can render it without a lookup
table.  None of them is fatal: the service stays usable after any
single failure.
"""
from typing import Optional


class AppException(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, status_code: int = 500, detail: Optional[str] = None):
        self.message = message
        self.status_code = status_code
        self.detail = detail or message
        super().__init__(self.message)


class ValidationError(AppException):
    """A guitar was rejected on create.

    ``name`` holds the submitted (trimmed) name so the response can
    echo the rejected item back to the form.
    """

    def __init__(self, message: str, name: str = "", detail: Optional[str] = None):
        self.name = name
        super().__init__(message, status_code=400, detail=detail)


class NotFoundError(AppException):
    """No guitar lives at the requested address."""

    def __init__(self, resource: str, resource_id: str):
        self.resource_id = resource_id
        message = f"{resource} {resource_id} not found"
        super().__init__(message, status_code=404)


class StoreUnavailable(AppException):
    """The persistence medium could not be read or written."""

    def __init__(self, message: str = "Store unavailable", detail: Optional[str] = None):
        super().__init__(message, status_code=503, detail=detail)
