"""
Custom exception classes for Paged Resources.
"""
from typing import Any, Dict, List, Optional


class PagedResourcesException(Exception):
    """Base exception class for the paged resources package."""

    def __init__(
        self,
        message: str,
        code: str = "INTERNAL_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class ValidationError(PagedResourcesException):
    """Raised for validation errors."""

    def __init__(
        self,
        message: str = "Validation error",
        code: str = "VALIDATION_ERROR",
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 422,
    ):
        super().__init__(message=message, code=code, status_code=status_code, details=details)


class InvalidSortProperty(ValidationError):
    """Raised when a sort names a property the data source cannot sort by."""

    def __init__(
        self,
        property: str,
        allowed: Optional[List[str]] = None,
        message: Optional[str] = None,
    ):
        self.property = property
        super().__init__(
            message=message or f"Cannot sort by {property!r}",
            code="INVALID_SORT_PROPERTY",
            details={"property": property, "allowed": list(allowed or [])},
            status_code=400,
        )


class NotFoundError(PagedResourcesException):
    """Raised when a resource is not found."""

    def __init__(
        self,
        message: str = "Resource not found",
        code: str = "NOT_FOUND",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, status_code=404, details=details)


class MalformedSortSpecification(PagedResourcesException):
    """Raised when a sort token cannot be split into a field and a direction."""

    def __init__(
        self,
        token: str,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        details = details or {}
        details["token"] = token
        self.token = token
        super().__init__(
            message=message or f"Malformed sort specification: {token!r}",
            code="MALFORMED_SORT",
            status_code=400,
            details=details,
        )


class InvalidPageState(PagedResourcesException):
    """Raised when a navigation link is required but cannot exist for the page."""

    def __init__(
        self,
        message: str = "Invalid page state",
        code: str = "INVALID_PAGE_STATE",
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, code=code, status_code=409, details=details)
