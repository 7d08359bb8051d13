"""
Utilities for standardized error handling across API endpoints.
"""
from typing import Any, Dict, Optional, Union
import logging
from fastapi import HTTPException, status
from pydantic import ValidationError as PydanticValidationError

from paged_resources.core.exceptions import (
    PagedResourcesException,
    ValidationError,
    NotFoundError,
    MalformedSortSpecification,
)

logger = logging.getLogger("paged_resources.errors")


class ErrorResponse:
    """Standard error response format."""

    @staticmethod
    def model(
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """
        Create a standardized error response model.

        Args:
            code: Error code
            message: Error message
            details: Additional error details

        Returns:
            Dict: Standardized error response
        """
        return {
            "status": "error",
            "code": code,
            "message": message,
            "details": details or {}
        }

    @staticmethod
    def from_exception(exception: Union[Exception, PagedResourcesException]) -> Dict[str, Any]:
        """
        Create error response from exception.

        Args:
            exception: Exception to process

        Returns:
            Dict: Standardized error response
        """
        if isinstance(exception, PagedResourcesException):
            return ErrorResponse.model(
                code=exception.code,
                message=exception.message,
                details=exception.details
            )
        elif isinstance(exception, HTTPException):
            return ErrorResponse.model(
                code=f"HTTP_{exception.status_code}",
                message=exception.detail,
                details=getattr(exception, "details", None)
            )
        elif isinstance(exception, PydanticValidationError):
            return ErrorResponse.model(
                code="VALIDATION_ERROR",
                message="Validation error",
                details={"errors": exception.errors(include_url=False)}
            )
        else:
            return ErrorResponse.model(
                code="INTERNAL_ERROR",
                message=str(exception),
                details={"type": type(exception).__name__}
            )


def status_code_for(exception: Exception) -> int:
    """Map an exception to the HTTP status code it should be reported with."""
    if isinstance(exception, PagedResourcesException):
        return exception.status_code
    elif isinstance(exception, HTTPException):
        return exception.status_code
    elif isinstance(exception, PydanticValidationError):
        return status.HTTP_422_UNPROCESSABLE_ENTITY
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def handle_exception(exception: Exception) -> HTTPException:
    """
    Convert any exception to appropriate HTTPException.

    Args:
        exception: Exception to handle

    Returns:
        HTTPException: FastAPI HTTP exception
    """
    if isinstance(exception, HTTPException):
        return exception

    if isinstance(exception, (ValidationError, NotFoundError, MalformedSortSpecification)):
        logger.info(f"Expected exception: {exception}")
    else:
        logger.error(f"Exception: {exception}", exc_info=True)

    return HTTPException(
        status_code=status_code_for(exception),
        detail=ErrorResponse.from_exception(exception)
    )
