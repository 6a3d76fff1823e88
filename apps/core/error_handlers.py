"""
Error translation for service failures.

Turns the exceptions raised by services into consistent error contexts
that the request-handling layer can render. Not-found errors are kept
generic so that a caller cannot tell a missing row from a row owned by
another tenant.
"""

import logging
from typing import Any, Dict, Optional

from django.core.exceptions import ObjectDoesNotExist, PermissionDenied, ValidationError
from django.db import DatabaseError, IntegrityError
from django.http import JsonResponse

from .exceptions import NotEnoughPermission

logger = logging.getLogger(__name__)


class ErrorContext:
    """Error context builder for consistent error responses."""

    def __init__(
        self,
        status_code: int,
        error_type: str,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        self.status_code = status_code
        self.error_type = error_type
        self.message = message
        self.user_message = user_message or self._get_default_user_message(status_code)
        self.details = details or {}

    def _get_default_user_message(self, status_code: int) -> str:
        """Get user-friendly message for status code."""
        messages = {
            400: "The request could not be processed. Please check your input and try again.",
            403: "You don't have permission to perform this action.",
            404: "The requested resource was not found.",
            409: "The operation conflicts with existing data.",
            500: "An unexpected error occurred. Please try again later.",
        }
        return messages.get(status_code, "An error occurred. Please try again.")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON responses."""
        return {
            'error': True,
            'status': self.status_code,
            'type': self.error_type,
            'message': self.user_message,
            'details': self.details
        }

    def to_json_response(self) -> JsonResponse:
        """Return as JSON response."""
        return JsonResponse(self.to_dict(), status=self.status_code)


def _validation_details(error: ValidationError) -> Dict[str, Any]:
    if hasattr(error, 'error_dict'):
        return {'fields': error.message_dict}
    return {'non_field_errors': error.messages}


def error_context_for(error: Exception) -> ErrorContext:
    """
    Build the error context for an exception raised by a service.

    Args:
        error: The exception that aborted the service

    Returns:
        ErrorContext describing the failure
    """
    if isinstance(error, ValidationError):
        return ErrorContext(
            status_code=400,
            error_type='validation_error',
            message='Payload failed validation',
            details=_validation_details(error)
        )

    if isinstance(error, ObjectDoesNotExist):
        return ErrorContext(
            status_code=404,
            error_type='not_found',
            message='Resource not found'
        )

    if isinstance(error, NotEnoughPermission):
        return ErrorContext(
            status_code=403,
            error_type='permission_denied',
            message=str(error),
            details={'check': error.check}
        )

    if isinstance(error, PermissionDenied):
        return ErrorContext(
            status_code=403,
            error_type='permission_denied',
            message=str(error) or 'Access denied'
        )

    if isinstance(error, IntegrityError):
        logger.warning(f"Mutation rejected by store: {error}")
        return ErrorContext(
            status_code=409,
            error_type='operation_failed',
            message='Operation conflicts with existing data'
        )

    if isinstance(error, DatabaseError):
        logger.error(f"Mutation failed: {type(error).__name__} - {error}")
        return ErrorContext(
            status_code=500,
            error_type='operation_failed',
            message='Operation failed'
        )

    logger.error(f"Unexpected error: {type(error).__name__} - {error}")
    return ErrorContext(
        status_code=500,
        error_type='internal_error',
        message='Unexpected error'
    )
