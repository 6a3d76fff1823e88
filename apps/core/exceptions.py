"""
Error taxonomy for service operations.

Services raise Django's own exception types so that callers can use
the framework's handling for them:

- ValidationError: the payload failed its declared rules
- ObjectDoesNotExist: a scoped lookup failed (wrong id, wrong parent)
- NotEnoughPermission: a named permission check failed
- DatabaseError: the store rejected the mutation
"""

from enum import Enum

from django.core.exceptions import (
    ObjectDoesNotExist,
    PermissionDenied,
    ValidationError,
)
from django.db import DatabaseError

NotFound = ObjectDoesNotExist


class NotEnoughPermission(PermissionDenied):
    """Raised when the author fails a named permission check."""

    def __init__(self, check: str):
        self.check = check
        super().__init__(f"Permission check failed: {check}")


class ErrorKind(str, Enum):
    """Classification of a failed service invocation."""

    VALIDATION = 'validation'
    NOT_FOUND = 'not_found'
    PERMISSION = 'permission'
    MUTATION = 'mutation'
    UNKNOWN = 'unknown'

    @classmethod
    def from_exception(cls, exc: BaseException) -> 'ErrorKind':
        if isinstance(exc, ValidationError):
            return cls.VALIDATION
        if isinstance(exc, ObjectDoesNotExist):
            return cls.NOT_FOUND
        if isinstance(exc, PermissionDenied):
            return cls.PERMISSION
        if isinstance(exc, DatabaseError):
            return cls.MUTATION
        return cls.UNKNOWN


__all__ = [
    'ErrorKind',
    'NotEnoughPermission',
    'NotFound',
    'ObjectDoesNotExist',
    'PermissionDenied',
    'ValidationError',
]
