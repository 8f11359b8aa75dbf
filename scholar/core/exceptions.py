"""
Custom exceptions for the Scholar registry.
"""

from typing import Optional, Any, Dict


class ScholarException(Exception):
    """Base exception for all recoverable Scholar errors."""

    default_code = "SCHOLAR_ERROR"

    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = details or {}


class ValidationError(ScholarException):
    """Raised when data validation fails."""
    default_code = "VALIDATION_ERROR"


class IndexOutOfRangeError(ScholarException):
    """Raised when a position falls outside the current collection bounds."""
    default_code = "INDEX_OUT_OF_RANGE"


class DuplicateOwnershipError(ScholarException):
    """Raised when an instructor already owns a course."""
    default_code = "DUPLICATE_OWNERSHIP"


class AlreadyEnrolledError(ScholarException):
    """Raised when a student is already on a course roster."""
    default_code = "ALREADY_ENROLLED"


class NotEnrolledError(ScholarException):
    """Raised when an operation requires an enrolled student."""
    default_code = "NOT_ENROLLED"


class NotFoundError(ScholarException):
    """Raised when a requested student, course or account is not found."""
    default_code = "NOT_FOUND"


class NoGradeYetError(ScholarException):
    """Raised when a learner asks for a grade that has not been recorded."""
    default_code = "NO_GRADE_YET"


class DuplicateAccountError(ScholarException):
    """Raised when attempting to create an account that already exists."""
    default_code = "DUPLICATE_ACCOUNT"


class AuthenticationError(ScholarException):
    """Raised when credentials do not match a stored account."""
    default_code = "AUTHENTICATION_FAILED"


class AuthorizationError(ScholarException):
    """Raised when a role may not act on a course."""
    default_code = "NOT_COURSE_OWNER"


class ConfigurationError(ScholarException):
    """Raised when configuration is invalid."""
    default_code = "CONFIGURATION_ERROR"


class RegistryCorruptionError(RuntimeError):
    """Raised when registry invariants no longer hold.

    This is a programming error, not a user-facing condition, so it does not
    derive from ScholarException and is never converted into a result.
    """
    pass
