"""
Core module containing the domain model, validation and the course registry.
"""

from .entities import *
from .interfaces import *
from .exceptions import *
from .enums import *
from .registry import CourseRegistry
from .directory import UserDirectory
from . import validator

__all__ = [
    # Entities
    "AbstractEntity",
    "User",
    "Course",
    "GradeRecord",

    # Stores
    "CourseRegistry",
    "UserDirectory",
    "validator",

    # Interfaces
    "Reportable",
    "RoleFacade",

    # Enums
    "Role",
    "EditPolicy",
    "MAX_TEXT_LENGTH",
    "MIN_GRADE",
    "MAX_GRADE",

    # Exceptions
    "ScholarException",
    "ValidationError",
    "IndexOutOfRangeError",
    "DuplicateOwnershipError",
    "AlreadyEnrolledError",
    "NotEnrolledError",
    "NotFoundError",
    "NoGradeYetError",
    "DuplicateAccountError",
    "AuthenticationError",
    "AuthorizationError",
    "ConfigurationError",
    "RegistryCorruptionError",
]
