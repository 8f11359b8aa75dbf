"""
Enumerations and constants for the Scholar registry.
"""

from enum import Enum


MAX_TEXT_LENGTH = 100
MIN_GRADE = 0
MAX_GRADE = 100


class Role(Enum):
    """Fixed set of roles a user account can hold."""
    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    LEARNER = "learner"


class EditPolicy(Enum):
    """Which instructors may edit course content and grades."""
    OWNER_ONLY = "owner_only"  # Only the owning instructor
    ANY = "any"  # Any instructor account
