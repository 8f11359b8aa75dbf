"""
Services module containing the role-scoped operation surfaces.
"""

from .admin_service import AdminService
from .instructor_service import InstructorService
from .learner_service import LearnerService
from .base import RoleService
from .results import (
    ContentItem, CourseDetail, CourseReport, CourseSummary, GradeEntry, OperationResult
)
from .session import SERVICES, login, open_session

__all__ = [
    "AdminService",
    "InstructorService",
    "LearnerService",
    "RoleService",
    "ContentItem",
    "CourseDetail",
    "CourseReport",
    "CourseSummary",
    "GradeEntry",
    "OperationResult",
    "SERVICES",
    "login",
    "open_session",
]
