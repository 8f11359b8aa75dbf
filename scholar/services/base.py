"""
Shared machinery for the role services.

Each public operation runs inside ``operation``: recoverable Scholar errors
are logged and turned into a failed OperationResult at that boundary, while
anything else (including RegistryCorruptionError) propagates to the caller.
"""

import functools
import logging
from typing import Callable, Iterable, List, Optional, Union

from ..config import Settings
from ..core.directory import UserDirectory
from ..core.entities import Course, User
from ..core.exceptions import AuthorizationError, ScholarException
from ..core.interfaces import RoleFacade
from ..core.registry import CourseRegistry
from ..core.validator import to_index
from .results import (
    ContentItem, CourseDetail, CourseReport, CourseSummary, OperationResult
)

logger = logging.getLogger(__name__)


def operation(action: str) -> Callable:
    """Convert domain errors raised by a service method into a failed result."""
    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except ScholarException as e:
                logger.warning("%s %s refused %s: %s",
                               self.role.value, self.user.email, action, e.message)
                return OperationResult.failure(e)
        return wrapper
    return decorator


class RoleService(RoleFacade):
    """Base class binding a user account to the registry."""

    def __init__(self, user: User, registry: CourseRegistry, directory: UserDirectory,
                 settings: Optional[Settings] = None):
        if user.role is not self.role:
            raise AuthorizationError(
                f"{user.email} is a {user.role.value}, not a {self.role.value}",
                error_code="ROLE_MISMATCH"
            )
        self._user = user
        self._registry = registry
        self._directory = directory
        self._settings = settings or Settings()

    @property
    def user(self) -> User:
        return self._user

    @operation("list courses")
    def list_courses(self) -> OperationResult:
        courses = self._summaries(self._registry.list_courses())
        if not courses:
            return OperationResult.ok("There are no courses available", courses)
        return OperationResult.ok(f"{len(courses)} course(s)", courses)

    def _resolve(self, position: Union[int, str]) -> Course:
        """Look up a course by its one-based registry position."""
        return self._registry.get_course(to_index(position, len(self._registry)))

    def _position(self, course: Course) -> int:
        return self._registry.position_of(course) + 1

    def _summary(self, course: Course) -> CourseSummary:
        return CourseSummary(
            position=self._position(course),
            course_id=course.course_id,
            name=course.name,
            instructor_email=course.instructor_email,
        )

    def _summaries(self, courses: Iterable[Course]) -> List[CourseSummary]:
        return [self._summary(course) for course in courses]

    @staticmethod
    def _contents(course: Course) -> List[ContentItem]:
        return [ContentItem(position=i + 1, text=text) for i, text in enumerate(course.contents)]

    def _detail(self, course: Course, include_students: bool = True) -> CourseDetail:
        return CourseDetail(
            **self._summary(course).model_dump(),
            contents=self._contents(course),
            students=list(course.students) if include_students else [],
        )

    @staticmethod
    def _report(course: Course) -> CourseReport:
        return CourseReport.model_validate(course.to_dict())
