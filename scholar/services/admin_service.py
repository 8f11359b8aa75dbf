"""
Administrator operations: course lifecycle, content, rosters and reports.
"""

import logging
from typing import Optional, Union

from ..core.entities import Course
from ..core.enums import Role
from ..core.exceptions import AlreadyEnrolledError, DuplicateOwnershipError
from ..core.interfaces import Reportable
from ..core.validator import require_email, require_string, to_index
from .base import RoleService, operation
from .results import OperationResult

logger = logging.getLogger(__name__)


class AdminService(RoleService, Reportable):
    """Service for administrators."""

    role = Role.ADMIN

    @operation("create course")
    def create_course(self, name: str, instructor_email: str) -> OperationResult:
        """Create a course. An instructor may own at most one course."""
        require_string(name, "course name")
        require_email(instructor_email, "instructor email")
        if self._registry.owns_course(instructor_email):
            raise DuplicateOwnershipError(
                f"{instructor_email} is already assigned to another course",
                details={'instructor_email': instructor_email}
            )

        course = self._registry.add_course(Course(name, instructor_email))
        logger.info("Admin %s created course %s (%s) for %s",
                    self.user.email, course.course_id, name, instructor_email)
        return OperationResult.ok("Course added successfully", self._summary(course))

    @operation("delete course")
    def delete_course(self, position: Union[int, str]) -> OperationResult:
        index = to_index(position, len(self._registry))
        course = self._registry.remove_course(index)
        logger.info("Admin %s deleted course %s (%s)", self.user.email, course.course_id, course.name)
        return OperationResult.ok(f"Successfully deleted course: {course.name}", course.course_id)

    @operation("view course")
    def view_course(self, position: Union[int, str]) -> OperationResult:
        course = self._resolve(position)
        return OperationResult.ok(f"Viewing course: {course.name}", self._detail(course))

    @operation("add content")
    def add_content(self, position: Union[int, str], text: str) -> OperationResult:
        course = self._resolve(position)
        course.add_content(text)
        logger.info("Admin %s added content to %s", self.user.email, course.name)
        return OperationResult.ok("Content added successfully", self._contents(course))

    @operation("remove content")
    def remove_content(self, position: Union[int, str],
                       content_position: Union[int, str]) -> OperationResult:
        course = self._resolve(position)
        removed = course.remove_content(to_index(content_position, len(course.contents)))
        logger.info("Admin %s removed content %r from %s", self.user.email, removed, course.name)
        return OperationResult.ok("Content removed successfully", self._contents(course))

    @operation("enroll learner")
    def enroll_learner(self, position: Union[int, str], email: str, password: str,
                       username: Optional[str] = None) -> OperationResult:
        """Enroll a learner, creating the learner account when the email is new."""
        course = self._resolve(position)
        require_email(email, "student email")
        if course.is_enrolled(email):
            # Before provisioning: a refused enrollment must not leave an account behind.
            raise AlreadyEnrolledError(f"{email} is already enrolled in {course.name}")

        user, created = self._directory.provision_learner(email, password, username)
        course.enroll_student(user.email)
        logger.info("Admin %s enrolled %s in %s (new account: %s)",
                    self.user.email, email, course.name, created)
        if created:
            message = "Student enrolled successfully and account created"
        else:
            message = "Student enrolled successfully"
        return OperationResult.ok(message, {'email': user.email, 'username': user.username,
                                            'account_created': created})

    @operation("remove learner")
    def remove_learner(self, position: Union[int, str], email: str) -> OperationResult:
        course = self._resolve(position)
        course.remove_student(email)
        logger.info("Admin %s removed %s from %s", self.user.email, email, course.name)
        return OperationResult.ok("Student removed successfully", list(course.students))

    @operation("view report")
    def view_report(self) -> OperationResult:
        reports = [self._report(course) for course in self._registry.list_courses()]
        if not reports:
            return OperationResult.ok("No courses available to generate reports", reports)
        return OperationResult.ok("Courses report", reports)
