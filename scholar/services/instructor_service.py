"""
Instructor operations: viewing courses, editing content and grading.
"""

import logging
from typing import Union

from ..core.entities import Course
from ..core.enums import EditPolicy, Role
from ..core.exceptions import AuthorizationError, NotEnrolledError
from ..core.interfaces import Reportable
from ..core.validator import parse_grade, require_email, to_index
from .base import RoleService, operation
from .results import OperationResult

logger = logging.getLogger(__name__)


class InstructorService(RoleService, Reportable):
    """Service for instructors.

    Content edits and grading follow ``Settings.instructor_edit_policy``:
    with OWNER_ONLY an instructor may only change the course they own, with
    ANY every instructor may change every course. Viewing is never
    restricted.
    """

    role = Role.INSTRUCTOR

    @operation("view course")
    def view_course(self, position: Union[int, str]) -> OperationResult:
        course = self._resolve(position)
        return OperationResult.ok(f"Viewing course: {course.name}",
                                  self._detail(course, include_students=False))

    @operation("list students")
    def list_students(self, position: Union[int, str]) -> OperationResult:
        course = self._resolve(position)
        return OperationResult.ok(f"{len(course.students)} student(s) in {course.name}",
                                  list(course.students))

    @operation("add content")
    def add_content(self, position: Union[int, str], text: str) -> OperationResult:
        course = self._resolve(position)
        self._check_can_edit(course)
        course.add_content(text)
        logger.info("Instructor %s added content to %s", self.user.email, course.name)
        return OperationResult.ok(f"Content added to the course: {course.name}",
                                  self._contents(course))

    @operation("remove content")
    def remove_content(self, position: Union[int, str],
                       content_position: Union[int, str]) -> OperationResult:
        course = self._resolve(position)
        self._check_can_edit(course)
        removed = course.remove_content(to_index(content_position, len(course.contents)))
        logger.info("Instructor %s removed content %r from %s", self.user.email, removed, course.name)
        return OperationResult.ok("Content removed successfully", self._contents(course))

    @operation("add grade")
    def add_grade(self, position: Union[int, str], email: str,
                  grade: Union[int, str]) -> OperationResult:
        """Grade an enrolled learner. Grading again replaces the earlier grade."""
        course = self._resolve(position)
        self._check_can_edit(course)
        require_email(email, "student email")
        if not course.is_enrolled(email):
            raise NotEnrolledError(f"{email} is not enrolled in {course.name}",
                                   details={'student_email': email})
        value = parse_grade(grade)

        previous = course.grade_for(email)
        course.add_grade(email, value)
        if previous is None:
            logger.info("Instructor %s graded %s in %s: %d",
                        self.user.email, email, course.name, value)
        else:
            logger.info("Instructor %s regraded %s in %s: %d -> %d",
                        self.user.email, email, course.name, previous, value)
        return OperationResult.ok(f"Grade added successfully for student: {email}",
                                  {'student_email': email, 'grade': value, 'previous': previous})

    @operation("view report")
    def view_report(self) -> OperationResult:
        owned = self._registry.find_by_instructor(self.user.email)
        reports = [self._report(course) for course in owned]
        if not reports:
            return OperationResult.ok("No courses assigned to you", reports)
        return OperationResult.ok(f"Courses report for {self.user.email}", reports)

    def _check_can_edit(self, course: Course) -> None:
        if self._settings.instructor_edit_policy is EditPolicy.ANY:
            return
        if course.instructor_email != self.user.email:
            raise AuthorizationError(
                f"{course.name} is owned by {course.instructor_email}",
                details={'course_id': course.course_id}
            )
