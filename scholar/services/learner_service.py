"""
Learner operations, always scoped to the learner's own email.
"""

import logging
from collections import Counter
from typing import Union

from ..core.enums import Role
from ..core.exceptions import NoGradeYetError, NotEnrolledError
from .base import RoleService, operation
from .results import OperationResult

logger = logging.getLogger(__name__)


class LearnerService(RoleService):
    """Service for learners."""

    role = Role.LEARNER

    @operation("list enrolled courses")
    def list_enrolled_courses(self) -> OperationResult:
        courses = self._summaries(self._registry.courses_for_student(self.user.email))
        if not courses:
            return OperationResult.ok("You are not enrolled in any courses", courses)
        return OperationResult.ok(f"Enrolled in {len(courses)} course(s)", courses)

    @operation("list available courses")
    def list_available_courses(self) -> OperationResult:
        courses = self._summaries(
            course for course in self._registry.list_courses()
            if not course.is_enrolled(self.user.email)
        )
        if not courses:
            return OperationResult.ok("No courses available for enrollment", courses)
        return OperationResult.ok(f"{len(courses)} course(s) available", courses)

    @operation("view course contents")
    def view_course_contents(self, position: Union[int, str]) -> OperationResult:
        course = self._resolve(position)
        if not course.is_enrolled(self.user.email):
            raise NotEnrolledError(f"You are not enrolled in {course.name}")
        contents = self._contents(course)
        if not contents:
            return OperationResult.ok("No contents available for this course", contents)
        return OperationResult.ok(f"Contents of {course.name}", contents)

    @operation("view grade")
    def view_grade(self, position: Union[int, str]) -> OperationResult:
        """Show the learner's grade in one course.

        Grades recorded before the learner left a course stay in the grade
        book but are not shown here.
        """
        course = self._resolve(position)
        email = self.user.email
        grade = course.grade_for(email)
        if not course.is_enrolled(email):
            if grade is None:
                raise NotEnrolledError(f"You are not enrolled in {course.name}")
            raise NoGradeYetError(f"No grade available for {course.name}")
        if grade is None:
            raise NoGradeYetError(f"No grade available for {course.name}")
        return OperationResult.ok(f"Your Grade in {course.name}: {grade}%", grade)

    @operation("view grades")
    def view_grades(self) -> OperationResult:
        """Map course name to grade for every enrolled, graded course.

        Course names are not unique. When two graded courses share a name,
        each is keyed as ``"<name> (#<course_id>)"`` so no grade is dropped.
        """
        graded = [
            (course, course.grade_for(self.user.email))
            for course in self._registry.courses_for_student(self.user.email)
        ]
        graded = [(course, grade) for course, grade in graded if grade is not None]
        name_counts = Counter(course.name for course, _ in graded)
        grades = {}
        for course, grade in graded:
            key = course.name
            if name_counts[key] > 1:
                key = f"{course.name} (#{course.course_id})"
            grades[key] = grade
        if not grades:
            return OperationResult.ok("No grades available", grades)
        return OperationResult.ok(f"{len(grades)} grade(s)", grades)

    @operation("enroll")
    def enroll(self, position: Union[int, str]) -> OperationResult:
        course = self._resolve(position)
        course.enroll_student(self.user.email)
        logger.info("Learner %s enrolled in %s", self.user.email, course.name)
        return OperationResult.ok(f"Successfully enrolled in the course: {course.name}",
                                  self._summary(course))
