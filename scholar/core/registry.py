"""
Ordered course registry.

The registry is a plain ordered store: it knows positions and stable ids but
enforces no business rules. Ownership and enrollment rules live in the role
services.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .entities import Course
from .exceptions import IndexOutOfRangeError, NotFoundError, RegistryCorruptionError
from .validator import is_valid_index

logger = logging.getLogger(__name__)


class CourseRegistry:
    """Authoritative ordered collection of courses."""

    _instance: Optional["CourseRegistry"] = None

    def __init__(self):
        self._courses: List[Course] = []
        self._next_id = 1

    @classmethod
    def instance(cls) -> "CourseRegistry":
        """Get the process-wide default registry, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the process-wide default registry."""
        cls._instance = None

    def reset(self) -> None:
        """Remove every course. Ids keep increasing."""
        self._courses.clear()
        logger.debug("Registry reset")

    def add_course(self, course: Course) -> Course:
        """Append a course and assign its stable id."""
        course.assign_id(self._next_id)
        self._next_id += 1
        self._courses.append(course)
        self.verify()
        logger.debug("Registered course %s (%s) at position %d",
                     course.course_id, course.name, len(self._courses))
        return course

    def get_course(self, index: int) -> Course:
        """Get the course at a zero-based index."""
        self._check_index(index)
        return self._courses[index]

    def remove_course(self, index: int) -> Course:
        """Remove the course at a zero-based index; later positions shift down."""
        self._check_index(index)
        course = self._courses.pop(index)
        self.verify()
        logger.debug("Removed course %s (%s)", course.course_id, course.name)
        return course

    def list_courses(self) -> Tuple[Course, ...]:
        return tuple(self._courses)

    def get_by_id(self, course_id: int) -> Course:
        for course in self._courses:
            if course.course_id == course_id:
                return course
        raise NotFoundError(f"Course {course_id} not found", details={'course_id': course_id})

    def position_of(self, course: Course) -> int:
        """Current zero-based position of a registered course."""
        for index, candidate in enumerate(self._courses):
            if candidate is course:
                return index
        raise NotFoundError(f"Course {course.name!r} is not registered")

    def find_by_instructor(self, email: str) -> List[Course]:
        return [course for course in self._courses if course.instructor_email == email]

    def owns_course(self, email: str) -> bool:
        return any(course.instructor_email == email for course in self._courses)

    def courses_for_student(self, email: str) -> List[Course]:
        return [course for course in self._courses if course.is_enrolled(email)]

    def verify(self) -> None:
        """Check structural invariants. Runs after every add and remove."""
        seen = set()
        for course in self._courses:
            if course.course_id is None or course.course_id in seen:
                raise RegistryCorruptionError(
                    f"Course id {course.course_id!r} is missing or duplicated"
                )
            seen.add(course.course_id)

    def _check_index(self, index: int) -> None:
        if not is_valid_index(index, len(self._courses)):
            raise IndexOutOfRangeError(
                f"Invalid course index {index}",
                details={'index': index, 'size': len(self._courses)}
            )

    def __len__(self) -> int:
        return len(self._courses)

    def __iter__(self) -> Iterator[Course]:
        return iter(tuple(self._courses))
