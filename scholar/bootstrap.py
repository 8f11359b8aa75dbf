"""
Sample data used by the command line and the demo.
"""

import logging

from .core.directory import UserDirectory
from .core.entities import Course
from .core.enums import Role
from .core.registry import CourseRegistry

logger = logging.getLogger(__name__)

SAMPLE_COURSES = [
    ("Mathematics", "teacher1@example.com", ["Introduction to Algebra", "Advanced Calculus"]),
    ("Physics", "teacher2@example.com", ["Newton's Laws", "Thermodynamics"]),
]

SAMPLE_USERS = [
    ("admin1", "admin1@example.com", "adminpass", Role.ADMIN),
    ("teacher1", "teacher1@example.com", "teacherpass", Role.INSTRUCTOR),
    ("teacher2", "teacher2@example.com", "teacherpass", Role.INSTRUCTOR),
]


def seed_sample_data(registry: CourseRegistry, directory: UserDirectory) -> None:
    """Load the sample courses and accounts into empty stores."""
    for name, instructor_email, contents in SAMPLE_COURSES:
        course = Course(name, instructor_email)
        for text in contents:
            course.add_content(text)
        registry.add_course(course)

    for username, email, password, role in SAMPLE_USERS:
        directory.create_user(username, email, password, role)

    logger.info("Seeded %d courses and %d accounts", len(SAMPLE_COURSES), len(SAMPLE_USERS))
