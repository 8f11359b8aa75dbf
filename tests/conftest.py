"""Pytest configuration and shared fixtures.

Every test gets its own registry and user directory, so no test depends on
state left behind by another.
"""

import pytest

from scholar.config import Settings
from scholar.core import CourseRegistry, Role, UserDirectory
from scholar.services import AdminService, InstructorService, LearnerService


ADMIN_EMAIL = "admin1@example.com"
INSTRUCTOR_EMAIL = "t1@example.com"
OTHER_INSTRUCTOR_EMAIL = "t2@example.com"


@pytest.fixture(autouse=True)
def _reset_default_registry():
    """Drop the process-wide registry after each test."""
    yield
    CourseRegistry.reset_instance()


@pytest.fixture
def registry():
    """Create an empty course registry."""
    return CourseRegistry()


@pytest.fixture
def directory():
    """Create a directory holding one admin and two instructors."""
    directory = UserDirectory()
    directory.create_user("admin1", ADMIN_EMAIL, "adminpass", Role.ADMIN)
    directory.create_user("t1", INSTRUCTOR_EMAIL, "teacherpass", Role.INSTRUCTOR)
    directory.create_user("t2", OTHER_INSTRUCTOR_EMAIL, "teacherpass", Role.INSTRUCTOR)
    return directory


@pytest.fixture
def settings():
    """Default settings (owner-only instructor edits)."""
    return Settings()


@pytest.fixture
def admin(registry, directory, settings):
    """Admin service for admin1."""
    return AdminService(directory.get(ADMIN_EMAIL), registry, directory, settings)


@pytest.fixture
def instructor(registry, directory, settings):
    """Instructor service for t1."""
    return InstructorService(directory.get(INSTRUCTOR_EMAIL), registry, directory, settings)


@pytest.fixture
def other_instructor(registry, directory, settings):
    """Instructor service for t2."""
    return InstructorService(directory.get(OTHER_INSTRUCTOR_EMAIL), registry, directory, settings)


@pytest.fixture
def learner_for(registry, directory, settings):
    """Build a learner service, creating the learner account when needed."""
    def _learner(email: str) -> LearnerService:
        user, _ = directory.provision_learner(email, "studentpass")
        return LearnerService(user, registry, directory, settings)
    return _learner


@pytest.fixture
def two_courses(admin):
    """Mathematics (t1) at position 1 and Physics (t2) at position 2."""
    admin.create_course("Mathematics", INSTRUCTOR_EMAIL)
    admin.create_course("Physics", OTHER_INSTRUCTOR_EMAIL)
    return admin
