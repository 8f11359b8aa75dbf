"""
Core entities for the Scholar registry.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple

from .enums import Role
from .exceptions import (
    AlreadyEnrolledError, IndexOutOfRangeError, NotEnrolledError, NotFoundError, ValidationError
)
from .validator import is_valid_index, require_email, require_grade, require_string


class AbstractEntity:
    """Base entity with lifecycle timestamps and versioning."""

    def __init__(self):
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record a mutation."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }


class User(AbstractEntity):
    """Account record. The email is the natural key for a person."""

    def __init__(self, username: str, email: str, password: str, role: Role):
        super().__init__()
        self._username = require_string(username, "username")
        self._email = require_email(email)
        self._password = password
        self._role = role

    @property
    def username(self) -> str:
        return self._username

    @property
    def email(self) -> str:
        return self._email

    @property
    def role(self) -> Role:
        return self._role

    def check_password(self, password: str) -> bool:
        """Opaque credential comparison."""
        return self._password == password

    def to_dict(self) -> Dict[str, Any]:
        base_dict = super().to_dict()
        base_dict.update({
            'username': self._username,
            'email': self._email,
            'role': self._role.value,
        })
        return base_dict

    def __repr__(self) -> str:
        return f"User(email={self._email!r}, role={self._role.value})"


@dataclass(frozen=True)
class GradeRecord:
    """Immutable grade value for one student in one course."""
    student_email: str
    grade: int


class Course(AbstractEntity):
    """Course entity with content, roster and grade book."""

    def __init__(self, name: str, instructor_email: str):
        super().__init__()
        self._name = require_string(name, "course name")
        self._instructor_email = require_email(instructor_email, "instructor email")
        self._course_id: Optional[int] = None
        self._contents: List[str] = []
        self._grades: List[GradeRecord] = []
        self._students: List[str] = []

    @property
    def course_id(self) -> Optional[int]:
        """Stable identifier assigned by the registry, None until registered."""
        return self._course_id

    @property
    def name(self) -> str:
        return self._name

    @property
    def instructor_email(self) -> str:
        return self._instructor_email

    @property
    def contents(self) -> Tuple[str, ...]:
        return tuple(self._contents)

    @property
    def grades(self) -> Tuple[GradeRecord, ...]:
        return tuple(self._grades)

    @property
    def students(self) -> Tuple[str, ...]:
        return tuple(self._students)

    def assign_id(self, course_id: int) -> None:
        if self._course_id is not None:
            raise ValidationError(f"Course {self._name!r} is already registered")
        self._course_id = course_id

    def add_content(self, text: str) -> None:
        """Append a content item."""
        self._contents.append(require_string(text, "content"))
        self.touch()

    def remove_content(self, index: int) -> str:
        """Remove the content item at a zero-based index."""
        if not is_valid_index(index, len(self._contents)):
            raise IndexOutOfRangeError(
                f"Invalid content index {index}",
                details={'index': index, 'size': len(self._contents)}
            )
        removed = self._contents.pop(index)
        self.touch()
        return removed

    def is_enrolled(self, email: str) -> bool:
        return email in self._students

    def enroll_student(self, email: str) -> None:
        """Add a student to the roster."""
        require_email(email, "student email")
        if email in self._students:
            raise AlreadyEnrolledError(f"{email} is already enrolled in {self._name}")
        self._students.append(email)
        self.touch()

    def remove_student(self, email: str) -> None:
        """Remove a student from the roster. Grade history is kept."""
        if email not in self._students:
            raise NotFoundError(f"{email} is not enrolled in {self._name}")
        self._students.remove(email)
        self.touch()

    def add_grade(self, email: str, grade: int) -> None:
        """Record a grade, replacing any earlier grade for the same student.

        Enrollment is the caller's responsibility; see record_grade.
        """
        require_email(email, "student email")
        require_grade(grade)
        record = GradeRecord(email, grade)
        for i, existing in enumerate(self._grades):
            if existing.student_email == email:
                self._grades[i] = record
                break
        else:
            self._grades.append(record)
        self.touch()

    def record_grade(self, email: str, grade: int) -> None:
        """Record a grade for an enrolled student."""
        if not self.is_enrolled(email):
            raise NotEnrolledError(f"{email} is not enrolled in {self._name}")
        self.add_grade(email, grade)

    def grade_for(self, email: str) -> Optional[int]:
        for record in self._grades:
            if record.student_email == email:
                return record.grade
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'course_id': self._course_id,
            'name': self._name,
            'instructor_email': self._instructor_email,
            'contents': list(self._contents),
            'students': list(self._students),
            'grades': [
                {'student_email': r.student_email, 'grade': r.grade} for r in self._grades
            ],
        })
        return base_dict

    def __repr__(self) -> str:
        return f"Course(id={self._course_id}, name={self._name!r})"
