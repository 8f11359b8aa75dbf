"""
Payload models returned by the role services.

Every listing carries one-based positions; callers pass the same positions
back into the services.
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..core.exceptions import ScholarException


class ContentItem(BaseModel):
    position: int = Field(..., ge=1)
    text: str


class CourseSummary(BaseModel):
    position: int = Field(..., ge=1)
    course_id: int
    name: str
    instructor_email: str


class CourseDetail(CourseSummary):
    contents: List[ContentItem] = []
    students: List[str] = []


class GradeEntry(BaseModel):
    student_email: str
    grade: int = Field(..., ge=0, le=100)


class CourseReport(BaseModel):
    course_id: int
    name: str
    instructor_email: str
    students: List[str] = []
    grades: List[GradeEntry] = []


class OperationResult(BaseModel):
    """Outcome of one service operation."""
    success: bool
    message: str
    data: Any = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, message: str, data: Any = None) -> "OperationResult":
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(cls, error: ScholarException) -> "OperationResult":
        return cls(
            success=False,
            message=error.message,
            data=error.details or None,
            error_code=error.error_code,
        )
