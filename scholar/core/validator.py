"""
Stateless validation and parsing helpers.

The predicates never raise; the ``require_*`` and parsing helpers convert a
failed predicate into the matching domain exception so callers can validate
before they mutate anything.
"""

from typing import Any, Union

from .enums import MAX_TEXT_LENGTH, MIN_GRADE, MAX_GRADE
from .exceptions import ValidationError, IndexOutOfRangeError


def is_valid_email(email: Any) -> bool:
    """Check the basic ``local@domain.tld`` shape."""
    if not isinstance(email, str):
        return False
    at_pos = email.find('@')
    dot_pos = email.rfind('.')
    return (at_pos > 0 and dot_pos != -1 and
            at_pos < dot_pos and dot_pos < len(email) - 1)


def is_valid_grade(grade: Any) -> bool:
    """Check that a grade is an integer percentage."""
    if isinstance(grade, bool) or not isinstance(grade, int):
        return False
    return MIN_GRADE <= grade <= MAX_GRADE


def is_valid_index(index: Any, size: int) -> bool:
    """Zero-based bounds check."""
    if isinstance(index, bool) or not isinstance(index, int):
        return False
    return 0 <= index < size


def is_valid_string(text: Any) -> bool:
    """Check that text is non-empty and within the length limit."""
    return isinstance(text, str) and 1 <= len(text) <= MAX_TEXT_LENGTH


def require_email(email: Any, field: str = "email") -> str:
    if not is_valid_email(email):
        raise ValidationError(f"Invalid {field}: {email!r}", details={'field': field})
    return email


def require_grade(grade: Any) -> int:
    if not is_valid_grade(grade):
        raise ValidationError(
            f"Invalid grade: {grade!r} (expected {MIN_GRADE}-{MAX_GRADE})",
            details={'field': 'grade'}
        )
    return grade


def require_string(text: Any, field: str = "text") -> str:
    if not is_valid_string(text):
        raise ValidationError(
            f"Invalid {field}: must be 1-{MAX_TEXT_LENGTH} characters",
            details={'field': field}
        )
    return text


def _parse_int(value: Union[int, str]) -> int:
    if isinstance(value, bool):
        raise ValueError(value)
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return int(value.strip())
    raise ValueError(value)


def parse_grade(value: Union[int, str]) -> int:
    """Parse a grade given as an int or a decimal string."""
    try:
        grade = _parse_int(value)
    except ValueError:
        raise ValidationError(f"Invalid grade: {value!r} is not a number", details={'field': 'grade'})
    return require_grade(grade)


def to_index(position: Union[int, str], size: int) -> int:
    """Convert a one-based position into a zero-based index.

    Raises IndexOutOfRangeError naming the valid range ``1..size``.
    """
    try:
        index = _parse_int(position) - 1
    except ValueError:
        index = -1
    if not is_valid_index(index, size):
        if size == 0:
            message = f"Invalid position {position!r}: the list is empty"
        else:
            message = f"Invalid position {position!r}: enter a number between 1 and {size}"
        raise IndexOutOfRangeError(message, details={'position': position, 'size': size})
    return index
