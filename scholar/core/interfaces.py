"""
Core interfaces and abstract base classes for the Scholar registry.
"""

from abc import ABC, abstractmethod
from typing import Any

from .enums import Role


class Reportable(ABC):
    """Interface for services that can generate course reports."""

    @abstractmethod
    def view_report(self) -> Any:
        """Render the courses visible to this service with rosters and grades."""
        pass


class RoleFacade(ABC):
    """Operation surface shared by every role."""

    @property
    @abstractmethod
    def role(self) -> Role:
        """Role served by this facade."""
        pass

    @abstractmethod
    def list_courses(self) -> Any:
        """List courses with one-based positions."""
        pass
