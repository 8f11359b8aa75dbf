"""
Main entry point for the Scholar registry.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from .bootstrap import seed_sample_data
from .config import Settings
from .core.directory import UserDirectory
from .core.exceptions import ScholarException
from .core.registry import CourseRegistry
from .services import AdminService, RoleService, login

logger = logging.getLogger(__name__)


class ScholarPlatform:
    """Wires the registry, the user directory and the settings together."""

    def __init__(self, settings: Optional[Settings] = None,
                 registry: Optional[CourseRegistry] = None,
                 directory: Optional[UserDirectory] = None):
        self._settings = settings or Settings()
        self._registry = registry if registry is not None else CourseRegistry()
        self._directory = directory if directory is not None else UserDirectory()

        if self._settings.seed_sample_data and len(self._registry) == 0:
            seed_sample_data(self._registry, self._directory)

    @property
    def registry(self) -> CourseRegistry:
        return self._registry

    @property
    def directory(self) -> UserDirectory:
        return self._directory

    @property
    def settings(self) -> Settings:
        return self._settings

    def login(self, email: str, password: str) -> RoleService:
        return login(email, password, self._registry, self._directory, self._settings)

    def report(self, admin_email: str = "admin1@example.com",
               password: str = "adminpass") -> List[Dict[str, Any]]:
        admin = self.login(admin_email, password)
        if not isinstance(admin, AdminService):
            raise ScholarException(f"{admin_email} is not an administrator")
        result = admin.view_report()
        return [course.model_dump() for course in result.data]

    def run_demo(self) -> Dict[str, Any]:
        """Enroll and grade a learner in the first sample course."""
        admin = self.login("admin1@example.com", "adminpass")
        steps = [admin.enroll_learner(1, "student1@example.com", "studentpass")]

        teacher = self.login("teacher1@example.com", "teacherpass")
        steps.append(teacher.add_grade(1, "student1@example.com", 87))

        learner = self.login("student1@example.com", "studentpass")
        grades = learner.view_grades()
        steps.append(grades)

        for step in steps:
            logger.info("%s: %s", "ok" if step.success else step.error_code, step.message)
        return {'grades': grades.data, 'report': self.report()}


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="Scholar course registry")
    parser.add_argument("--demo", action="store_true", help="Run demo scenario")
    parser.add_argument("--config", type=str, help="Configuration file path")
    parser.add_argument("--log-level", type=str.upper,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
                        help="Override the configured log level")

    args = parser.parse_args(argv)

    try:
        settings = Settings.from_file(args.config) if args.config else Settings()
    except ScholarException as e:
        parser.error(e.message)

    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    platform = ScholarPlatform(settings)
    try:
        if args.demo:
            output = platform.run_demo()
        else:
            output = {'report': platform.report()}
    except ScholarException as e:
        logger.error("%s (%s)", e.message, e.error_code)
        return 1
    print(json.dumps(output, indent=2))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
