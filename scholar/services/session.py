"""
Role dispatch: map an authenticated account to its service.
"""

import logging
from typing import Dict, Optional, Type

from ..config import Settings
from ..core.directory import UserDirectory
from ..core.entities import User
from ..core.enums import Role
from ..core.registry import CourseRegistry
from .admin_service import AdminService
from .base import RoleService
from .instructor_service import InstructorService
from .learner_service import LearnerService

logger = logging.getLogger(__name__)

SERVICES: Dict[Role, Type[RoleService]] = {
    Role.ADMIN: AdminService,
    Role.INSTRUCTOR: InstructorService,
    Role.LEARNER: LearnerService,
}


def open_session(user: User, registry: CourseRegistry, directory: UserDirectory,
                 settings: Optional[Settings] = None) -> RoleService:
    """Build the service matching the user's role."""
    service_cls = SERVICES[user.role]
    return service_cls(user, registry, directory, settings)


def login(email: str, password: str, registry: CourseRegistry, directory: UserDirectory,
          settings: Optional[Settings] = None) -> RoleService:
    """Authenticate and open a session. Raises AuthenticationError."""
    user = directory.authenticate(email, password)
    logger.info("%s logged in as %s", email, user.role.value)
    return open_session(user, registry, directory, settings)
