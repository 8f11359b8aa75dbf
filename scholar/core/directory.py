"""
User directory: account provisioning and the opaque login check.
"""

import logging
from typing import Dict, List, Optional, Tuple

from .entities import User
from .enums import Role
from .exceptions import AuthenticationError, DuplicateAccountError, NotFoundError
from .validator import require_email

logger = logging.getLogger(__name__)


class UserDirectory:
    """In-memory account store keyed by email."""

    def __init__(self):
        self._users: Dict[str, User] = {}

    def add_user(self, user: User) -> User:
        """Register an account. Email and username must both be unused."""
        if user.email in self._users:
            raise DuplicateAccountError(f"An account for {user.email} already exists")
        if self._username_taken(user.username):
            raise DuplicateAccountError(f"Username {user.username!r} is already taken")
        self._users[user.email] = user
        logger.debug("Added %s account for %s", user.role.value, user.email)
        return user

    def create_user(self, username: str, email: str, password: str, role: Role) -> User:
        return self.add_user(User(username, email, password, role))

    def find(self, email: str) -> Optional[User]:
        return self._users.get(email)

    def get(self, email: str) -> User:
        user = self.find(email)
        if user is None:
            raise NotFoundError(f"No account for {email}")
        return user

    def list_users(self, role: Optional[Role] = None) -> List[User]:
        return [u for u in self._users.values() if role is None or u.role is role]

    def authenticate(self, email: str, password: str) -> User:
        """Return the account whose credentials match."""
        user = self._users.get(email)
        if user is None or not user.check_password(password):
            logger.info("Failed login for %s", email)
            raise AuthenticationError("Invalid login credentials")
        return user

    def provision_learner(self, email: str, password: str,
                          username: Optional[str] = None) -> Tuple[User, bool]:
        """Get or create the learner account for an email.

        Returns the account and whether it was created.
        """
        require_email(email, "student email")
        existing = self._users.get(email)
        if existing is not None:
            if existing.role is not Role.LEARNER:
                raise DuplicateAccountError(
                    f"{email} already belongs to a {existing.role.value} account"
                )
            return existing, False

        username = username or email.split('@', 1)[0]
        user = self.add_user(User(username, email, password, Role.LEARNER))
        logger.info("Created learner account %s", email)
        return user, True

    def _username_taken(self, username: str) -> bool:
        return any(u.username == username for u in self._users.values())

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, email: object) -> bool:
        return email in self._users
