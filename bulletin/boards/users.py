"""
UserDirectory - user list looked up by name.

A name may be registered once per role; lookups and removals by name act
on the first matching user in list order.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging

from bulletin.boards.models import User, UserRole
from bulletin.core.exceptions import DuplicateUserError, UserNotFoundError, ValidationError
from bulletin.core.linked import LinkedArena

logger = logging.getLogger(__name__)


class UserDirectory:
    """
    Ordered list of users.

    Example:
        >>> directory = UserDirectory()
        >>> directory.add("alice", "alice@example.com", "s3cret", "admin").role
        <UserRole.ADMIN: 'admin'>
        >>> directory.search("alice").email
        'alice@example.com'
    """

    def __init__(self) -> None:
        self._users: LinkedArena[User] = LinkedArena()

    def add(
        self, name: str, email: str, password: str, role: UserRole | str = UserRole.USER
    ) -> User:
        """
        Append a user.

        Raises:
            ValidationError: If role is unknown
            DuplicateUserError: If a user with the same name and role exists
        """
        try:
            role = UserRole(role)
        except ValueError as e:
            raise ValidationError(f"Unknown user role: {role!r}") from e

        match = self._users.find_forward(
            self._users.head, lambda u: u.name == name and u.role is role
        )
        if match is not None:
            logger.warning(f"Rejected user {name!r}: already registered as {role.value}")
            raise DuplicateUserError(name, role.value)

        user = User(name=name, email=email, password=password, role=role)
        self._users.append(user)
        logger.debug(f"Added user {name!r} ({role.value})")
        return user.model_copy()

    def remove(self, name: str) -> User:
        """
        Remove the first user with this name.

        Raises:
            UserNotFoundError: If no user has this name
        """
        handle = self._find(name)
        user = self._users.unlink(handle)
        logger.debug(f"Removed user {name!r}")
        return user

    def search(self, name: str) -> User:
        """
        Find the first user with this name.

        Raises:
            UserNotFoundError: If no user has this name
        """
        return self._users.get(self._find(name)).model_copy()

    def list_all(self) -> Iterator[User]:
        for user in self._users.values():
            yield user.model_copy()

    def _find(self, name: str) -> int:
        handle = self._users.find_forward(self._users.head, lambda u: u.name == name)
        if handle is None:
            raise UserNotFoundError(name)
        return handle

    def __len__(self) -> int:
        return len(self._users)
