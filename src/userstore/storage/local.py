"""Local in-memory user store.

Simple list-plus-dict storage suitable for single-process use and testing.
Not thread-safe: callers sharing a store across threads must serialize access.

Usage:
    store = LocalUserStore()
    user = store.create("John Doe", "john@example.com")
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from userstore.core.record import User
from userstore.errors import UserNotFoundError
from userstore.storage.allocator import IdAllocator

if TYPE_CHECKING:
    from userstore.config import StoreSettings

logger = logging.getLogger(__name__)


class LocalUserStore:
    """In-memory user store keeping insertion order.

    Structure:
        _users: users in insertion order (minus deletions)
        _index[user_id] = user

    Both structures are only mutated by create() and delete_by_id().

    Args:
        first_id: First id this store issues (default 1).
    """

    def __init__(self, first_id: int = 1):
        """Initialize an empty store.

        Args:
            first_id: First id this store issues (default 1).
        """
        self._allocator = IdAllocator(start=first_id)
        self._users: list[User] = []
        self._index: dict[int, User] = {}

    @classmethod
    def from_settings(cls, settings: StoreSettings | None = None) -> LocalUserStore:
        """Build a store from settings, loading them from the environment if omitted.

        Args:
            settings: Store settings (default: StoreSettings() from USERSTORE_* env).

        Returns:
            Empty store configured from settings.
        """
        if settings is None:
            from userstore.config import StoreSettings

            settings = StoreSettings()
        return cls(first_id=settings.first_id)

    @property
    def next_id(self) -> int:
        """Id the next created user will receive."""
        return self._allocator.next_id

    def create(self, name: str, email: str) -> User:
        """Create a user and append it to the store.

        Name and email are stored as given.

        Args:
            name: User name.
            email: User email.

        Returns:
            The created user.
        """
        user = User(id=self._allocator.allocate(), name=name, email=email)
        self._users.append(user)
        self._index[user.id] = user
        logger.debug("Created user %d", user.id)
        return user

    def find_by_id(self, user_id: int) -> User | None:
        """Look up a user by id.

        Args:
            user_id: Id to look up.

        Returns:
            The user, or None if no user has this id.
        """
        return self._index.get(user_id)

    def get(self, user_id: int) -> User:
        """Look up a user by id, raising if absent.

        Args:
            user_id: Id to look up.

        Returns:
            The user.

        Raises:
            UserNotFoundError: If no user has this id.
        """
        user = self._index.get(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    def delete_by_id(self, user_id: int) -> bool:
        """Remove a user permanently.

        Args:
            user_id: Id of the user to remove.

        Returns:
            True if the user existed and was removed, False otherwise.
        """
        user = self._index.pop(user_id, None)
        if user is None:
            logger.debug("Delete of unknown user %d ignored", user_id)
            return False
        self._users.remove(user)
        logger.debug("Deleted user %d", user_id)
        return True

    def list_all(self) -> tuple[User, ...]:
        """Return all users in insertion order.

        Returns:
            Snapshot tuple; later store mutations do not change it.
        """
        return tuple(self._users)

    def __len__(self) -> int:
        return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        return user_id in self._index

    def __iter__(self) -> Iterator[User]:
        return iter(self.list_all())
