"""Storage protocol for swappable user store backends.

Usage:
    def register(storage: UserStorage) -> User:
        return storage.create("Jane Doe", "jane@example.com")

    register(LocalUserStore())
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from userstore.core.record import User


@runtime_checkable
class UserStorage(Protocol):
    """Abstract user store interface. Implementations hold the actual records."""

    def create(self, name: str, email: str) -> User:
        """Create a user with a freshly allocated id and return it."""
        ...

    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with this id, or None."""
        ...

    def delete_by_id(self, user_id: int) -> bool:
        """Remove the user with this id. Returns True if it existed."""
        ...

    def list_all(self) -> tuple[User, ...]:
        """Snapshot of all users in insertion order."""
        ...

    def __len__(self) -> int:
        """Number of users currently stored."""
        ...

    def __contains__(self, user_id: object) -> bool:
        """Check whether a user with this id is stored."""
        ...
