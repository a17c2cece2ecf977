"""Exceptions raised by the user store."""

from __future__ import annotations


class UserStoreError(Exception):
    """Base class for user store errors."""

    pass


class UserNotFoundError(UserStoreError, KeyError):
    """Raised by strict lookups when no user has the requested id."""

    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(user_id)

    def __str__(self) -> str:
        return f"No user with id {self.user_id}"
