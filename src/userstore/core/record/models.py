"""User record models.

Usage:
    user = User(id=1, name="John Doe", email="john@example.com")
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class User:
    """Immutable user record.

    The id is assigned by the owning store and never supplied by callers.
    Name and email are opaque text: no format or uniqueness checks.
    """

    id: int
    name: str
    email: str
