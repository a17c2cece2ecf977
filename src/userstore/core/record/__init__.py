"""User record model."""

from userstore.core.record.models import User

__all__ = [
    "User",
]
