"""userstore: in-memory store for user records.

Usage:
    from userstore import LocalUserStore

    store = LocalUserStore()
    user = store.create("John Doe", "john@example.com")
    assert store.find_by_id(user.id) == user
    store.delete_by_id(user.id)
"""

__version__ = "0.1.0"

# Core primitives
from userstore.core import User

# Errors
from userstore.errors import UserNotFoundError, UserStoreError

# Storage
from userstore.storage import (
    IdAllocator,
    LocalUserStore,
    UserStorage,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "User",
    # Storage
    "UserStorage",
    "LocalUserStore",
    "IdAllocator",
    # Errors
    "UserStoreError",
    "UserNotFoundError",
]
