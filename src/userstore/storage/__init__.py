"""Storage backends."""

from userstore.storage.allocator import IdAllocator
from userstore.storage.local import LocalUserStore
from userstore.storage.protocol import UserStorage

__all__ = [
    "UserStorage",
    "LocalUserStore",
    "IdAllocator",
]
