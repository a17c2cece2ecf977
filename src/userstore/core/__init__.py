"""Core functionalities: immutable record types.

Architecture Note:
    core/ holds plain value types with no runtime state.
    For the stateful store, see storage/.
"""

from userstore.core.record import User

__all__ = [
    "User",
]
