"""User id allocation service.

IdAllocator is a stateful service that issues user ids.
"""

from __future__ import annotations


class IdAllocator:
    """Allocates monotonically increasing user ids.

    Ids are never recycled: there is no free list, so an id that was issued
    and later deleted can never be handed out again.

    Args:
        start: First id to issue (default 1). Must be positive.
    """

    def __init__(self, start: int = 1):
        """Initialize the allocator.

        Args:
            start: First id to issue (default 1).

        Raises:
            ValueError: If start is less than 1.
        """
        if start < 1:
            raise ValueError(f"First id must be a positive integer, got {start}")
        self._start = start
        self._next_id = start

    @property
    def next_id(self) -> int:
        """Id the next call to allocate() will return."""
        return self._next_id

    def peek(self) -> int:
        """Return the next id without consuming it."""
        return self._next_id

    def allocate(self) -> int:
        """Issue the next id.

        Returns:
            Newly allocated id, strictly greater than every id issued before.
        """
        user_id = self._next_id
        self._next_id += 1
        return user_id

    def was_issued(self, user_id: int) -> bool:
        """Check whether an id has already been handed out by this allocator.

        Args:
            user_id: Id to check.

        Returns:
            True if the id was issued, whether or not its user still exists.
        """
        return self._start <= user_id < self._next_id
