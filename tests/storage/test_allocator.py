"""Tests for user id allocation.

Critical Invariants:
- Ids strictly increase
- Ids are never reused
- First id is positive
"""

import pytest

from userstore.storage.allocator import IdAllocator


@pytest.fixture
def allocator():
    """Create an IdAllocator starting at 1."""
    return IdAllocator()


def test_first_id_is_one(allocator):
    assert allocator.allocate() == 1


def test_ids_strictly_increase(allocator):
    """CRITICAL: Every id is greater than all ids issued before it."""
    issued = [allocator.allocate() for _ in range(50)]

    assert issued == sorted(set(issued)), "INVARIANT: ids must strictly increase"


def test_next_id_exceeds_every_issued_id(allocator):
    issued = [allocator.allocate() for _ in range(5)]

    assert allocator.next_id > max(issued)
    assert allocator.peek() == allocator.next_id


def test_peek_does_not_consume(allocator):
    assert allocator.peek() == 1
    assert allocator.peek() == 1
    assert allocator.allocate() == 1


def test_was_issued(allocator):
    allocator.allocate()
    allocator.allocate()

    assert allocator.was_issued(1)
    assert allocator.was_issued(2)
    assert not allocator.was_issued(3)
    assert not allocator.was_issued(0)


def test_custom_start():
    allocator = IdAllocator(start=100)

    assert allocator.allocate() == 100
    assert allocator.allocate() == 101
    assert not allocator.was_issued(99)


@pytest.mark.parametrize("start", [0, -1])
def test_non_positive_start_rejected(start):
    with pytest.raises(ValueError, match="positive integer"):
        IdAllocator(start=start)
