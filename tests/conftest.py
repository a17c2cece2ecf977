"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from userstore import LocalUserStore


@pytest.fixture
def store():
    """Fresh LocalUserStore instance."""
    return LocalUserStore()


@pytest.fixture
def populated_store(store):
    """Store holding John and Jane, created in that order."""
    store.create("John Doe", "john@example.com")
    store.create("Jane Doe", "jane@example.com")
    return store
