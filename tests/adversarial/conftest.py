"""
Shared fixtures for adversarial tests.

Provides common test infrastructure for race condition and brute force
tests. Attacks run against the in-memory store, whose conditional write
is atomic under a lock like the PostgreSQL adapter's single UPDATE.
"""

import pytest

from src.adapters.store.memory import InMemoryStore
from src.domain.identity import IdentityManager

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


@pytest.fixture
def identities() -> IdentityManager:
    """Create identity manager over a fresh store for each test."""
    return IdentityManager(store=InMemoryStore(), table="identities")
