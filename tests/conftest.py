"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- In-memory store and domain services wired to it
- A recording store stub for asserting store access
"""

from typing import Any

import pytest

from src.adapters.store.memory import InMemoryStore
from src.domain.identity import IdentityManager
from src.domain.keys import KeyManager

KEY_TABLE = "test_keys"
IDENTITY_TABLE = "test_identities"


class RecordingStore(InMemoryStore):
    """InMemoryStore that records every call made against it."""

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[str, str]] = []

    def get(self, table: str, key: str) -> dict[str, Any] | None:
        self.calls.append(("get", table))
        return super().get(table, key)

    def put(self, table: str, document: dict[str, Any]) -> None:
        self.calls.append(("put", table))
        super().put(table, document)

    def put_if_match(
        self, table: str, document: dict[str, Any], field: str, expected: Any
    ) -> bool:
        self.calls.append(("put_if_match", table))
        return super().put_if_match(table, document, field, expected)


@pytest.fixture
def store() -> RecordingStore:
    return RecordingStore()


@pytest.fixture
def key_manager(store: RecordingStore) -> KeyManager:
    return KeyManager(store=store, table=KEY_TABLE)


@pytest.fixture
def identity_manager(store: RecordingStore) -> IdentityManager:
    return IdentityManager(store=store, table=IDENTITY_TABLE)
