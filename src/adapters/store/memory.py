"""
In-memory store adapter - Implements KeyValueStore protocol.

Process-local and non-durable; intended for tests and the ``memory``
backend. Documents are deep-copied on the way in and out so callers
never share mutable state with the store.
"""

import copy
import threading
from typing import Any


class InMemoryStore:
    """
    Implements KeyValueStore protocol with a lock-guarded dict.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._tables: dict[str, dict[str, dict[str, Any]]] = {}
        self._lock = threading.Lock()

    def get(self, table: str, key: str) -> dict[str, Any] | None:
        with self._lock:
            doc = self._tables.get(table, {}).get(key)
            return copy.deepcopy(doc) if doc is not None else None

    def put(self, table: str, document: dict[str, Any]) -> None:
        with self._lock:
            self._tables.setdefault(table, {})[document["id"]] = copy.deepcopy(document)

    def put_if_match(
        self, table: str, document: dict[str, Any], field: str, expected: Any
    ) -> bool:
        with self._lock:
            rows = self._tables.get(table, {})
            current = rows.get(document["id"])
            if current is None or current.get(field) != expected:
                return False
            rows[document["id"]] = copy.deepcopy(document)
            return True
