"""Store adapters - Key-value store implementations."""

from .memory import InMemoryStore
from .postgres import PostgresStore, create_tables

__all__ = ["InMemoryStore", "PostgresStore", "create_tables"]
