"""
Key domain service - issuance and lookup of encryption key records.

KeyManager holds no in-memory state: every call round-trips through
the store. Key records are written once and never mutated.
"""

import logging
import uuid
from dataclasses import dataclass

from .exceptions import InvalidArgument
from .ports import KeyRecord, KeyValueStore
from .verification import generate_key, is_key_id

logger = logging.getLogger(__name__)


@dataclass
class KeyManager:
    """Mints and retrieves key records, independent of any identity."""

    store: KeyValueStore
    table: str

    def create(self) -> str:
        """
        Mint a new key record.

        Not idempotent: a retried call produces a second, distinct record.

        Returns:
            The new key id

        Raises:
            StoreError: If the write fails
        """
        record = KeyRecord(id=str(uuid.uuid4()), encryption_key=generate_key())
        self.store.put(self.table, record.to_document())
        logger.info("Created key record %s", record.id)
        return record.id

    def get(self, key_id: str) -> KeyRecord | None:
        """
        Look up a key record by id.

        Returns:
            The record, or None if no such key exists

        Raises:
            InvalidArgument: If key_id is empty (no store access is made)
            StoreError: On backend failure
        """
        if not is_key_id(key_id):
            raise InvalidArgument("key_id is required")

        doc = self.store.get(self.table, key_id)
        if doc is None:
            return None
        return KeyRecord.from_document(doc)
