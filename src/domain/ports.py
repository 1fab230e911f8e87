"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the record types owned by the domain and the
interfaces (ports) that the domain requires from infrastructure.
Adapters implement these protocols.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol


class IdentityType(str, Enum):
    """
    Kind of identifier used as an identity's primary key.

    Only PHONE is issued by IdentityManager; EMAIL is reserved.
    """

    PHONE = "phone"
    EMAIL = "email"


@dataclass(frozen=True)
class KeyRecord:
    """Encryption key material, created once and never mutated."""

    id: str
    encryption_key: str

    def to_document(self) -> dict[str, Any]:
        return {"id": self.id, "encryptionKey": self.encryption_key}

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "KeyRecord":
        return cls(id=doc["id"], encryption_key=doc["encryptionKey"])


@dataclass
class IdentityRecord:
    """
    Verification state for one identifier.

    Verification lifecycle (forward-only on ``verified``):
    - PendingVerification: verified=False, code awaits submission
    - Verified: verified=True, code rotated after every use

    ``key_id`` is a non-owning reference to a KeyRecord.
    """

    id: str
    type: IdentityType
    key_id: str
    code: str
    verified: bool = False

    def to_document(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "type": self.type.value,
            "keyId": self.key_id,
            "code": self.code,
            "verified": self.verified,
        }

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "IdentityRecord":
        return cls(
            id=doc["id"],
            type=IdentityType(doc["type"]),
            key_id=doc["keyId"],
            code=doc["code"],
            verified=bool(doc["verified"]),
        )


class KeyValueStore(Protocol):
    """Port interface for document persistence by primary key."""

    def get(self, table: str, key: str) -> dict[str, Any] | None:
        """
        Point lookup by primary key.

        Args:
            table: Logical table name
            key: Primary key value (the document's ``id``)

        Returns:
            The stored document, or None if absent

        Raises:
            StoreError: On backend failure (distinct from absence)
        """
        ...

    def put(self, table: str, document: dict[str, Any]) -> None:
        """
        Upsert a document keyed by ``document["id"]``.

        Raises:
            StoreError: On backend failure
        """
        ...

    def put_if_match(
        self, table: str, document: dict[str, Any], field: str, expected: Any
    ) -> bool:
        """
        Overwrite an existing document only if its current ``field`` equals ``expected``.

        Returns:
            True if written, False if the document is missing or the condition failed

        Raises:
            StoreError: On backend failure
        """
        ...


class CodeSender(Protocol):
    """Port interface for out-of-band verification code delivery."""

    def send_code(self, identifier: str, code: str) -> None:
        """
        Deliver a verification code to the owner of an identifier.

        Args:
            identifier: Phone number or email address
            code: 6-digit verification code
        """
        ...
