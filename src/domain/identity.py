"""
Identity domain service - verification state machine per identifier.

Verification State Machine
==========================

States:
- Unregistered: no record exists
- PendingVerification: record exists, verified=False
- Verified: record exists, verified=True

Transitions:
    Unregistered        -> PendingVerification  (create)
    PendingVerification -> Verified             (verify with matching code)
    any registered      -> same state           (set_new_code rotates code)

``verified`` never reverts within these operations, except that create
is an unconditional upsert and re-registers an identifier from scratch.

Every successful verify rotates the code to a value different from the
one it replaces, so a consumed code can never be replayed. verify and
get_verified return None for both "unknown identity" and "wrong code /
not verified" so callers cannot probe whether an identifier is registered.

Writes after a read use the store's conditional put keyed on the code
that was read. A lost race is re-evaluated once against fresh state.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from .exceptions import ConcurrentUpdate, InvalidArgument, NotFound
from .ports import IdentityRecord, IdentityType, KeyValueStore
from .verification import codes_match, generate_code, is_code, is_key_id, is_phone

logger = logging.getLogger(__name__)

# Outcome of a rotation step: the record to write, or None to stop without writing
_Mutation = Callable[[IdentityRecord | None], IdentityRecord | None]


@dataclass
class IdentityManager:
    """
    Domain service for identifier verification.

    Owns code issuance, verification and rotation for phone identities.
    """

    store: KeyValueStore
    table: str

    def create(self, phone: str, key_id: str) -> str:
        """
        Register a phone number bound to a key, overwriting any existing record.

        Args:
            phone: Phone number (digits, optional leading '+')
            key_id: Reference to a KeyRecord

        Returns:
            The freshly issued verification code, for out-of-band delivery

        Raises:
            InvalidArgument: If phone or key_id is malformed
            StoreError: If the write fails
        """
        self._require_phone(phone)
        if not is_key_id(key_id):
            raise InvalidArgument("key_id is required")

        record = IdentityRecord(
            id=phone,
            type=IdentityType.PHONE,
            key_id=key_id,
            code=generate_code(),
            verified=False,
        )
        self.store.put(self.table, record.to_document())
        logger.debug("Registered identity %s", phone)
        return record.code

    def verify(self, phone: str, code: str) -> IdentityRecord | None:
        """
        Prove ownership of a phone number with its current code.

        On match the record is marked verified and its code rotated; the
        write is durable before the record is returned.

        Returns:
            The updated record, or None if the identity is unknown or the
            code does not match (indistinguishable by design)

        Raises:
            InvalidArgument: If phone or code is malformed
            ConcurrentUpdate: If concurrent writers defeated the retry
            StoreError: On backend failure
        """
        self._require_phone(phone)
        if not is_code(code):
            raise InvalidArgument("code must be 6 digits")

        def mark_verified(record: IdentityRecord | None) -> IdentityRecord | None:
            if record is None or not codes_match(record.code, code):
                return None
            record.verified = True
            record.code = _fresh_code(record.code)
            return record

        updated = self._rotate(phone, mark_verified)
        if updated is None:
            logger.debug("Verification failed for %s", phone)
            return None

        logger.debug("Verified identity %s", phone)
        return updated

    def get_verified(self, phone: str) -> IdentityRecord | None:
        """
        Fetch an identity only if it has been verified.

        Returns:
            The record if it exists and is verified, otherwise None

        Raises:
            InvalidArgument: If phone is malformed
            StoreError: On backend failure
        """
        self._require_phone(phone)
        record = self._load(phone)
        if record is None or not record.verified:
            return None
        return record

    def set_new_code(self, phone: str) -> str:
        """
        Issue a fresh code for an existing identity.

        Preserves type, key_id and verified. Unlike verify, this discloses
        whether the identity exists.

        Returns:
            The new verification code

        Raises:
            InvalidArgument: If phone is malformed
            NotFound: If no identity exists for phone
            ConcurrentUpdate: If concurrent writers defeated the retry
            StoreError: On backend failure
        """
        self._require_phone(phone)

        def reissue(record: IdentityRecord | None) -> IdentityRecord | None:
            if record is None:
                raise NotFound(phone)
            record.code = _fresh_code(record.code)
            return record

        updated = self._rotate(phone, reissue)
        logger.debug("Issued new code for %s", phone)
        return updated.code

    def _rotate(self, phone: str, mutate: _Mutation) -> IdentityRecord | None:
        """
        Read, mutate and conditionally write one identity record.

        The write only lands if the stored code still equals the code that
        was read. On a lost race the whole step is re-evaluated once.
        """
        for attempt in range(2):
            record = self._load(phone)
            read_code = record.code if record is not None else None
            updated = mutate(record)
            if updated is None:
                return None
            if self.store.put_if_match(self.table, updated.to_document(), "code", read_code):
                return updated
            logger.debug("Stale read for %s on attempt %d", phone, attempt + 1)

        logger.warning("Concurrent update conflict for %s", phone)
        raise ConcurrentUpdate(phone)

    def _load(self, phone: str) -> IdentityRecord | None:
        doc = self.store.get(self.table, phone)
        if doc is None:
            return None
        return IdentityRecord.from_document(doc)

    def _require_phone(self, phone: str) -> None:
        if not is_phone(phone):
            raise InvalidArgument("phone must be digits with an optional leading '+'")


def _fresh_code(previous: str) -> str:
    """Draw a code that differs from the one it replaces."""
    code = generate_code()
    while code == previous:
        code = generate_code()
    return code
