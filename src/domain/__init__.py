"""
Domain layer - Pure business logic with zero framework imports.

This package contains the identity verification core: key issuance,
the per-identifier verification state machine, and the port interfaces
it requires from infrastructure.
"""

from .exceptions import ConcurrentUpdate, IdentityError, InvalidArgument, NotFound, StoreError
from .identity import IdentityManager
from .keys import KeyManager
from .ports import CodeSender, IdentityRecord, IdentityType, KeyRecord, KeyValueStore

__all__ = [
    "CodeSender",
    "ConcurrentUpdate",
    "IdentityError",
    "IdentityManager",
    "IdentityRecord",
    "IdentityType",
    "InvalidArgument",
    "KeyManager",
    "KeyRecord",
    "KeyValueStore",
    "NotFound",
    "StoreError",
]
