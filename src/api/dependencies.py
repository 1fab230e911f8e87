"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request

from src.adapters.sms.console import ConsoleCodeSender
from src.config.settings import get_settings
from src.domain.identity import IdentityManager
from src.domain.keys import KeyManager
from src.domain.ports import CodeSender, KeyValueStore

# Module-level singleton - ConsoleCodeSender is stateless
_code_sender = ConsoleCodeSender()


def get_store(request: Request) -> KeyValueStore:
    """
    Get the key-value store from app state.

    The store is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.store


def get_code_sender() -> CodeSender:
    """Get console code sender (singleton)."""
    return _code_sender


def get_key_manager(request: Request) -> KeyManager:
    """Create key manager bound to the configured key table."""
    return KeyManager(store=get_store(request), table=get_settings().key_table)


def get_identity_manager(request: Request) -> IdentityManager:
    """Create identity manager bound to the configured identity table."""
    return IdentityManager(store=get_store(request), table=get_settings().identity_table)
