"""
Verification primitives - input predicates and secret generation.

All randomness comes from the ``secrets`` module: codes and keys are
security-bearing secrets and must never come from ``random``.
"""

import re
import secrets

CODE_LENGTH = 6
KEY_BYTES = 32

_PHONE_PATTERN = re.compile(r"^\+?[0-9]{7,17}$")
_CODE_PATTERN = re.compile(r"^[0-9]{6}$")


def is_phone(value: object) -> bool:
    """Digits only, optional leading '+', 7 to 17 digits."""
    return isinstance(value, str) and _PHONE_PATTERN.fullmatch(value) is not None


def is_code(value: object) -> bool:
    """Exactly six ASCII digits."""
    return isinstance(value, str) and _CODE_PATTERN.fullmatch(value) is not None


def is_key_id(value: object) -> bool:
    return isinstance(value, str) and value.strip() != ""


def generate_code() -> str:
    """
    Generate a 6-digit verification code.

    Draws 4 random bytes (32 bits), reduces to the low-order six decimal
    digits and left-pads with zeros. Returns a string to preserve leading
    zeros. The modulo bias over 2**32 is below 0.03%.
    """
    value = int.from_bytes(secrets.token_bytes(4), "big")
    return f"{value % 10**CODE_LENGTH:0{CODE_LENGTH}d}"


def generate_key() -> str:
    """Generate a hex-encoded 256-bit symmetric key."""
    return secrets.token_hex(KEY_BYTES)


def codes_match(stored: str, submitted: str) -> bool:
    """Constant-time code comparison."""
    return secrets.compare_digest(stored.encode(), submitted.encode())
