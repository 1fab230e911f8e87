"""
Domain exceptions - Semantic error types for identity verification.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.

Silent absence (``None``) is used instead of an exception wherever the
distinction between "unknown identity" and "wrong code" must not leak.
"""


class IdentityError(Exception):
    """Base class for identity domain errors."""

    pass


class InvalidArgument(IdentityError):
    """Caller-supplied input failed a format or presence check."""

    pass


class NotFound(IdentityError):
    """Identity does not exist where disclosing absence is intended."""

    pass


class StoreError(IdentityError):
    """The backing key-value store failed."""

    pass


class ConcurrentUpdate(IdentityError):
    """A conditional write lost against a concurrent writer twice in a row."""

    pass
