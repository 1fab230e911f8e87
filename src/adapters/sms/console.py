"""
Console code sender adapter - Implements CodeSender protocol.

This module provides a console-based implementation of the domain's
code sender port, logging verification codes to stdout for demo purposes.
"""

import logging

logger = logging.getLogger(__name__)


class ConsoleCodeSender:
    """
    Implements CodeSender protocol via console logging.

    Uses structural subtyping - no explicit inheritance from Protocol.
    For demo/development purposes - prints verification codes to stdout.
    """

    def send_code(self, identifier: str, code: str) -> None:
        """
        Log verification code to console (simulates SMS delivery).

        In production, this would be replaced with an SMS gateway adapter.

        Args:
            identifier: Recipient phone number
            code: 6-digit verification code
        """
        logger.info("[VERIFICATION] Identifier: %s Code: %s", identifier, code)
