"""Opaque token protocol for session and password reset tokens.

Tokens are random, unguessable strings handed to the client. Only their
hash is persisted, so a database leak does not expose usable tokens.
"""

from typing import Protocol


class OpaqueTokenProtocol(Protocol):
    """Opaque token generation and hashing interface.

    Implementations:
        - OpaqueTokenService: 32 random bytes, base64url, SHA-256 hex hash
    """

    def generate_token(self) -> str:
        """Generate a new random token (URL-safe string)."""
        ...

    def hash_token(self, token: str) -> str:
        """Hash a token for storage and lookup.

        Args:
            token: Raw token as presented by the client.

        Returns:
            Deterministic hex digest (same token, same hash).
        """
        ...
