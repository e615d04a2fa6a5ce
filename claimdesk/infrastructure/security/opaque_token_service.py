"""Opaque token service (adapter).

Implements OpaqueTokenProtocol for session and password reset tokens:
- 32 random bytes from ``secrets``, base64url without padding (43 chars)
- SHA-256 hex digest for storage and lookup
"""

import hashlib
import secrets

from claimdesk.core.constants import TOKEN_BYTES


class OpaqueTokenService:
    """Generate and hash opaque tokens.

    Example:
        >>> service = OpaqueTokenService()
        >>> token = service.generate_token()
        >>> len(service.hash_token(token))
        64
    """

    def __init__(self, token_bytes: int = TOKEN_BYTES) -> None:
        """Initialize token service.

        Args:
            token_bytes: Random bytes per token (default: 32).
        """
        self._token_bytes = token_bytes

    def generate_token(self) -> str:
        """Generate a URL-safe random token."""
        return secrets.token_urlsafe(self._token_bytes)

    def hash_token(self, token: str) -> str:
        """Return the SHA-256 hex digest of ``token``."""
        return hashlib.sha256(token.encode("utf-8")).hexdigest()
