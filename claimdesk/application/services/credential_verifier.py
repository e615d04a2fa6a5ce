"""Credential verification with equalized timing.

Login must spend the same bcrypt work whether or not the email exists,
otherwise response time reveals which accounts are registered. When no
stored hash is available, the password is compared against a dummy hash
created at start-up with the same cost factor, and the result is forced to
False.

bcrypt is CPU-bound, so every comparison runs in a worker thread
(``asyncio.to_thread``) to keep the event loop responsive.
"""

import asyncio
import secrets

from claimdesk.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)


class CredentialVerifier:
    """Timing-symmetric password verification.

    Example:
        >>> verifier = CredentialVerifier(password_service)
        >>> await verifier.verify("hunter2", user.password_hash if user else None)
        False
    """

    def __init__(self, password_service: PasswordHashingProtocol) -> None:
        """Create the verifier and its dummy hash.

        Args:
            password_service: Hashing service; the dummy hash uses its cost.
        """
        self._password_service = password_service
        self._dummy_hash = password_service.hash_password(secrets.token_urlsafe(24))

    async def verify(self, password: str, password_hash: str | None) -> bool:
        """Compare ``password`` with ``password_hash``.

        Args:
            password: Password supplied by the client.
            password_hash: Stored hash, or None when no user was found.

        Returns:
            bool: True only if a stored hash was given and it matches.
        """
        if password_hash is None:
            await self.perform_dummy_password_work(password)
            return False
        return await asyncio.to_thread(
            self._password_service.verify_password, password, password_hash
        )

    async def perform_dummy_password_work(self, password: str = "") -> None:
        """Spend one bcrypt comparison's worth of time, discarding the result.

        Args:
            password: Input to compare (any value; the result is ignored).
        """
        await asyncio.to_thread(
            self._password_service.verify_password, password, self._dummy_hash
        )
