"""PasswordResetTokenRepository protocol for reset token persistence.

Port (interface) for hexagonal architecture.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from claimdesk.domain.entities.password_reset_token import PasswordResetToken


class PasswordResetTokenRepository(Protocol):
    """Password reset token repository protocol (port).

    Methods:
        replace_unused: Delete a user's unused tokens and insert a new one
        find_usable_by_token_hash: Unused, unexpired token lookup
        consume_and_set_password: Single-use consumption plus password change
    """

    async def replace_unused(self, token: PasswordResetToken) -> None:
        """Store ``token`` as the user's only unused token.

        One transaction: delete every unused token of ``token.user_id``,
        then insert ``token``.

        Args:
            token: New token to persist.
        """
        ...

    async def find_usable_by_token_hash(
        self, token_hash: str, *, now: datetime
    ) -> PasswordResetToken | None:
        """Find an unused, unexpired token by hash.

        Args:
            token_hash: SHA-256 hex digest of the token.
            now: Reference time for expiry.

        Returns:
            PasswordResetToken if usable, None otherwise.
        """
        ...

    async def consume_and_set_password(
        self,
        token_id: UUID,
        user_id: UUID,
        *,
        password_hash: str,
        now: datetime,
    ) -> bool:
        """Consume a token exactly once and apply the new password.

        One transaction: ``UPDATE ... SET used_at = now WHERE id = ? AND
        used_at IS NULL``. If no row changed, nothing else is written and
        False is returned. Otherwise the user's password hash is replaced and
        ``sessions_invalid_before`` advances to ``now``.

        Args:
            token_id: Token to consume.
            user_id: Token owner.
            password_hash: New password hash.
            now: Consumption and cutoff timestamp.

        Returns:
            bool: True if this call consumed the token.
        """
        ...
