"""Password reset token domain entity.

Pure business logic, no framework dependencies.

Lifecycle:
    UNUSED -> USED     (password reset confirmed)
    UNUSED -> EXPIRED  (expires_at passed)

At most one unused token exists per user: requesting a new one deletes the
previous unused tokens in the same transaction.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass(slots=True, kw_only=True)
class PasswordResetToken:
    """Single-use password reset token.

    Attributes:
        id: Unique token identifier.
        user_id: User the token resets.
        token_hash: SHA-256 hex digest of the emailed token.
        expires_at: When the token expires.
        used_at: When the token was consumed (None if unused).
        created_at: When the token was issued.

    Example:
        >>> token = PasswordResetToken(
        ...     id=uuid7(),
        ...     user_id=user.id,
        ...     token_hash=hash_token(raw),
        ...     expires_at=datetime.now(UTC) + timedelta(hours=1),
        ... )
        >>> token.is_usable()
        True
    """

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    used_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_used(self) -> bool:
        """Check if the token has already been consumed."""
        return self.used_at is not None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the token has expired."""
        now = now or datetime.now(UTC)
        return self.expires_at <= now

    def is_usable(self, now: datetime | None = None) -> bool:
        """Check if the token can still be confirmed (unused and unexpired)."""
        return not self.is_used() and not self.is_expired(now)
