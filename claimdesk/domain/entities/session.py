"""Session domain entity.

Pure business logic, no framework dependencies.

A session is created on successful login and identified by an opaque token
that only the client holds; the database keeps its SHA-256 hash.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class SessionMetadata:
    """Client information captured when a session is created.

    Attributes:
        ip_address: Client IP address.
        user_agent: Client user agent string.
    """

    ip_address: str | None = None
    user_agent: str | None = None


@dataclass(slots=True, kw_only=True)
class Session:
    """Authenticated login session.

    Business Rules:
        - Valid iff not revoked, not expired, and created at or after the
          owner's ``sessions_invalid_before`` cutoff
        - Revocation is permanent
        - The raw token is never stored

    Attributes:
        id: Unique session identifier.
        user_id: Owner of the session.
        token_hash: SHA-256 hex digest of the session token.
        expires_at: When the session expires.
        revoked_at: When the session was revoked (None if active).
        created_at: When the session was created.
        last_active_at: Last observed activity.
        ip_address: Client IP at creation.
        user_agent: Client user agent at creation.

    Example:
        >>> session = Session(
        ...     id=uuid7(),
        ...     user_id=user.id,
        ...     token_hash=hash_token(token),
        ...     expires_at=datetime.now(UTC) + timedelta(days=7),
        ... )
        >>> session.is_valid(sessions_invalid_before=None)
        True
    """

    id: UUID
    user_id: UUID
    token_hash: str
    expires_at: datetime
    revoked_at: datetime | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    last_active_at: datetime | None = None
    ip_address: str | None = None
    user_agent: str | None = None

    def is_revoked(self) -> bool:
        """Check if the session has been revoked."""
        return self.revoked_at is not None

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check if the session has expired.

        Args:
            now: Reference time (defaults to current UTC time).
        """
        now = now or datetime.now(UTC)
        return self.expires_at <= now

    def is_valid(
        self,
        *,
        sessions_invalid_before: datetime | None,
        now: datetime | None = None,
    ) -> bool:
        """Check the session validity rule.

        Args:
            sessions_invalid_before: The owner's bulk invalidation cutoff.
            now: Reference time (defaults to current UTC time).

        Returns:
            bool: True if not revoked, not expired and not cut off.
        """
        if self.is_revoked() or self.is_expired(now):
            return False
        if sessions_invalid_before is None:
            return True
        return self.created_at >= sessions_invalid_before

    def needs_activity_refresh(
        self, staleness: timedelta, now: datetime | None = None
    ) -> bool:
        """Check if ``last_active_at`` is older than the staleness window.

        Args:
            staleness: Maximum age before a refresh is due.
            now: Reference time (defaults to current UTC time).
        """
        now = now or datetime.now(UTC)
        if self.last_active_at is None:
            return True
        return now - self.last_active_at > staleness
