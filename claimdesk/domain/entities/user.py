"""User domain entity.

Pure business logic, no framework dependencies.

Login eligibility rules live here; the counters themselves are only ever
changed by atomic database statements (see LockoutCounter and
SessionManager), never by mutating this object and saving it back.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """Back-office user account.

    Business Rules:
        - Email is unique and stored lowercase
        - Account is locked once ``locked_at`` is set
        - Login requires a verified email and an active account
        - Sessions created before ``sessions_invalid_before`` are invalid

    Attributes:
        id: Unique user identifier.
        email: Lowercase email address.
        password_hash: Bcrypt hash.
        is_active: Whether the account is enabled.
        email_verified_at: When the email was verified (None if never).
        locked_at: When the account was locked (None if unlocked).
        failed_login_attempts: Consecutive failed logins since last success.
        sessions_invalid_before: Cutoff for bulk session invalidation.
        first_name: Optional given name.
        last_name: Optional family name.
        role_id: Optional role reference.
        role_name: Role name, loaded with the user when available.
        permissions: ``resource:action`` strings granted by the role.
        created_at: When the account was created.
        updated_at: When the account was last modified.

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     email="agent@claimdesk.test",
        ...     password_hash="$2b$12$...",
        ...     email_verified_at=datetime.now(UTC),
        ... )
        >>> user.is_locked()
        False
        >>> user.can_login()
        True
    """

    id: UUID
    email: str
    password_hash: str
    is_active: bool = True
    email_verified_at: datetime | None = None
    locked_at: datetime | None = None
    failed_login_attempts: int = 0
    sessions_invalid_before: datetime | None = None
    first_name: str | None = None
    last_name: str | None = None
    role_id: UUID | None = None
    role_name: str | None = None
    permissions: list[str] = field(default_factory=list)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def is_locked(self) -> bool:
        """Check if the account is locked.

        Locks have no expiry; an administrator clears ``locked_at``.

        Returns:
            bool: True if ``locked_at`` is set.
        """
        return self.locked_at is not None

    def is_email_verified(self) -> bool:
        """Check if the email address has been verified."""
        return self.email_verified_at is not None

    def can_login(self) -> bool:
        """Check if the account may log in (before the password check).

        Returns:
            bool: True if unlocked, verified and active.
        """
        return not self.is_locked() and self.is_email_verified() and self.is_active
