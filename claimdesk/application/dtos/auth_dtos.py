"""Authentication DTOs (Data Transfer Objects).

Response/result dataclasses for authentication handlers.
These carry data from handlers back to the presentation layer.
"""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID

from claimdesk.domain.entities.user import User


@dataclass(frozen=True, kw_only=True)
class PersonName:
    """First and last name as stored; either part may be missing."""

    first_name: str | None
    last_name: str | None

    @classmethod
    def from_user(cls, user: User) -> "PersonName | None":
        """None when the user has neither name set."""
        if user.first_name is None and user.last_name is None:
            return None
        return cls(first_name=user.first_name, last_name=user.last_name)


@dataclass(frozen=True, kw_only=True)
class CurrentUser:
    """User projection returned by login and ``/me``.

    Attributes:
        id: User identifier.
        email: Email address.
        email_verified_at: Verification timestamp.
        name: First and last name (None when neither is set).
        role: Role name, if any.
        permissions: ``resource:action`` strings.
    """

    id: UUID
    email: str
    email_verified_at: datetime | None
    name: PersonName | None
    role: str | None
    permissions: list[str] = field(default_factory=list)

    @classmethod
    def from_user(cls, user: User) -> "CurrentUser":
        """Build the projection from a domain user."""
        return cls(
            id=user.id,
            email=user.email,
            email_verified_at=user.email_verified_at,
            name=PersonName.from_user(user),
            role=user.role_name,
            permissions=list(user.permissions),
        )


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Successful login.

    Attributes:
        session_token: Raw session token for the cookie.
        session_id: Created session identifier.
        expires_at: Session expiry (cookie expiry).
        user: User projection.
    """

    session_token: str
    session_id: UUID
    expires_at: datetime
    user: CurrentUser


@dataclass(frozen=True, kw_only=True)
class ResetTokenValidity:
    """A usable reset token's expiry.

    Attributes:
        expires_at: When the token stops being accepted.
    """

    expires_at: datetime
