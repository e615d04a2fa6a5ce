"""Authentication queries (CQRS read operations).

Queries NEVER change state.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetCurrentUser:
    """Get the profile projection of the authenticated user.

    Attributes:
        user_id: Authenticated user's identifier.
        request_id: Request correlation identifier.
    """

    user_id: UUID
    request_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ValidateResetToken:
    """Check whether a password reset token can still be used.

    Attributes:
        token: Raw reset token.
    """

    token: str
