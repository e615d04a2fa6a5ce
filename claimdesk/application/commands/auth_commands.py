"""Authentication commands (CQRS write operations).

Commands represent user intent to change system state.
All commands are immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic
- Handlers return Result types
- Request metadata (ip_address, user_agent, request_id) rides along for
  the audit trail
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class LoginUser:
    """Log in with email and password.

    Attributes:
        email: Email address as submitted (matched case-insensitively).
        password: Plaintext password.
        ip_address: Client IP address.
        user_agent: Client user agent.
        request_id: Request correlation identifier.

    Example:
        >>> command = LoginUser(email="agent@claimdesk.test", password="...")
        >>> result = await handler.handle(command)
    """

    email: str
    password: str
    ip_address: str | None = None
    user_agent: str | None = None
    request_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class LogoutUser:
    """Revoke the current session.

    Attributes:
        user_id: Session owner.
        session_id: Session to revoke.
    """

    user_id: UUID
    session_id: UUID
    ip_address: str | None = None
    user_agent: str | None = None
    request_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class LogoutAllSessions:
    """Invalidate every session of a user, including the current one.

    Attributes:
        user_id: Owner of the sessions.
        current_session_id: Session making the request.
    """

    user_id: UUID
    current_session_id: UUID | None
    ip_address: str | None = None
    user_agent: str | None = None
    request_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset email.

    Always succeeds, whether or not the email belongs to an account.

    Attributes:
        email: Email address as submitted.
    """

    email: str
    ip_address: str | None = None
    user_agent: str | None = None
    request_id: str | None = None


@dataclass(frozen=True, kw_only=True)
class ConfirmPasswordReset:
    """Set a new password with a reset token.

    Attributes:
        token: Raw reset token from the email link.
        new_password: New plaintext password (strength already validated).
    """

    token: str
    new_password: str
    ip_address: str | None = None
    user_agent: str | None = None
    request_id: str | None = None
