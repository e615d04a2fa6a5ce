"""Authentication request/response schemas.

Pydantic models for API request validation and response serialization.
Kept separate from domain entities - these are HTTP-layer concerns.

Endpoints:
    POST /api/v1/auth/login                           - Log in (sets session cookie)
    POST /api/v1/auth/logout                          - Revoke current session
    POST /api/v1/auth/logout-all                      - Invalidate all sessions
    GET  /api/v1/auth/me                              - Current user
    POST /api/v1/auth/password-reset/request          - Request reset email
    GET  /api/v1/auth/password-reset/validate/{token} - Check reset token
    POST /api/v1/auth/password-reset/confirm          - Set new password
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from claimdesk.application.dtos.auth_dtos import CurrentUser
from claimdesk.core.constants import PASSWORD_RESET_REQUESTED_MESSAGE
from claimdesk.domain.types import Email, LoginPassword, NewPassword, OpaqueToken


# =============================================================================
# Login
# =============================================================================


class LoginRequest(BaseModel):
    """Request schema for login.

    POST /api/v1/auth/login
    Returns: 200 OK with the session cookie set
    """

    email: Email
    password: LoginPassword

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "agent@claimdesk.test",
                "password": "SecurePass123!",
            }
        }
    )


class LoginResponse(BaseModel):
    """Response schema for login. The session token travels only in the cookie."""

    success: bool = Field(default=True, description="Login succeeded")


# =============================================================================
# Current user
# =============================================================================


class NameResponse(BaseModel):
    """First and last name; either may be null."""

    first_name: str | None = None
    last_name: str | None = None


class CurrentUserResponse(BaseModel):
    """Response schema for GET /me."""

    id: UUID = Field(..., description="User ID")
    email: str = Field(..., description="Email address")
    email_verified_at: datetime | None = Field(
        default=None, description="When the email was verified"
    )
    name: NameResponse | None = Field(
        default=None, description="Null when neither name is set"
    )
    role: str | None = Field(default=None, description="Role name")
    permissions: list[str] = Field(
        default_factory=list, description="Permissions as resource:action"
    )

    @classmethod
    def from_dto(cls, user: CurrentUser) -> "CurrentUserResponse":
        """Build the response from the application DTO."""
        return cls(
            id=user.id,
            email=user.email,
            email_verified_at=user.email_verified_at,
            name=(
                NameResponse(
                    first_name=user.name.first_name, last_name=user.name.last_name
                )
                if user.name
                else None
            ),
            role=user.role,
            permissions=list(user.permissions),
        )


# =============================================================================
# Password reset
# =============================================================================


class PasswordResetRequestRequest(BaseModel):
    """Request schema for requesting a password reset email."""

    email: Email


class PasswordResetRequestResponse(BaseModel):
    """Identical response whether or not the account exists."""

    message: str = Field(
        default=PASSWORD_RESET_REQUESTED_MESSAGE,
        description="Generic confirmation message",
    )


class ResetTokenValidityResponse(BaseModel):
    """Response schema for a usable reset token."""

    expires_at: datetime = Field(..., description="Token expiry")


class PasswordResetConfirmRequest(BaseModel):
    """Request schema for setting a new password with a reset token."""

    token: OpaqueToken
    password: NewPassword


class PasswordResetConfirmResponse(BaseModel):
    """Response schema for a successful password reset."""

    message: str = Field(
        default="Password reset successful", description="Success message"
    )


# =============================================================================
# Errors
# =============================================================================


class ErrorBody(BaseModel):
    """Machine code plus client-safe message."""

    code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable message")


class ErrorResponse(BaseModel):
    """Error envelope: ``{"error": {"code", "message"}}``."""

    error: ErrorBody
