"""Annotated types with centralized validation.

Define validation once, use everywhere (request schemas, commands).

Usage:
    from claimdesk.domain.types import Email, NewPassword

    class PasswordResetConfirmRequest(BaseModel):
        token: OpaqueToken
        password: NewPassword
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from claimdesk.domain.validators import (
    validate_email,
    validate_strong_password,
    validate_token_format,
)

Email = Annotated[
    str,
    Field(
        min_length=3,
        max_length=255,
        description="Email address",
        examples=["agent@claimdesk.test"],
    ),
    AfterValidator(validate_email),
]
"""Email address, validated and normalized to lowercase."""

LoginPassword = Annotated[
    str,
    Field(min_length=1, max_length=128, description="Account password"),
]
"""Password as typed at login. Strength is not re-checked."""

NewPassword = Annotated[
    str,
    Field(
        min_length=8,
        max_length=128,
        description="New password with strength requirements",
        examples=["SecurePass123!"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password chosen during a reset, with strength validation."""

OpaqueToken = Annotated[
    str,
    Field(min_length=1, max_length=256, description="Opaque token"),
    AfterValidator(validate_token_format),
]
"""Session or password reset token as handed to the client."""
