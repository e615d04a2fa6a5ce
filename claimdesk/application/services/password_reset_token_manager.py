"""Password reset token management.

Tokens are 32 random bytes handed out by email; only the SHA-256 hash is
stored. Each user holds at most one unused token. Confirming consumes the
token with a conditional update, so two concurrent confirms on the same
token produce exactly one success.
"""

import asyncio
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from uuid_extensions import uuid7

from claimdesk.application.services.credential_verifier import CredentialVerifier
from claimdesk.core.constants import INVALID_RESET_TOKEN_MESSAGE
from claimdesk.core.enums import ErrorCode
from claimdesk.core.errors import NotFoundError
from claimdesk.core.result import Failure, Result, Success
from claimdesk.domain.entities.password_reset_token import PasswordResetToken
from claimdesk.domain.entities.user import User
from claimdesk.domain.protocols.opaque_token_protocol import OpaqueTokenProtocol
from claimdesk.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from claimdesk.domain.protocols.password_reset_token_repository import (
    PasswordResetTokenRepository,
)
from claimdesk.domain.protocols.user_repository import UserRepository


def invalid_reset_token_error() -> NotFoundError:
    """The single error for missing, expired and used reset tokens."""
    return NotFoundError(
        code=ErrorCode.INVALID_RESET_TOKEN,
        message=INVALID_RESET_TOKEN_MESSAGE,
        resource_type="PasswordResetToken",
    )


@dataclass(frozen=True, slots=True, kw_only=True)
class IssuedResetToken:
    """A freshly issued reset token.

    Attributes:
        token: Raw token for the reset email (never persisted).
        reset_token: Persisted token record.
        user: The user the token resets.
    """

    token: str
    reset_token: PasswordResetToken
    user: User


class PasswordResetTokenManager:
    """Issue, validate and consume password reset tokens."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_repo: PasswordResetTokenRepository,
        token_service: OpaqueTokenProtocol,
        password_service: PasswordHashingProtocol,
        credential_verifier: CredentialVerifier,
        *,
        lifetime: timedelta,
    ) -> None:
        self._user_repo = user_repo
        self._token_repo = token_repo
        self._token_service = token_service
        self._password_service = password_service
        self._credential_verifier = credential_verifier
        self._lifetime = lifetime

    async def request(self, email: str) -> IssuedResetToken | None:
        """Issue a reset token for an active user.

        Unknown or inactive emails spend the same bcrypt work and return
        None, so timing does not reveal whether the account exists.

        Args:
            email: Email address as submitted.

        Returns:
            IssuedResetToken if an active user matched, None otherwise.
        """
        user = await self._user_repo.find_active_by_email(email)
        if user is None:
            await self._credential_verifier.perform_dummy_password_work()
            return None

        token = self._token_service.generate_token()
        now = datetime.now(UTC)
        reset_token = PasswordResetToken(
            id=uuid7(),
            user_id=user.id,
            token_hash=self._token_service.hash_token(token),
            expires_at=now + self._lifetime,
            created_at=now,
        )
        await self._token_repo.replace_unused(reset_token)
        return IssuedResetToken(token=token, reset_token=reset_token, user=user)

    async def validate(self, token: str) -> Result[PasswordResetToken, NotFoundError]:
        """Check that ``token`` is unused and unexpired. Pure read.

        Returns:
            Success(PasswordResetToken) or Failure(INVALID_RESET_TOKEN).
        """
        reset_token = await self._token_repo.find_usable_by_token_hash(
            self._token_service.hash_token(token), now=datetime.now(UTC)
        )
        if reset_token is None:
            return Failure(error=invalid_reset_token_error())
        return Success(value=reset_token)

    async def confirm(
        self, token: str, new_password: str
    ) -> Result[PasswordResetToken, NotFoundError]:
        """Consume ``token`` and set ``new_password``.

        The consume, the password change and the session cutoff commit
        together, or not at all when the token was consumed concurrently.

        Returns:
            Success(PasswordResetToken) or Failure(INVALID_RESET_TOKEN).
        """
        validation = await self.validate(token)
        if isinstance(validation, Failure):
            return validation
        reset_token = validation.value

        password_hash = await asyncio.to_thread(
            self._password_service.hash_password, new_password
        )
        consumed = await self._token_repo.consume_and_set_password(
            reset_token.id,
            reset_token.user_id,
            password_hash=password_hash,
            now=datetime.now(UTC),
        )
        if not consumed:
            return Failure(error=invalid_reset_token_error())
        return Success(value=reset_token)
