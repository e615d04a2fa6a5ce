"""Validate reset token query handler (pure read)."""

from claimdesk.application.dtos.auth_dtos import ResetTokenValidity
from claimdesk.application.queries.auth_queries import ValidateResetToken
from claimdesk.application.services.password_reset_token_manager import (
    PasswordResetTokenManager,
)
from claimdesk.core.errors import NotFoundError
from claimdesk.core.result import Failure, Result, Success


class ValidateResetTokenHandler:
    """Handler for ValidateResetToken query."""

    def __init__(self, token_manager: PasswordResetTokenManager) -> None:
        self._token_manager = token_manager

    async def handle(
        self, query: ValidateResetToken
    ) -> Result[ResetTokenValidity, NotFoundError]:
        """Check the token and return its expiry.

        Returns:
            Success(ResetTokenValidity) or Failure(INVALID_RESET_TOKEN).
        """
        result = await self._token_manager.validate(query.token)
        if isinstance(result, Failure):
            return result
        return Success(value=ResetTokenValidity(expires_at=result.value.expires_at))
