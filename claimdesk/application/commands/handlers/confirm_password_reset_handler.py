"""Confirm password reset handler.

Flow:
1. Validate the token (unused, unexpired)
2. Hash the new password
3. One transaction: consume the token (conditional update), set the
   password hash, advance sessions_invalid_before
4. Audit PASSWORD_CHANGED (CRITICAL)

A token consumed concurrently by another request fails with the same
INVALID_RESET_TOKEN error as an unknown or expired one.
"""

from claimdesk.application.commands.auth_commands import ConfirmPasswordReset
from claimdesk.application.services.password_reset_token_manager import (
    PasswordResetTokenManager,
)
from claimdesk.core.errors import NotFoundError
from claimdesk.core.result import Failure, Result, Success
from claimdesk.domain.enums import AuditAction, AuditSeverity
from claimdesk.domain.protocols import (
    AuditContext,
    AuditEntry,
    AuditProtocol,
    LoggerProtocol,
)


class ConfirmPasswordResetHandler:
    """Handler for password reset confirmation command."""

    def __init__(
        self,
        token_manager: PasswordResetTokenManager,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._token_manager = token_manager
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: ConfirmPasswordReset) -> Result[None, NotFoundError]:
        """Consume the token and set the new password.

        Returns:
            Success(None) if the password was changed.
            Failure(NotFoundError) with INVALID_RESET_TOKEN otherwise.
        """
        log = self._logger.bind(module="auth", request_id=cmd.request_id)

        result = await self._token_manager.confirm(cmd.token, cmd.new_password)
        if isinstance(result, Failure):
            log.debug("password_reset_rejected")
            return result

        reset_token = result.value
        self._audit.log(
            AuditEntry(
                action=AuditAction.PASSWORD_CHANGED,
                resource="User",
                resource_id=reset_token.user_id,
                severity=AuditSeverity.CRITICAL,
                metadata={"via": "password_reset"},
            ),
            AuditContext(
                user_id=reset_token.user_id,
                ip_address=cmd.ip_address,
                user_agent=cmd.user_agent,
                request_id=cmd.request_id,
            ),
        )
        log.info("password_reset_completed", user_id=str(reset_token.user_id))
        return Success(value=None)
