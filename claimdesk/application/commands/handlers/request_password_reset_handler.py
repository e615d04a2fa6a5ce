"""Request password reset handler.

Flow:
1. Look up an active user by email
2. Unknown/inactive email: equal bcrypt work, return Success (no enumeration)
3. Replace the user's unused tokens with a new one (one transaction)
4. Queue the reset email with the raw token
5. Audit PASSWORD_RESET_REQUESTED

The response is identical whether or not an email was sent.
"""

from claimdesk.application.commands.auth_commands import RequestPasswordReset
from claimdesk.application.services.password_reset_token_manager import (
    PasswordResetTokenManager,
)
from claimdesk.core.constants import PASSWORD_RESET_EMAIL_JOB
from claimdesk.core.errors import DomainError
from claimdesk.core.result import Result, Success
from claimdesk.domain.enums import AuditAction, AuditSeverity
from claimdesk.domain.protocols import (
    AuditContext,
    AuditEntry,
    AuditProtocol,
    JobDispatcherProtocol,
    LoggerProtocol,
)


class RequestPasswordResetHandler:
    """Handler for password reset request command."""

    def __init__(
        self,
        token_manager: PasswordResetTokenManager,
        jobs: JobDispatcherProtocol,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._token_manager = token_manager
        self._jobs = jobs
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: RequestPasswordReset) -> Result[None, DomainError]:
        """Issue a reset token when the email belongs to an active user.

        Returns:
            Success(None) always.
        """
        log = self._logger.bind(module="auth", request_id=cmd.request_id)

        issued = await self._token_manager.request(cmd.email)
        if issued is None:
            log.debug("password_reset_no_active_user")
            return Success(value=None)

        user = issued.user
        self._jobs.enqueue(
            PASSWORD_RESET_EMAIL_JOB,
            {"to": user.email, "user_id": str(user.id), "token": issued.token},
        )
        self._audit.log(
            AuditEntry(
                action=AuditAction.PASSWORD_RESET_REQUESTED,
                resource="User",
                resource_id=user.id,
                severity=AuditSeverity.INFO,
            ),
            AuditContext(
                user_id=user.id,
                ip_address=cmd.ip_address,
                user_agent=cmd.user_agent,
                request_id=cmd.request_id,
            ),
        )
        log.info(
            "password_reset_requested",
            user_id=str(user.id),
            expires_at=issued.reset_token.expires_at.isoformat(),
        )
        return Success(value=None)
