"""Logout handler: revoke the current session."""

from claimdesk.application.commands.auth_commands import LogoutUser
from claimdesk.application.services.session_manager import SessionManager
from claimdesk.core.errors import DomainError
from claimdesk.core.result import Result, Success
from claimdesk.domain.enums import AuditAction
from claimdesk.domain.protocols import (
    AuditContext,
    AuditEntry,
    AuditProtocol,
    LoggerProtocol,
)


class LogoutUserHandler:
    """Handler for logout command.

    Revocation is idempotent: logging out an already revoked session
    still succeeds.
    """

    def __init__(
        self,
        session_manager: SessionManager,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._session_manager = session_manager
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: LogoutUser) -> Result[None, DomainError]:
        """Revoke ``cmd.session_id`` and record a LOGOUT audit entry.

        Returns:
            Success(None) always.
        """
        revoked = await self._session_manager.revoke(cmd.session_id)

        self._audit.log(
            AuditEntry(
                action=AuditAction.LOGOUT,
                resource="Session",
                resource_id=cmd.session_id,
                metadata={"all_sessions": False},
            ),
            AuditContext(
                user_id=cmd.user_id,
                session_id=cmd.session_id,
                ip_address=cmd.ip_address,
                user_agent=cmd.user_agent,
                request_id=cmd.request_id,
            ),
        )
        self._logger.bind(module="auth", request_id=cmd.request_id).info(
            "logout",
            user_id=str(cmd.user_id),
            session_id=str(cmd.session_id),
            revoked=revoked,
        )
        return Success(value=None)
