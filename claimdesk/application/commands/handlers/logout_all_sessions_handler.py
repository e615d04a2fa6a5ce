"""Logout-all handler: invalidate every session of the user.

Flow:
1. Advance sessions_invalid_before to now (O(1), never moves backwards)
2. Revoke the current session in the same transaction
3. Audit LOGOUT with {all_sessions: true}

Sessions created after the call stay valid.
"""

from claimdesk.application.commands.auth_commands import LogoutAllSessions
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


class LogoutAllSessionsHandler:
    """Handler for logout-all command."""

    def __init__(
        self,
        session_manager: SessionManager,
        audit: AuditProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._session_manager = session_manager
        self._audit = audit
        self._logger = logger

    async def handle(self, cmd: LogoutAllSessions) -> Result[None, DomainError]:
        """Invalidate all sessions of ``cmd.user_id``.

        Returns:
            Success(None) always.
        """
        cutoff = await self._session_manager.revoke_all_and_invalidate(
            cmd.user_id, cmd.current_session_id
        )

        self._audit.log(
            AuditEntry(
                action=AuditAction.LOGOUT,
                resource="Session",
                resource_id=cmd.current_session_id,
                metadata={"all_sessions": True},
            ),
            AuditContext(
                user_id=cmd.user_id,
                session_id=cmd.current_session_id,
                ip_address=cmd.ip_address,
                user_agent=cmd.user_agent,
                request_id=cmd.request_id,
            ),
        )
        self._logger.bind(module="auth", request_id=cmd.request_id).info(
            "logout_all",
            user_id=str(cmd.user_id),
            sessions_invalid_before=cutoff.isoformat(),
        )
        return Success(value=None)
