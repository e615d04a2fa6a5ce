"""Commands (CQRS write operations)."""

from claimdesk.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
    LogoutAllSessions,
    LogoutUser,
    RequestPasswordReset,
)

__all__ = [
    "ConfirmPasswordReset",
    "LoginUser",
    "LogoutAllSessions",
    "LogoutUser",
    "RequestPasswordReset",
]
