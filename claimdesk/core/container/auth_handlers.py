"""Authentication handler dependency factories.

Handler instances for the auth operations, usable directly or with
FastAPI ``Depends``:
- Login, logout, logout-all
- Current user
- Password reset (request, validate, confirm)

Usage:
    @router.post("/login")
    async def login(
        handler: LoginUserHandler = Depends(get_login_user_handler),
    ): ...
"""

from typing import TYPE_CHECKING

from claimdesk.core.config import settings
from claimdesk.core.container.auth_services import (
    get_credential_verifier,
    get_lockout_counter,
    get_password_reset_token_manager,
    get_session_manager,
)
from claimdesk.core.container.infrastructure import (
    get_audit,
    get_job_dispatcher,
    get_logger,
)
from claimdesk.core.container.repositories import get_user_repository

if TYPE_CHECKING:
    from claimdesk.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )
    from claimdesk.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )
    from claimdesk.application.commands.handlers.logout_all_sessions_handler import (
        LogoutAllSessionsHandler,
    )
    from claimdesk.application.commands.handlers.logout_user_handler import (
        LogoutUserHandler,
    )
    from claimdesk.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )
    from claimdesk.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )
    from claimdesk.application.queries.handlers.validate_reset_token_handler import (
        ValidateResetTokenHandler,
    )


async def get_login_user_handler() -> "LoginUserHandler":
    """Get LoginUser command handler.

    Returns:
        LoginUserHandler instance.
    """
    from claimdesk.application.commands.handlers.login_user_handler import (
        LoginUserHandler,
    )

    return LoginUserHandler(
        user_repo=get_user_repository(),
        credential_verifier=get_credential_verifier(),
        lockout_counter=get_lockout_counter(),
        session_manager=get_session_manager(),
        audit=get_audit(),
        jobs=get_job_dispatcher(),
        logger=get_logger(),
        max_failed_attempts=settings.max_failed_login_attempts,
    )


async def get_logout_user_handler() -> "LogoutUserHandler":
    """Get LogoutUser command handler."""
    from claimdesk.application.commands.handlers.logout_user_handler import (
        LogoutUserHandler,
    )

    return LogoutUserHandler(
        session_manager=get_session_manager(),
        audit=get_audit(),
        logger=get_logger(),
    )


async def get_logout_all_sessions_handler() -> "LogoutAllSessionsHandler":
    """Get LogoutAllSessions command handler."""
    from claimdesk.application.commands.handlers.logout_all_sessions_handler import (
        LogoutAllSessionsHandler,
    )

    return LogoutAllSessionsHandler(
        session_manager=get_session_manager(),
        audit=get_audit(),
        logger=get_logger(),
    )


async def get_request_password_reset_handler() -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler."""
    from claimdesk.application.commands.handlers.request_password_reset_handler import (
        RequestPasswordResetHandler,
    )

    return RequestPasswordResetHandler(
        token_manager=get_password_reset_token_manager(),
        jobs=get_job_dispatcher(),
        audit=get_audit(),
        logger=get_logger(),
    )


async def get_confirm_password_reset_handler() -> "ConfirmPasswordResetHandler":
    """Get ConfirmPasswordReset command handler."""
    from claimdesk.application.commands.handlers.confirm_password_reset_handler import (
        ConfirmPasswordResetHandler,
    )

    return ConfirmPasswordResetHandler(
        token_manager=get_password_reset_token_manager(),
        audit=get_audit(),
        logger=get_logger(),
    )


async def get_get_current_user_handler() -> "GetCurrentUserHandler":
    """Get GetCurrentUser query handler."""
    from claimdesk.application.queries.handlers.get_current_user_handler import (
        GetCurrentUserHandler,
    )

    return GetCurrentUserHandler(user_repo=get_user_repository())


async def get_validate_reset_token_handler() -> "ValidateResetTokenHandler":
    """Get ValidateResetToken query handler."""
    from claimdesk.application.queries.handlers.validate_reset_token_handler import (
        ValidateResetTokenHandler,
    )

    return ValidateResetTokenHandler(
        token_manager=get_password_reset_token_manager(),
    )
