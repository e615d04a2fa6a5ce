"""Authentication router.

Session cookie authentication and password reset.

Endpoints:
    POST /auth/login                           - Log in, set session cookie
    POST /auth/logout                          - Revoke current session (204)
    POST /auth/logout-all                      - Invalidate all sessions (204)
    GET  /auth/me                              - Current user profile
    POST /auth/password-reset/request          - Request reset email (always 200)
    GET  /auth/password-reset/validate/{token} - Check a reset token
    POST /auth/password-reset/confirm          - Set new password
"""

from datetime import datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from claimdesk.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
    LogoutAllSessions,
    LogoutUser,
    RequestPasswordReset,
)
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
from claimdesk.application.queries.auth_queries import (
    GetCurrentUser,
    ValidateResetToken,
)
from claimdesk.application.queries.handlers.get_current_user_handler import (
    GetCurrentUserHandler,
)
from claimdesk.application.queries.handlers.validate_reset_token_handler import (
    ValidateResetTokenHandler,
)
from claimdesk.application.services import AuthenticatedSession
from claimdesk.core.config import settings
from claimdesk.core.container import (
    get_confirm_password_reset_handler,
    get_get_current_user_handler,
    get_login_user_handler,
    get_logout_all_sessions_handler,
    get_logout_user_handler,
    get_request_password_reset_handler,
    get_validate_reset_token_handler,
)
from claimdesk.core.result import Failure, Success
from claimdesk.domain.entities.session import SessionMetadata
from claimdesk.presentation.routers.api.middleware.auth_dependencies import (
    client_metadata,
    require_session,
)
from claimdesk.presentation.routers.api.middleware.trace_middleware import (
    get_trace_id,
)
from claimdesk.presentation.routers.api.v1.errors import ErrorResponseBuilder
from claimdesk.schemas.auth_schemas import (
    CurrentUserResponse,
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    PasswordResetConfirmRequest,
    PasswordResetConfirmResponse,
    PasswordResetRequestRequest,
    PasswordResetRequestResponse,
    ResetTokenValidityResponse,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


def set_session_cookie(response: Response, token: str, expires_at: datetime) -> None:
    """Attach the session token as an httpOnly cookie expiring with the session."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
        expires=expires_at,
    )


def clear_session_cookie(response: Response) -> None:
    """Remove the session cookie."""
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        secure=settings.is_production,
        samesite="lax",
        path="/",
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={401: {"description": "Invalid credentials", "model": ErrorResponse}},
    summary="Log in",
    description="Verify email and password and start a session (httpOnly cookie).",
)
async def login(
    data: LoginRequest,
    response: Response,
    metadata: Annotated[SessionMetadata, Depends(client_metadata)],
    handler: Annotated[LoginUserHandler, Depends(get_login_user_handler)],
) -> LoginResponse | JSONResponse:
    """Log in with email and password.

    Every rejection (unknown email, wrong password, locked, unverified,
    inactive) returns the same 401 body.
    """
    command = LoginUser(
        email=data.email,
        password=data.password,
        ip_address=metadata.ip_address,
        user_agent=metadata.user_agent,
        request_id=get_trace_id(),
    )
    result = await handler.handle(command)

    match result:
        case Success(value=login_result):
            set_session_cookie(
                response, login_result.session_token, login_result.expires_at
            )
            return LoginResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.post(
    "/logout",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Log out",
)
async def logout(
    auth: Annotated[AuthenticatedSession, Depends(require_session)],
    metadata: Annotated[SessionMetadata, Depends(client_metadata)],
    handler: Annotated[LogoutUserHandler, Depends(get_logout_user_handler)],
) -> Response:
    """Revoke the current session and clear the cookie."""
    command = LogoutUser(
        user_id=auth.user.id,
        session_id=auth.session.id,
        ip_address=metadata.ip_address,
        user_agent=metadata.user_agent,
        request_id=get_trace_id(),
    )
    result = await handler.handle(command)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error)

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_session_cookie(response)
    return response


@router.post(
    "/logout-all",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Log out everywhere",
)
async def logout_all(
    auth: Annotated[AuthenticatedSession, Depends(require_session)],
    metadata: Annotated[SessionMetadata, Depends(client_metadata)],
    handler: Annotated[
        LogoutAllSessionsHandler, Depends(get_logout_all_sessions_handler)
    ],
) -> Response:
    """Invalidate every session of the user, including this one."""
    command = LogoutAllSessions(
        user_id=auth.user.id,
        current_session_id=auth.session.id,
        ip_address=metadata.ip_address,
        user_agent=metadata.user_agent,
        request_id=get_trace_id(),
    )
    result = await handler.handle(command)
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_domain_error(result.error)

    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    clear_session_cookie(response)
    return response


@router.get(
    "/me",
    response_model=CurrentUserResponse,
    responses={401: {"description": "Not authenticated", "model": ErrorResponse}},
    summary="Current user",
)
async def me(
    response: Response,
    auth: Annotated[AuthenticatedSession, Depends(require_session)],
    handler: Annotated[GetCurrentUserHandler, Depends(get_get_current_user_handler)],
) -> CurrentUserResponse | JSONResponse:
    """Profile, role and permissions of the authenticated user."""
    result = await handler.handle(
        GetCurrentUser(user_id=auth.user.id, request_id=get_trace_id())
    )

    match result:
        case Success(value=current_user):
            response.headers["Cache-Control"] = "no-store"
            return CurrentUserResponse.from_dto(current_user)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.post(
    "/password-reset/request",
    response_model=PasswordResetRequestResponse,
    summary="Request password reset",
    description="Always returns the same response to prevent account enumeration.",
)
async def request_password_reset(
    data: PasswordResetRequestRequest,
    metadata: Annotated[SessionMetadata, Depends(client_metadata)],
    handler: Annotated[
        RequestPasswordResetHandler, Depends(get_request_password_reset_handler)
    ],
) -> PasswordResetRequestResponse:
    """Send a reset link if the account exists."""
    await handler.handle(
        RequestPasswordReset(
            email=data.email,
            ip_address=metadata.ip_address,
            user_agent=metadata.user_agent,
            request_id=get_trace_id(),
        )
    )
    return PasswordResetRequestResponse()


@router.get(
    "/password-reset/validate/{token}",
    response_model=ResetTokenValidityResponse,
    responses={404: {"description": "Invalid or expired token", "model": ErrorResponse}},
    summary="Validate password reset token",
)
async def validate_reset_token(
    token: str,
    handler: Annotated[
        ValidateResetTokenHandler, Depends(get_validate_reset_token_handler)
    ],
) -> ResetTokenValidityResponse | JSONResponse:
    """Report whether ``token`` can still be used, and until when."""
    result = await handler.handle(ValidateResetToken(token=token))

    match result:
        case Success(value=validity):
            return ResetTokenValidityResponse(expires_at=validity.expires_at)
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)


@router.post(
    "/password-reset/confirm",
    response_model=PasswordResetConfirmResponse,
    responses={404: {"description": "Invalid or expired token", "model": ErrorResponse}},
    summary="Confirm password reset",
    description="Set a new password. Every existing session is invalidated.",
)
async def confirm_password_reset(
    data: PasswordResetConfirmRequest,
    response: Response,
    metadata: Annotated[SessionMetadata, Depends(client_metadata)],
    handler: Annotated[
        ConfirmPasswordResetHandler, Depends(get_confirm_password_reset_handler)
    ],
) -> PasswordResetConfirmResponse | JSONResponse:
    """Consume the reset token and set the new password."""
    result = await handler.handle(
        ConfirmPasswordReset(
            token=data.token,
            new_password=data.password,
            ip_address=metadata.ip_address,
            user_agent=metadata.user_agent,
            request_id=get_trace_id(),
        )
    )

    match result:
        case Success():
            clear_session_cookie(response)
            return PasswordResetConfirmResponse()
        case Failure(error=error):
            return ErrorResponseBuilder.from_domain_error(error)
