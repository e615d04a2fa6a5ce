"""Session cookie authentication dependencies.

Usage:
    @router.get("/protected")
    async def protected_route(
        auth: AuthenticatedSession = Depends(require_session),
    ):
        return {"user_id": str(auth.user.id)}
"""

from typing import Annotated

from fastapi import Depends, Request

from claimdesk.application.services import AuthenticatedSession, SessionManager
from claimdesk.core.config import settings
from claimdesk.core.container import get_session_manager
from claimdesk.core.enums import ErrorCode
from claimdesk.core.errors import AuthenticationError
from claimdesk.domain.entities.session import SessionMetadata
from claimdesk.presentation.routers.api.v1.errors import DomainErrorException


def session_required_error() -> AuthenticationError:
    """Error for a missing, unknown, revoked or expired session."""
    return AuthenticationError(
        code=ErrorCode.SESSION_INVALID,
        message="Authentication required",
    )


def client_metadata(request: Request) -> SessionMetadata:
    """Client IP address and user agent of the request."""
    return SessionMetadata(
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )


async def require_session(
    request: Request,
    session_manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> AuthenticatedSession:
    """Resolve the session cookie to a valid session and its owner.

    Raises:
        DomainErrorException: 401 SESSION_INVALID if the cookie is missing
            or the session is not valid.
    """
    token = request.cookies.get(settings.session_cookie_name)
    if not token:
        raise DomainErrorException(session_required_error())

    authenticated = await session_manager.authenticate(token)
    if authenticated is None:
        raise DomainErrorException(session_required_error())
    return authenticated
