"""Authentication service factories (app-scoped).

- CredentialVerifier (builds its dummy hash once)
- LockoutCounter
- SessionManager
- PasswordResetTokenManager
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from claimdesk.core.config import settings
from claimdesk.core.container.infrastructure import (
    get_background_tasks,
    get_logger,
    get_password_service,
    get_token_service,
)
from claimdesk.core.container.repositories import (
    get_password_reset_token_repository,
    get_session_repository,
    get_user_repository,
)

if TYPE_CHECKING:
    from claimdesk.application.services import (
        CredentialVerifier,
        LockoutCounter,
        PasswordResetTokenManager,
        SessionManager,
    )


@lru_cache()
def get_credential_verifier() -> "CredentialVerifier":
    """Get CredentialVerifier singleton."""
    from claimdesk.application.services import CredentialVerifier

    return CredentialVerifier(password_service=get_password_service())


@lru_cache()
def get_lockout_counter() -> "LockoutCounter":
    """Get LockoutCounter singleton."""
    from claimdesk.application.services import LockoutCounter

    return LockoutCounter(user_repo=get_user_repository())


@lru_cache()
def get_session_manager() -> "SessionManager":
    """Get SessionManager singleton (lifetime and staleness from settings)."""
    from claimdesk.application.services import SessionManager

    return SessionManager(
        session_repo=get_session_repository(),
        token_service=get_token_service(),
        tasks=get_background_tasks(),
        logger=get_logger(),
        lifetime=settings.session_lifetime,
        activity_staleness=settings.session_activity_staleness,
    )


@lru_cache()
def get_password_reset_token_manager() -> "PasswordResetTokenManager":
    """Get PasswordResetTokenManager singleton."""
    from claimdesk.application.services import PasswordResetTokenManager

    return PasswordResetTokenManager(
        user_repo=get_user_repository(),
        token_repo=get_password_reset_token_repository(),
        token_service=get_token_service(),
        password_service=get_password_service(),
        credential_verifier=get_credential_verifier(),
        lifetime=settings.password_reset_lifetime,
    )
