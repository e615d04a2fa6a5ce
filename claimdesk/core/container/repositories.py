"""Repository factories (app-scoped).

Repositories hold only the shared Database, so one instance per process
is enough.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from claimdesk.core.container.infrastructure import get_database

if TYPE_CHECKING:
    from claimdesk.domain.protocols import (
        PasswordResetTokenRepository,
        SessionRepository,
        UserRepository,
    )


@lru_cache()
def get_user_repository() -> "UserRepository":
    """Get UserRepository singleton."""
    from claimdesk.infrastructure.persistence.repositories import UserRepository

    return UserRepository(database=get_database())


@lru_cache()
def get_session_repository() -> "SessionRepository":
    """Get SessionRepository singleton."""
    from claimdesk.infrastructure.persistence.repositories import SessionRepository

    return SessionRepository(database=get_database())


@lru_cache()
def get_password_reset_token_repository() -> "PasswordResetTokenRepository":
    """Get PasswordResetTokenRepository singleton."""
    from claimdesk.infrastructure.persistence.repositories import (
        PasswordResetTokenRepository,
    )

    return PasswordResetTokenRepository(database=get_database())
