"""SQLAlchemy repository implementations."""

from claimdesk.infrastructure.persistence.repositories.password_reset_token_repository import (
    PasswordResetTokenRepository,
)
from claimdesk.infrastructure.persistence.repositories.session_repository import (
    SessionRepository,
)
from claimdesk.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)

__all__ = [
    "PasswordResetTokenRepository",
    "SessionRepository",
    "UserRepository",
]
