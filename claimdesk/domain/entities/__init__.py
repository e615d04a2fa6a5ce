"""Domain entities."""

from claimdesk.domain.entities.password_reset_token import PasswordResetToken
from claimdesk.domain.entities.session import Session, SessionMetadata
from claimdesk.domain.entities.user import User

__all__ = [
    "PasswordResetToken",
    "Session",
    "SessionMetadata",
    "User",
]
