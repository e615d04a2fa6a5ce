"""Application services shared by the auth handlers.

Services:
    - CredentialVerifier: timing-symmetric password checks
    - LockoutCounter: atomic failed-login counting and locking
    - SessionManager: session issue, revoke, bulk invalidation, authentication
    - PasswordResetTokenManager: reset token issue, validate, single-use confirm
"""

from claimdesk.application.services.credential_verifier import CredentialVerifier
from claimdesk.application.services.lockout_counter import LockoutCounter
from claimdesk.application.services.password_reset_token_manager import (
    IssuedResetToken,
    PasswordResetTokenManager,
)
from claimdesk.application.services.session_manager import (
    AuthenticatedSession,
    IssuedSession,
    SessionManager,
)

__all__ = [
    "AuthenticatedSession",
    "CredentialVerifier",
    "IssuedResetToken",
    "IssuedSession",
    "LockoutCounter",
    "PasswordResetTokenManager",
    "SessionManager",
]
