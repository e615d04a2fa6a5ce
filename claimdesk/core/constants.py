"""Centralized constants for internal implementation details.

These are fixed implementation details, NOT environment-specific
configuration. For environment-specific settings use
``claimdesk/core/config.py``.

Example:
    >>> from claimdesk.core.constants import TOKEN_BYTES
    >>> token = secrets.token_urlsafe(TOKEN_BYTES)
"""

# =============================================================================
# Token Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Random bytes in session and password reset tokens (256 bits)."""

TOKEN_HASH_LENGTH: int = 64
"""Length of a SHA-256 hex digest of a token."""


# =============================================================================
# Password Hashing
# =============================================================================

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""

BCRYPT_MAX_PASSWORD_BYTES: int = 72
"""bcrypt only consumes the first 72 bytes of a password."""


# =============================================================================
# Audit
# =============================================================================

AUDIT_MAX_JSON_BYTES: int = 64 * 1024
"""Serialized size above which audit JSON payloads are replaced by a marker."""


# =============================================================================
# Messages
# =============================================================================

INVALID_CREDENTIALS_MESSAGE: str = "Invalid credentials"
"""The single client-visible message for every rejected login."""

INVALID_RESET_TOKEN_MESSAGE: str = "Invalid or expired token"
"""Client-visible message for missing, expired or used reset tokens."""

PASSWORD_RESET_REQUESTED_MESSAGE: str = (
    "If an account exists, you will receive an email"
)
"""Response to every password reset request (no account enumeration)."""


# =============================================================================
# Background Jobs
# =============================================================================

ACCOUNT_LOCKED_EMAIL_JOB: str = "email:account-locked"
"""Job kind: notify a user that their account was locked. Payload {to, user_id}."""

PASSWORD_RESET_EMAIL_JOB: str = "email:password-reset"
"""Job kind: send a password reset link. Payload {to, user_id, token}."""
