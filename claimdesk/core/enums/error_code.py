"""Machine-readable error codes carried by DomainError.

Values are the upper-case strings clients see in ``error.code``.
"""

from enum import Enum


class ErrorCode(Enum):
    # Resource errors
    INVALID_RESET_TOKEN = "INVALID_RESET_TOKEN"

    # Authentication errors
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    SESSION_INVALID = "SESSION_INVALID"
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
