"""Core enums package.

Usage:
    from claimdesk.core.enums import ErrorCode, Environment
"""

from claimdesk.core.enums.environment import Environment
from claimdesk.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
