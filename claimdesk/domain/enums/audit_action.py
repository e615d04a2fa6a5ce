"""Audit action enum.

Actions recorded in the audit trail by the authentication subsystem. Values
are stored as-is in ``audit_logs.action``.
"""

from enum import Enum


class AuditAction(str, Enum):
    """What happened, for audit trail entries.

    Context Recommendations:
        LOGIN: {} (resource "Session", resource_id = session id)
        LOGIN_FAILED: {reason, attempts?}
            reason is one of not_found, locked, unverified, inactive,
            wrong_password, locked_now
        LOGOUT: {all_sessions: bool}
        PASSWORD_RESET_REQUESTED: {}
        PASSWORD_CHANGED: {via: "password_reset"}
    """

    LOGIN = "LOGIN"
    LOGIN_FAILED = "LOGIN_FAILED"
    LOGOUT = "LOGOUT"
    PASSWORD_RESET_REQUESTED = "PASSWORD_RESET_REQUESTED"
    PASSWORD_CHANGED = "PASSWORD_CHANGED"
