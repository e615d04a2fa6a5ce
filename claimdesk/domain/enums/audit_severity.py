"""Audit severity enum."""

from enum import Enum


class AuditSeverity(str, Enum):
    """How urgently an audit entry deserves attention."""

    INFO = "INFO"
    WARNING = "WARNING"
    CRITICAL = "CRITICAL"
