"""Domain enums."""

from claimdesk.domain.enums.audit_action import AuditAction
from claimdesk.domain.enums.audit_severity import AuditSeverity

__all__ = ["AuditAction", "AuditSeverity"]
