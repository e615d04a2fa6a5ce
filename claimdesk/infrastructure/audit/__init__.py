"""Audit trail adapters."""

from claimdesk.infrastructure.audit.database_audit_adapter import (
    DatabaseAuditAdapter,
    sanitize_for_json,
)

__all__ = ["DatabaseAuditAdapter", "sanitize_for_json"]
