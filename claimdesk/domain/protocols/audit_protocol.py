"""Audit trail protocol (port).

Audit writes are fire-and-forget: ``log()`` schedules the write and returns
immediately. A failing audit backend is logged by the adapter and never
surfaces to the caller.

Usage:
    audit.log(
        AuditEntry(
            action=AuditAction.LOGIN_FAILED,
            resource="User",
            resource_id=user.id,
            severity=AuditSeverity.WARNING,
            metadata={"reason": "locked_now", "attempts": 5},
        ),
        AuditContext(user_id=user.id, ip_address="10.0.0.1"),
    )
"""

from dataclasses import dataclass, field
from typing import Any, Protocol
from uuid import UUID

from claimdesk.domain.enums import AuditAction, AuditSeverity


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditEntry:
    """What happened.

    Attributes:
        action: Audited action.
        resource: Affected resource type ("User", "Session").
        resource_id: Affected resource identifier, if any.
        severity: Entry severity (default INFO).
        metadata: Free-form JSON-serializable details.
        old_value: Previous state, for change records.
        new_value: New state, for change records.
    """

    action: AuditAction
    resource: str
    resource_id: UUID | None = None
    severity: AuditSeverity = AuditSeverity.INFO
    metadata: dict[str, Any] = field(default_factory=dict)
    old_value: dict[str, Any] | None = None
    new_value: dict[str, Any] | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuditContext:
    """Who did it and from where.

    Attributes:
        user_id: Acting user (None when unknown).
        session_id: Acting session, if authenticated.
        ip_address: Client IP address.
        user_agent: Client user agent.
        request_id: Request correlation identifier.
    """

    user_id: UUID | None = None
    session_id: UUID | None = None
    ip_address: str | None = None
    user_agent: str | None = None
    request_id: str | None = None


class AuditProtocol(Protocol):
    """Protocol for audit trail writers.

    Implementations:
        - DatabaseAuditAdapter: background insert into ``audit_logs``
    """

    def log(self, entry: AuditEntry, context: AuditContext) -> None:
        """Record an audit entry without blocking the caller.

        Never raises; failures are logged by the implementation.
        """
        ...
