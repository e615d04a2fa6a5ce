"""Audit log database model.

Insert-only. JSON columns hold sanitized values (see DatabaseAuditAdapter).
"""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from claimdesk.infrastructure.persistence.base import BaseModel


class AuditLogModel(BaseModel):
    """Immutable audit trail entry.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: When the entry was recorded (from BaseModel)
        action: AuditAction value
        resource: Affected resource type
        resource_id: Affected resource id (nullable)
        severity: INFO | WARNING | CRITICAL
        metadata_: Free-form details (column ``metadata``)
        old_value / new_value: Change record payloads
        user_id / session_id: Actor (no FK; entries outlive users)
        ip_address / user_agent / request_id: Request context
    """

    __tablename__ = "audit_logs"

    action: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    resource: Mapped[str] = mapped_column(String(50), nullable=False)
    resource_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
    severity: Mapped[str] = mapped_column(
        String(16), nullable=False, default="INFO", index=True
    )
    metadata_: Mapped[dict[str, Any] | None] = mapped_column(
        "metadata", JSON, nullable=True
    )
    old_value: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    new_value: Mapped[dict[str, Any] | None] = mapped_column(JSON, nullable=True)
    user_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True, index=True)
    session_id: Mapped[UUID | None] = mapped_column(Uuid, nullable=True)
    ip_address: Mapped[str | None] = mapped_column(String(45), nullable=True)
    user_agent: Mapped[str | None] = mapped_column(Text, nullable=True)
    request_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
