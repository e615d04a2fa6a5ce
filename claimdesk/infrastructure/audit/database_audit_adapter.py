"""Database implementation of AuditProtocol.

Writes ``audit_logs`` rows from background tasks so that auditing never
adds latency to, or fails, the operation being audited.

Sanitization:
    Values are converted to JSON-compatible data before storage:
    - datetime/date -> ISO 8601 string
    - UUID, Decimal, Enum -> string
    - bytes -> base64 string
    - tuples/sets -> lists
    - self-referencing containers -> "[Circular]"
    - anything else -> "[<type name>]"
    Payloads larger than 64 KiB once serialized are replaced by
    ``{"_truncated": true, "_original_size": <bytes>}``.
"""

import base64
import json
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any
from uuid import UUID

from claimdesk.core.background import BackgroundTasks
from claimdesk.core.constants import AUDIT_MAX_JSON_BYTES
from claimdesk.domain.protocols.audit_protocol import AuditContext, AuditEntry
from claimdesk.domain.protocols.logger_protocol import LoggerProtocol
from claimdesk.infrastructure.persistence.database import Database
from claimdesk.infrastructure.persistence.models.audit_log import AuditLogModel


def _sanitize(value: Any, ancestors: set[int]) -> Any:
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, (UUID, Decimal)):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")

    if isinstance(value, (dict, list, tuple, set, frozenset)):
        if id(value) in ancestors:
            return "[Circular]"
        ancestors.add(id(value))
        try:
            if isinstance(value, dict):
                return {str(k): _sanitize(v, ancestors) for k, v in value.items()}
            return [_sanitize(item, ancestors) for item in value]
        finally:
            ancestors.discard(id(value))

    return f"[{type(value).__name__}]"


def sanitize_for_json(value: Any) -> Any:
    """Convert ``value`` to JSON-compatible data with a size cap.

    Args:
        value: Arbitrary audit payload.

    Returns:
        JSON-compatible data, or a truncation marker when the serialized
        form exceeds 64 KiB. ``None`` stays ``None``.
    """
    if value is None:
        return None

    sanitized = _sanitize(value, set())
    size = len(json.dumps(sanitized).encode("utf-8"))
    if size > AUDIT_MAX_JSON_BYTES:
        return {"_truncated": True, "_original_size": size}
    return sanitized


class DatabaseAuditAdapter:
    """Fire-and-forget audit writer backed by the ``audit_logs`` table.

    Attributes:
        _database: Database used for inserts.
        _tasks: Background task registry.
        _logger: Logger for write failures.
    """

    def __init__(
        self,
        database: Database,
        tasks: BackgroundTasks,
        logger: LoggerProtocol,
    ) -> None:
        self._database = database
        self._tasks = tasks
        self._logger = logger

    def log(self, entry: AuditEntry, context: AuditContext) -> None:
        """Schedule an audit insert and return immediately.

        Args:
            entry: What happened.
            context: Who did it and from where.
        """
        model = self._build_model(entry, context)
        self._tasks.spawn(self._write(model, entry), name=f"audit:{entry.action.value}")

    async def _write(self, model: AuditLogModel, entry: AuditEntry) -> None:
        try:
            async with self._database.transaction() as session:
                session.add(model)
        except Exception as e:
            self._logger.error(
                "audit_write_failed",
                error=e,
                action=entry.action.value,
                resource=entry.resource,
                resource_id=str(entry.resource_id) if entry.resource_id else None,
            )

    def _build_model(self, entry: AuditEntry, context: AuditContext) -> AuditLogModel:
        return AuditLogModel(
            action=entry.action.value,
            resource=entry.resource,
            resource_id=entry.resource_id,
            severity=entry.severity.value,
            metadata_=sanitize_for_json(entry.metadata),
            old_value=sanitize_for_json(entry.old_value),
            new_value=sanitize_for_json(entry.new_value),
            user_id=context.user_id,
            session_id=context.session_id,
            ip_address=context.ip_address,
            user_agent=context.user_agent,
            request_id=context.request_id,
        )
