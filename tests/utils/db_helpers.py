"""Database read helpers for integration tests."""

from typing import Any
from uuid import UUID

from sqlalchemy import select

from claimdesk.infrastructure.persistence.database import Database
from claimdesk.infrastructure.persistence.models import (
    AuditLogModel,
    PasswordResetTokenModel,
    SessionModel,
    UserModel,
)

TEST_PASSWORD = "SecurePass123!"
NEW_PASSWORD = "BrandNewPass456!"
LOCKOUT_THRESHOLD = 5


async def fetch_user(database: Database, user_id: UUID) -> UserModel:
    """Load the current row for ``user_id``."""
    async with database.get_session() as session:
        result = await session.execute(select(UserModel).where(UserModel.id == user_id))
        return result.scalar_one()


async def fetch_sessions(database: Database, user_id: UUID) -> list[SessionModel]:
    """Load all session rows of ``user_id``."""
    async with database.get_session() as session:
        result = await session.execute(
            select(SessionModel).where(SessionModel.user_id == user_id)
        )
        return list(result.scalars().all())


async def fetch_reset_tokens(
    database: Database, user_id: UUID
) -> list[PasswordResetTokenModel]:
    """Load all reset token rows of ``user_id``."""
    async with database.get_session() as session:
        result = await session.execute(
            select(PasswordResetTokenModel).where(
                PasswordResetTokenModel.user_id == user_id
            )
        )
        return list(result.scalars().all())


async def fetch_audit_logs(
    database: Database, action: str | None = None
) -> list[AuditLogModel]:
    """Load audit rows in insertion order, optionally filtered by action."""
    stmt = select(AuditLogModel).order_by(AuditLogModel.created_at, AuditLogModel.id)
    if action is not None:
        stmt = stmt.where(AuditLogModel.action == action)
    async with database.get_session() as session:
        result = await session.execute(stmt)
        return list(result.scalars().all())


def metadata_of(row: AuditLogModel) -> dict[str, Any]:
    """Audit row metadata as a dict (empty when NULL)."""
    return dict(row.metadata_ or {})
