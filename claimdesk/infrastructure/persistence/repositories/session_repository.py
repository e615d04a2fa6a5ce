"""SessionRepository - SQLAlchemy implementation of SessionRepository protocol.

Every method is a single statement or a single transaction. Bulk
invalidation never touches session rows: it moves the owner's
``sessions_invalid_before`` cutoff forward.
"""

from datetime import datetime
from typing import Any, cast
from uuid import UUID

from sqlalchemy import case, literal, select, update

from claimdesk.domain.entities.session import Session
from claimdesk.domain.entities.user import User
from claimdesk.infrastructure.persistence.base import UTCDateTime
from claimdesk.infrastructure.persistence.database import Database
from claimdesk.infrastructure.persistence.models.session import SessionModel
from claimdesk.infrastructure.persistence.models.user import UserModel
from claimdesk.infrastructure.persistence.repositories.user_repository import (
    user_to_domain,
)


class SessionRepository:
    """SQLAlchemy implementation of SessionRepository protocol.

    Attributes:
        database: Shared database; each method opens its own session.

    Example:
        >>> repo = SessionRepository(database)
        >>> found = await repo.find_by_token_hash(token_hash)
        >>> if found:
        ...     session, user = found
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with the shared database.

        Args:
            database: Database providing sessions and transactions.
        """
        self.database = database

    async def create_and_reset_attempts(self, session: Session) -> Session:
        """Insert a session and reset the owner's failed attempts in one transaction.

        Args:
            session: Session entity to persist.

        Returns:
            Session: The persisted session.
        """
        model = self._to_model(session)
        async with self.database.transaction() as db_session:
            db_session.add(model)
            await db_session.execute(
                update(UserModel)
                .where(UserModel.id == session.user_id)
                .values(
                    failed_login_attempts=0,
                    updated_at=literal(session.created_at, UTCDateTime()),
                )
                .execution_options(synchronize_session=False)
            )
            await db_session.flush()
        return self._to_domain(model)

    async def revoke(self, session_id: UUID, *, now: datetime) -> bool:
        """Revoke a session unless already revoked (idempotent).

        Args:
            session_id: Session to revoke.
            now: Revocation timestamp.

        Returns:
            bool: True if this call revoked the session.
        """
        stmt = (
            update(SessionModel)
            .where(SessionModel.id == session_id, SessionModel.revoked_at.is_(None))
            .values(revoked_at=now)
            .execution_options(synchronize_session=False)
        )
        async with self.database.transaction() as db_session:
            result = await db_session.execute(stmt)
        return (cast(Any, result).rowcount or 0) > 0

    async def revoke_all_and_invalidate(
        self, user_id: UUID, current_session_id: UUID | None, *, now: datetime
    ) -> None:
        """Advance the user's session cutoff and revoke the current session.

        The cutoff only moves forward: an existing later cutoff is kept.

        Args:
            user_id: Owner of the sessions.
            current_session_id: Session making the request, if any.
            now: Cutoff timestamp.
        """
        now_value = literal(now, UTCDateTime())
        advance_cutoff = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                sessions_invalid_before=case(
                    (
                        UserModel.sessions_invalid_before.is_(None)
                        | (UserModel.sessions_invalid_before < now_value),
                        now_value,
                    ),
                    else_=UserModel.sessions_invalid_before,
                ),
                updated_at=now_value,
            )
            .execution_options(synchronize_session=False)
        )
        async with self.database.transaction() as db_session:
            await db_session.execute(advance_cutoff)
            if current_session_id is not None:
                await db_session.execute(
                    update(SessionModel)
                    .where(
                        SessionModel.id == current_session_id,
                        SessionModel.revoked_at.is_(None),
                    )
                    .values(revoked_at=now)
                    .execution_options(synchronize_session=False)
                )

    async def find_by_token_hash(self, token_hash: str) -> tuple[Session, User] | None:
        """Find a session and its owner by token hash.

        Args:
            token_hash: SHA-256 hex digest of the session token.

        Returns:
            (session, user) if found, None otherwise.
        """
        async with self.database.get_session() as db_session:
            result = await db_session.execute(
                select(SessionModel).where(SessionModel.token_hash == token_hash)
            )
            model = result.scalar_one_or_none()

        if model is None:
            return None
        return self._to_domain(model), user_to_domain(model.user)

    async def touch(self, session_id: UUID, *, now: datetime) -> None:
        """Set ``last_active_at`` to ``now``.

        Args:
            session_id: Session to update.
            now: Activity timestamp.
        """
        async with self.database.transaction() as db_session:
            await db_session.execute(
                update(SessionModel)
                .where(SessionModel.id == session_id)
                .values(last_active_at=now)
                .execution_options(synchronize_session=False)
            )

    # =========================================================================
    # Entity ↔ Model Conversion
    # =========================================================================

    def _to_domain(self, model: SessionModel) -> Session:
        """Convert database model to domain entity."""
        return Session(
            id=model.id,
            user_id=model.user_id,
            token_hash=model.token_hash,
            expires_at=model.expires_at,
            revoked_at=model.revoked_at,
            created_at=model.created_at,
            last_active_at=model.last_active_at,
            ip_address=model.ip_address,
            user_agent=model.user_agent,
        )

    def _to_model(self, entity: Session) -> SessionModel:
        """Convert domain entity to database model."""
        return SessionModel(
            id=entity.id,
            user_id=entity.user_id,
            token_hash=entity.token_hash,
            expires_at=entity.expires_at,
            revoked_at=entity.revoked_at,
            created_at=entity.created_at,
            last_active_at=entity.last_active_at,
            ip_address=entity.ip_address,
            user_agent=entity.user_agent,
        )
