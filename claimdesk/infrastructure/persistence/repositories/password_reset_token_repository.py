"""PasswordResetTokenRepository - SQLAlchemy implementation for reset token persistence.

Single-use consumption is a conditional UPDATE checked by row count; the
password change and session cutoff commit in the same transaction.
"""

from datetime import datetime
from typing import Any, cast
from uuid import UUID

from sqlalchemy import case, delete, literal, select, update

from claimdesk.domain.entities.password_reset_token import PasswordResetToken
from claimdesk.infrastructure.persistence.base import UTCDateTime
from claimdesk.infrastructure.persistence.database import Database
from claimdesk.infrastructure.persistence.models.password_reset_token import (
    PasswordResetTokenModel,
)
from claimdesk.infrastructure.persistence.models.user import UserModel


class _TokenAlreadyUsed(Exception):
    """Internal signal to roll back a consume transaction."""


def _to_domain(model: PasswordResetTokenModel) -> PasswordResetToken:
    """Convert database model to domain entity."""
    return PasswordResetToken(
        id=model.id,
        user_id=model.user_id,
        token_hash=model.token_hash,
        expires_at=model.expires_at,
        used_at=model.used_at,
        created_at=model.created_at,
    )


class PasswordResetTokenRepository:
    """SQLAlchemy implementation for password reset token persistence.

    Attributes:
        database: Shared database; each method opens its own session.

    Example:
        >>> repo = PasswordResetTokenRepository(database)
        >>> token = await repo.find_usable_by_token_hash(token_hash, now=now)
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with the shared database.

        Args:
            database: Database providing sessions and transactions.
        """
        self.database = database

    async def replace_unused(self, token: PasswordResetToken) -> None:
        """Delete the user's unused tokens and insert ``token``, atomically.

        Args:
            token: New token to persist.
        """
        async with self.database.transaction() as session:
            await session.execute(
                delete(PasswordResetTokenModel)
                .where(
                    PasswordResetTokenModel.user_id == token.user_id,
                    PasswordResetTokenModel.used_at.is_(None),
                )
                .execution_options(synchronize_session=False)
            )
            session.add(
                PasswordResetTokenModel(
                    id=token.id,
                    user_id=token.user_id,
                    token_hash=token.token_hash,
                    expires_at=token.expires_at,
                    used_at=token.used_at,
                    created_at=token.created_at,
                )
            )

    async def find_usable_by_token_hash(
        self, token_hash: str, *, now: datetime
    ) -> PasswordResetToken | None:
        """Find an unused, unexpired token by hash.

        Args:
            token_hash: SHA-256 hex digest of the token.
            now: Reference time for expiry.

        Returns:
            PasswordResetToken if usable, None otherwise.
        """
        stmt = select(PasswordResetTokenModel).where(
            PasswordResetTokenModel.token_hash == token_hash,
            PasswordResetTokenModel.used_at.is_(None),
            PasswordResetTokenModel.expires_at > now,
        )
        async with self.database.get_session() as session:
            result = await session.execute(stmt)
            model = result.scalar_one_or_none()
        return _to_domain(model) if model else None

    async def consume_and_set_password(
        self,
        token_id: UUID,
        user_id: UUID,
        *,
        password_hash: str,
        now: datetime,
    ) -> bool:
        """Consume a token exactly once and apply the new password.

        Args:
            token_id: Token to consume.
            user_id: Token owner.
            password_hash: New password hash.
            now: Consumption and cutoff timestamp.

        Returns:
            bool: True if this call consumed the token, False if another
                call already had (nothing is written in that case).
        """
        now_value = literal(now, UTCDateTime())
        try:
            async with self.database.transaction() as session:
                result = await session.execute(
                    update(PasswordResetTokenModel)
                    .where(
                        PasswordResetTokenModel.id == token_id,
                        PasswordResetTokenModel.used_at.is_(None),
                    )
                    .values(used_at=now)
                    .execution_options(synchronize_session=False)
                )
                if (cast(Any, result).rowcount or 0) == 0:
                    raise _TokenAlreadyUsed

                await session.execute(
                    update(UserModel)
                    .where(UserModel.id == user_id)
                    .values(
                        password_hash=password_hash,
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
        except _TokenAlreadyUsed:
            return False
        return True
