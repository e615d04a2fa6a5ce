"""UserRepository - SQLAlchemy implementation of UserRepository protocol.

Adapter for hexagonal architecture.
Maps between domain User entities and database UserModel.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import case, func, literal, select, update

from claimdesk.domain.entities.user import User
from claimdesk.infrastructure.persistence.base import UTCDateTime
from claimdesk.infrastructure.persistence.database import Database
from claimdesk.infrastructure.persistence.models.user import UserModel


def user_to_domain(user_model: UserModel) -> User:
    """Convert database model to domain entity (with role and permissions)."""
    role = user_model.role
    return User(
        id=user_model.id,
        email=user_model.email,
        password_hash=user_model.password_hash,
        is_active=user_model.is_active,
        email_verified_at=user_model.email_verified_at,
        locked_at=user_model.locked_at,
        failed_login_attempts=user_model.failed_login_attempts,
        sessions_invalid_before=user_model.sessions_invalid_before,
        first_name=user_model.first_name,
        last_name=user_model.last_name,
        role_id=user_model.role_id,
        role_name=role.name if role is not None else None,
        permissions=[p.scope for p in role.permissions] if role is not None else [],
        created_at=user_model.created_at,
        updated_at=user_model.updated_at,
    )


class UserRepository:
    """SQLAlchemy implementation of UserRepository protocol.

    This class does NOT inherit from UserRepository protocol (Protocol uses
    structural typing).

    Attributes:
        database: Shared database; each method opens its own session.

    Example:
        >>> repo = UserRepository(database)
        >>> user = await repo.find_by_email("Agent@ClaimDesk.test")
    """

    def __init__(self, database: Database) -> None:
        """Initialize repository with the shared database.

        Args:
            database: Database providing sessions and transactions.
        """
        self.database = database

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Args:
            user_id: User's unique identifier.

        Returns:
            Domain User entity if found, None otherwise.
        """
        async with self.database.get_session() as session:
            result = await session.execute(
                select(UserModel).where(UserModel.id == user_id)
            )
            user_model = result.scalar_one_or_none()

        if user_model is None:
            return None
        return user_to_domain(user_model)

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive).

        Compares ``lower(email)`` for equality; LIKE patterns would treat
        ``_`` and ``%`` in addresses as wildcards.

        Args:
            email: User's email address.

        Returns:
            Domain User entity if found, None otherwise.
        """
        async with self.database.get_session() as session:
            result = await session.execute(
                select(UserModel).where(func.lower(UserModel.email) == email.lower())
            )
            user_model = result.scalar_one_or_none()

        if user_model is None:
            return None
        return user_to_domain(user_model)

    async def find_active_by_email(self, email: str) -> User | None:
        """Find an active user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            Domain User entity if found and active, None otherwise.
        """
        async with self.database.get_session() as session:
            result = await session.execute(
                select(UserModel).where(
                    func.lower(UserModel.email) == email.lower(),
                    UserModel.is_active.is_(True),
                )
            )
            user_model = result.scalar_one_or_none()

        if user_model is None:
            return None
        return user_to_domain(user_model)

    async def increment_failed_login_attempts(
        self, user_id: UUID, *, threshold: int, now: datetime
    ) -> int:
        """Atomically count a failed login and lock the account at the threshold.

        The increment, the threshold comparison and the lock transition are
        one UPDATE ... RETURNING statement, so concurrent failures never
        lose an update and only one of them observes ``threshold``.

        Args:
            user_id: User's unique identifier.
            threshold: Attempts at which the account locks.
            now: Timestamp for the lock transition.

        Returns:
            int: The post-increment attempt count.

        Raises:
            LookupError: If the user row does not exist.
        """
        now_value = literal(now, UTCDateTime())
        reaches_threshold = (
            UserModel.failed_login_attempts + 1 >= threshold
        ) & UserModel.locked_at.is_(None)

        stmt = (
            update(UserModel)
            .where(UserModel.id == user_id)
            .values(
                failed_login_attempts=UserModel.failed_login_attempts + 1,
                locked_at=case(
                    (reaches_threshold, now_value), else_=UserModel.locked_at
                ),
                sessions_invalid_before=case(
                    (reaches_threshold, now_value),
                    else_=UserModel.sessions_invalid_before,
                ),
                updated_at=now_value,
            )
            .returning(UserModel.failed_login_attempts)
            .execution_options(synchronize_session=False)
        )

        async with self.database.transaction() as session:
            result = await session.execute(stmt)
            new_count = result.scalar_one_or_none()

        if new_count is None:
            raise LookupError(f"user {user_id} not found")
        return int(new_count)
