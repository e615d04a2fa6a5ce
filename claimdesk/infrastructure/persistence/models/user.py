"""``users`` table.

Only a bcrypt hash of the password is stored. Lockout state
(``failed_login_attempts``, ``locked_at``) and the session cutoff
(``sessions_invalid_before``) are written by single atomic UPDATE
statements in UserRepository, never by read-modify-write.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from claimdesk.infrastructure.persistence.base import BaseMutableModel
from claimdesk.infrastructure.persistence.models.role import RoleModel


class UserModel(BaseMutableModel):
    """Account row.

    ``email`` is stored lowercase; lookups compare case-insensitively.
    A null ``email_verified_at`` blocks login, a non-null ``locked_at``
    locks the account until an administrator clears it.
    """

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="User email address (unique, lowercase)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password",
    )

    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        comment="Account active status (deactivated users cannot login)",
    )

    email_verified_at: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
        comment="Timestamp when email was verified (null blocks login)",
    )

    locked_at: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
        comment="Timestamp when account was locked (null means unlocked)",
    )

    failed_login_attempts: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Counter for failed login attempts (resets on success)",
    )

    sessions_invalid_before: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
        comment="Sessions created before this timestamp are invalid",
    )

    first_name: Mapped[str | None] = mapped_column(String(100), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(100), nullable=True)

    role_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("roles.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
        comment="Role assigned to the user",
    )

    role: Mapped[RoleModel | None] = relationship(lazy="selectin")

    def __repr__(self) -> str:
        return (
            f"<UserModel(id={self.id}, email={self.email!r}, "
            f"locked={self.locked_at is not None})>"
        )
