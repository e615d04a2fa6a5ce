"""Session database model.

Security:
    - token_hash: SHA-256 hex digest; the raw token never reaches the database
    - revoked_at: Set once, never cleared
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from claimdesk.core.constants import TOKEN_HASH_LENGTH
from claimdesk.infrastructure.persistence.base import BaseModel
from claimdesk.infrastructure.persistence.models.user import UserModel


class SessionModel(BaseModel):
    """Login session.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Creation timestamp (from BaseModel), compared against
            users.sessions_invalid_before
        user_id: Owner (cascade delete)
        token_hash: SHA-256 hex digest of the session token (unique)
        expires_at: Expiry timestamp
        revoked_at: Revocation timestamp (nullable)
        last_active_at: Last observed activity (nullable)
        ip_address: Client IP at login
        user_agent: Client user agent at login
    """

    __tablename__ = "sessions"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="Session owner",
    )

    token_hash: Mapped[str] = mapped_column(
        String(TOKEN_HASH_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="SHA-256 hex digest of the session token",
    )

    expires_at: Mapped[datetime] = mapped_column(
        nullable=False,
        comment="Timestamp when session expires",
    )

    revoked_at: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
        comment="Timestamp when session was revoked",
    )

    last_active_at: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
        comment="Last observed activity",
    )

    ip_address: Mapped[str | None] = mapped_column(
        String(45),
        nullable=True,
        comment="Client IP address at login",
    )

    user_agent: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Client user agent at login",
    )

    user: Mapped[UserModel] = relationship(lazy="joined")

    __table_args__ = (Index("idx_sessions_user_revoked", "user_id", "revoked_at"),)
