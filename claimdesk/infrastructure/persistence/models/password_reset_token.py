"""``password_reset_tokens`` table.

Only the SHA-256 hex digest of the emailed token is stored. A user has at
most one unused row: issuing a token deletes the previous unused ones in
the same transaction.
"""

from datetime import datetime
from uuid import UUID

from sqlalchemy import ForeignKey, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from claimdesk.core.constants import TOKEN_HASH_LENGTH
from claimdesk.infrastructure.persistence.base import BaseModel


class PasswordResetTokenModel(BaseModel):
    """One-time reset token.

    ``used_at`` is set exactly once, by a conditional UPDATE that only
    matches while it is still null; there is no ``updated_at``.
    """

    __tablename__ = "password_reset_tokens"

    user_id: Mapped[UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="User who requested password reset",
    )

    token_hash: Mapped[str] = mapped_column(
        String(TOKEN_HASH_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="SHA-256 hex digest of the reset token",
    )

    expires_at: Mapped[datetime] = mapped_column(
        nullable=False,
        index=True,
        comment="Timestamp when token expires",
    )

    used_at: Mapped[datetime | None] = mapped_column(
        nullable=True,
        default=None,
        comment="Timestamp when token was used (one-time use)",
    )

    __table_args__ = (
        Index("idx_password_reset_user_unused", "user_id", "used_at"),
    )
