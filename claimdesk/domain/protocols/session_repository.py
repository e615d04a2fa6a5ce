"""SessionRepository protocol for session persistence.

Port (interface) for hexagonal architecture. Every method is one atomic
statement or one transaction.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from claimdesk.domain.entities.session import Session
from claimdesk.domain.entities.user import User


class SessionRepository(Protocol):
    """Session repository protocol (port).

    Methods:
        create_and_reset_attempts: Insert a session and clear failed attempts
        revoke: Revoke one session (idempotent)
        revoke_all_and_invalidate: Advance the user's cutoff and revoke current
        find_by_token_hash: Load a session together with its owner
        touch: Update ``last_active_at``
    """

    async def create_and_reset_attempts(self, session: Session) -> Session:
        """Insert ``session`` and set the owner's failed attempts to 0.

        Both writes happen in one transaction.

        Args:
            session: Session to persist.

        Returns:
            Session: The persisted session.
        """
        ...

    async def revoke(self, session_id: UUID, *, now: datetime) -> bool:
        """Revoke a session if it is not revoked yet.

        Args:
            session_id: Session to revoke.
            now: Revocation timestamp.

        Returns:
            bool: True if this call revoked it, False if already revoked or
                missing.
        """
        ...

    async def revoke_all_and_invalidate(
        self, user_id: UUID, current_session_id: UUID | None, *, now: datetime
    ) -> None:
        """Invalidate every session of a user in O(1).

        One transaction: advance ``sessions_invalid_before`` to ``now`` (never
        backwards) and revoke ``current_session_id``.

        Args:
            user_id: Owner of the sessions.
            current_session_id: Session making the request, if any.
            now: Cutoff timestamp.
        """
        ...

    async def find_by_token_hash(self, token_hash: str) -> tuple[Session, User] | None:
        """Find a session by token hash, with its owner.

        Args:
            token_hash: SHA-256 hex digest of the session token.

        Returns:
            (session, user) if found, None otherwise. Validity is not checked.
        """
        ...

    async def touch(self, session_id: UUID, *, now: datetime) -> None:
        """Set ``last_active_at`` to ``now``.

        Args:
            session_id: Session to update.
            now: Activity timestamp.
        """
        ...
