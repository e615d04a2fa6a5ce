"""Session lifecycle management.

Sessions are opaque tokens. The client keeps the raw token (cookie); the
database keeps its SHA-256 hash. A session is valid iff it is not revoked,
not expired, and was created at or after the owner's
``sessions_invalid_before`` cutoff. Moving the cutoff forward invalidates
every older session of the user with a single row update.
"""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from uuid import UUID

from uuid_extensions import uuid7

from claimdesk.core.background import BackgroundTasks
from claimdesk.domain.entities.session import Session, SessionMetadata
from claimdesk.domain.entities.user import User
from claimdesk.domain.protocols.logger_protocol import LoggerProtocol
from claimdesk.domain.protocols.opaque_token_protocol import OpaqueTokenProtocol
from claimdesk.domain.protocols.session_repository import SessionRepository


@dataclass(frozen=True, slots=True, kw_only=True)
class IssuedSession:
    """A freshly created session and the raw token to hand to the client.

    Attributes:
        token: Raw session token (never persisted).
        session: Persisted session.
    """

    token: str
    session: Session


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticatedSession:
    """A valid session resolved from a request token.

    Attributes:
        session: The session.
        user: Its owner (active and not locked).
    """

    session: Session
    user: User


class SessionManager:
    """Create, revoke, invalidate and authenticate sessions.

    Attributes:
        _session_repo: Session persistence.
        _token_service: Token generation and hashing.
        _tasks: Background tasks for activity refreshes.
        _logger: Structured logger.
        _lifetime: Session lifetime.
        _activity_staleness: Age after which ``last_active_at`` is refreshed.
    """

    def __init__(
        self,
        session_repo: SessionRepository,
        token_service: OpaqueTokenProtocol,
        tasks: BackgroundTasks,
        logger: LoggerProtocol,
        *,
        lifetime: timedelta,
        activity_staleness: timedelta,
    ) -> None:
        self._session_repo = session_repo
        self._token_service = token_service
        self._tasks = tasks
        self._logger = logger
        self._lifetime = lifetime
        self._activity_staleness = activity_staleness

    async def create_and_reset_attempts(
        self,
        user_id: UUID,
        token_hash: str,
        expires_at: datetime,
        metadata: SessionMetadata,
    ) -> Session:
        """Insert a session and reset failed login attempts in one transaction.

        Args:
            user_id: Session owner.
            token_hash: Hash of the session token.
            expires_at: Session expiry.
            metadata: Client IP and user agent.

        Returns:
            Session: The persisted session.
        """
        now = datetime.now(UTC)
        session = Session(
            id=uuid7(),
            user_id=user_id,
            token_hash=token_hash,
            expires_at=expires_at,
            created_at=now,
            last_active_at=now,
            ip_address=metadata.ip_address,
            user_agent=metadata.user_agent,
        )
        return await self._session_repo.create_and_reset_attempts(session)

    async def issue(self, user_id: UUID, metadata: SessionMetadata) -> IssuedSession:
        """Generate a token and create a session for ``user_id``.

        Args:
            user_id: Session owner.
            metadata: Client IP and user agent.

        Returns:
            IssuedSession: Raw token plus the persisted session.
        """
        token = self._token_service.generate_token()
        session = await self.create_and_reset_attempts(
            user_id,
            self._token_service.hash_token(token),
            datetime.now(UTC) + self._lifetime,
            metadata,
        )
        return IssuedSession(token=token, session=session)

    async def revoke(self, session_id: UUID) -> bool:
        """Revoke a single session. Idempotent.

        Returns:
            bool: True if this call revoked it.
        """
        return await self._session_repo.revoke(session_id, now=datetime.now(UTC))

    async def revoke_all_and_invalidate(
        self, user_id: UUID, current_session_id: UUID | None
    ) -> datetime:
        """Invalidate every session of ``user_id`` and revoke the current one.

        Args:
            user_id: Owner of the sessions.
            current_session_id: Session making the request, if any.

        Returns:
            datetime: The cutoff written (sessions created before it are invalid).
        """
        now = datetime.now(UTC)
        await self._session_repo.revoke_all_and_invalidate(
            user_id, current_session_id, now=now
        )
        return now

    async def authenticate(self, raw_token: str) -> AuthenticatedSession | None:
        """Resolve a request token to a valid session.

        Rejects unknown, revoked, expired and cut-off sessions, and sessions
        whose owner is inactive or locked. Schedules a ``last_active_at``
        refresh when the recorded activity is stale.

        Args:
            raw_token: Token from the session cookie.

        Returns:
            AuthenticatedSession if valid, None otherwise.
        """
        found = await self._session_repo.find_by_token_hash(
            self._token_service.hash_token(raw_token)
        )
        if found is None:
            return None

        session, user = found
        now = datetime.now(UTC)
        if not session.is_valid(
            sessions_invalid_before=user.sessions_invalid_before, now=now
        ):
            self._logger.debug("session_rejected", session_id=str(session.id))
            return None
        if not user.is_active or user.is_locked():
            self._logger.debug(
                "session_rejected_user_state",
                session_id=str(session.id),
                user_id=str(user.id),
            )
            return None

        if session.needs_activity_refresh(self._activity_staleness, now):
            self._tasks.spawn(
                self._session_repo.touch(session.id, now=now),
                name="session:touch",
            )

        return AuthenticatedSession(session=session, user=user)
