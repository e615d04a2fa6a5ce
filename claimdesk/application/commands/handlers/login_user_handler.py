"""Login handler for user authentication.

Flow (fixed order on every attempt):
1. Find user by email (case-insensitive)
2. Verify password (always runs, even without a user)
3. No user -> fail (not_found)
4. Account locked -> fail (locked)
5. Email not verified -> fail (unverified)
6. Account inactive -> fail (inactive)
7. Wrong password -> atomic increment; the request that reaches the
   threshold queues the lockout email (locked_now), others log
   wrong_password; fail
8. Issue session (resets failed attempts), audit LOGIN, return Success

Every failure returns the same AuthenticationError. The reason is only
recorded in the audit trail and debug logs.

Architecture:
- Application layer ONLY imports from domain and core
- Repositories and adapters are injected via protocols
"""

from uuid import UUID

from claimdesk.application.commands.auth_commands import LoginUser
from claimdesk.application.dtos.auth_dtos import CurrentUser, LoginResult
from claimdesk.application.services.credential_verifier import CredentialVerifier
from claimdesk.application.services.lockout_counter import LockoutCounter
from claimdesk.application.services.session_manager import SessionManager
from claimdesk.core.constants import (
    ACCOUNT_LOCKED_EMAIL_JOB,
    INVALID_CREDENTIALS_MESSAGE,
)
from claimdesk.core.enums import ErrorCode
from claimdesk.core.errors import AuthenticationError
from claimdesk.core.result import Failure, Result, Success
from claimdesk.domain.entities.session import SessionMetadata
from claimdesk.domain.enums import AuditAction, AuditSeverity
from claimdesk.domain.protocols import (
    AuditContext,
    AuditEntry,
    AuditProtocol,
    JobDispatcherProtocol,
    LoggerProtocol,
    UserRepository,
)


class LoginFailureReason:
    """Login failure reasons (audit metadata only, never sent to clients)."""

    NOT_FOUND = "not_found"
    LOCKED = "locked"
    UNVERIFIED = "unverified"
    INACTIVE = "inactive"
    WRONG_PASSWORD = "wrong_password"
    LOCKED_NOW = "locked_now"


def invalid_credentials_error() -> AuthenticationError:
    """The single client-visible login failure."""
    return AuthenticationError(
        code=ErrorCode.INVALID_CREDENTIALS,
        message=INVALID_CREDENTIALS_MESSAGE,
    )


class LoginUserHandler:
    """Handler for user login command."""

    def __init__(
        self,
        user_repo: UserRepository,
        credential_verifier: CredentialVerifier,
        lockout_counter: LockoutCounter,
        session_manager: SessionManager,
        audit: AuditProtocol,
        jobs: JobDispatcherProtocol,
        logger: LoggerProtocol,
        *,
        max_failed_attempts: int,
    ) -> None:
        """Initialize login handler with dependencies.

        Args:
            user_repo: User lookup.
            credential_verifier: Timing-symmetric password check.
            lockout_counter: Atomic failed attempt counter.
            session_manager: Session issuance.
            audit: Audit trail (fire-and-forget).
            jobs: Background job dispatch (lockout email).
            logger: Structured logger.
            max_failed_attempts: Lockout threshold.
        """
        self._user_repo = user_repo
        self._credential_verifier = credential_verifier
        self._lockout_counter = lockout_counter
        self._session_manager = session_manager
        self._audit = audit
        self._jobs = jobs
        self._logger = logger
        self._max_failed_attempts = max_failed_attempts

    async def handle(
        self, cmd: LoginUser
    ) -> Result[LoginResult, AuthenticationError]:
        """Handle user login command.

        Args:
            cmd: LoginUser command.

        Returns:
            Success(LoginResult) on successful login.
            Failure(AuthenticationError) on any rejection.

        Side Effects:
            - Increments failed_login_attempts on wrong password (may lock).
            - Queues ``email:account-locked`` once per lock.
            - Creates a session and resets failed attempts on success.
            - Writes LOGIN / LOGIN_FAILED audit entries.
        """
        log = self._logger.bind(module="auth", request_id=cmd.request_id)
        log.debug("login_attempt_started", ip_address=cmd.ip_address)

        # Step 1: Find user
        user = await self._user_repo.find_by_email(cmd.email)

        # Step 2: Always verify (timing does not depend on user existence)
        password_valid = await self._credential_verifier.verify(
            cmd.password, user.password_hash if user is not None else None
        )

        # Step 3: Check account exists
        if user is None:
            log.debug("login_failed", reason=LoginFailureReason.NOT_FOUND)
            self._audit_failure(cmd, LoginFailureReason.NOT_FOUND, user_id=None)
            return Failure(error=invalid_credentials_error())

        # Steps 4-6: Account state
        if user.is_locked():
            reason = LoginFailureReason.LOCKED
        elif not user.is_email_verified():
            reason = LoginFailureReason.UNVERIFIED
        elif not user.is_active:
            reason = LoginFailureReason.INACTIVE
        else:
            reason = None

        if reason is not None:
            log.debug("login_failed", reason=reason, user_id=str(user.id))
            self._audit_failure(cmd, reason, user_id=user.id)
            return Failure(error=invalid_credentials_error())

        # Step 7: Wrong password
        if not password_valid:
            threshold = self._max_failed_attempts
            attempts = await self._lockout_counter.increment_and_maybe_lock(
                user.id, threshold
            )
            just_locked = self._lockout_counter.just_locked(attempts, threshold)
            log.debug(
                "login_failed",
                reason=LoginFailureReason.WRONG_PASSWORD,
                user_id=str(user.id),
                attempts=attempts,
                just_locked=just_locked,
            )

            if just_locked:
                log.warning(
                    "account_locked", user_id=str(user.id), attempts=attempts
                )
                self._jobs.enqueue(
                    ACCOUNT_LOCKED_EMAIL_JOB,
                    {"to": user.email, "user_id": str(user.id)},
                )
                self._audit_failure(
                    cmd,
                    LoginFailureReason.LOCKED_NOW,
                    user_id=user.id,
                    attempts=attempts,
                    severity=AuditSeverity.WARNING,
                )
            else:
                self._audit_failure(
                    cmd,
                    LoginFailureReason.WRONG_PASSWORD,
                    user_id=user.id,
                    attempts=attempts,
                )
            return Failure(error=invalid_credentials_error())

        # Step 8: Success
        issued = await self._session_manager.issue(
            user.id,
            SessionMetadata(ip_address=cmd.ip_address, user_agent=cmd.user_agent),
        )
        session = issued.session

        self._audit.log(
            AuditEntry(
                action=AuditAction.LOGIN,
                resource="Session",
                resource_id=session.id,
            ),
            AuditContext(
                user_id=user.id,
                session_id=session.id,
                ip_address=cmd.ip_address,
                user_agent=cmd.user_agent,
                request_id=cmd.request_id,
            ),
        )
        log.info("login_succeeded", user_id=str(user.id), session_id=str(session.id))

        return Success(
            value=LoginResult(
                session_token=issued.token,
                session_id=session.id,
                expires_at=session.expires_at,
                user=CurrentUser.from_user(user),
            )
        )

    def _audit_failure(
        self,
        cmd: LoginUser,
        reason: str,
        *,
        user_id: UUID | None,
        attempts: int | None = None,
        severity: AuditSeverity = AuditSeverity.INFO,
    ) -> None:
        """Record a LOGIN_FAILED audit entry.

        Args:
            cmd: The login command (request context).
            reason: LoginFailureReason value.
            user_id: Matched user, if any.
            attempts: Post-increment failed attempts, for password failures.
            severity: Entry severity.
        """
        metadata: dict[str, object] = {"reason": reason}
        if attempts is not None:
            metadata["attempts"] = attempts
        self._audit.log(
            AuditEntry(
                action=AuditAction.LOGIN_FAILED,
                resource="User",
                resource_id=user_id,
                severity=severity,
                metadata=metadata,
            ),
            AuditContext(
                user_id=user_id,
                ip_address=cmd.ip_address,
                user_agent=cmd.user_agent,
                request_id=cmd.request_id,
            ),
        )
