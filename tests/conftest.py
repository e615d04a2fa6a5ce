"""Pytest configuration and shared fixtures.

This configuration provides:
1. Test environment settings (low bcrypt cost, testing environment)
2. Mock logger with chainable ``bind``
3. A real SQLite database per test (aiosqlite, temporary file)
4. A fully wired auth stack over that database for integration tests
"""

import os

os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

from collections.abc import AsyncGenerator, Awaitable, Callable  # noqa: E402
from dataclasses import dataclass  # noqa: E402
from datetime import UTC, datetime, timedelta  # noqa: E402
from unittest.mock import Mock  # noqa: E402
from uuid import UUID  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from uuid_extensions import uuid7  # noqa: E402

from claimdesk.application.commands.handlers.confirm_password_reset_handler import (  # noqa: E402
    ConfirmPasswordResetHandler,
)
from claimdesk.application.commands.handlers.login_user_handler import (  # noqa: E402
    LoginUserHandler,
)
from claimdesk.application.commands.handlers.logout_all_sessions_handler import (  # noqa: E402
    LogoutAllSessionsHandler,
)
from claimdesk.application.commands.handlers.logout_user_handler import (  # noqa: E402
    LogoutUserHandler,
)
from claimdesk.application.commands.handlers.request_password_reset_handler import (  # noqa: E402
    RequestPasswordResetHandler,
)
from claimdesk.application.services import (  # noqa: E402
    CredentialVerifier,
    LockoutCounter,
    PasswordResetTokenManager,
    SessionManager,
)
from claimdesk.core.background import BackgroundTasks  # noqa: E402
from claimdesk.infrastructure.audit import DatabaseAuditAdapter  # noqa: E402
from claimdesk.infrastructure.email import StubEmailService  # noqa: E402
from claimdesk.infrastructure.jobs import (  # noqa: E402
    InProcessJobDispatcher,
    register_email_jobs,
)
from claimdesk.infrastructure.persistence.database import Database  # noqa: E402
from claimdesk.infrastructure.persistence.models import (  # noqa: E402
    RoleModel,
    RolePermissionModel,
    UserModel,
)
from claimdesk.infrastructure.persistence.repositories import (  # noqa: E402
    PasswordResetTokenRepository,
    SessionRepository,
    UserRepository,
)
from claimdesk.infrastructure.security import (  # noqa: E402
    BcryptPasswordService,
    OpaqueTokenService,
)

from tests.utils.db_helpers import LOCKOUT_THRESHOLD, TEST_PASSWORD  # noqa: E402


# =============================================================================
# Collaborators
# =============================================================================


@pytest.fixture
def logger() -> Mock:
    """Mock logger whose ``bind`` returns itself, so bound calls are visible."""
    mock_logger = Mock()
    mock_logger.bind.return_value = mock_logger
    return mock_logger


@pytest.fixture
def tasks(logger: Mock) -> BackgroundTasks:
    """Fresh background task registry."""
    return BackgroundTasks(logger=logger)


@pytest.fixture(scope="session")
def password_service() -> BcryptPasswordService:
    """Bcrypt service at the minimum cost factor (fast tests)."""
    return BcryptPasswordService(cost_factor=4, allow_low_cost=True)


@pytest.fixture(scope="session")
def password_hash(password_service: BcryptPasswordService) -> str:
    """Hash of TEST_PASSWORD, computed once per session."""
    return password_service.hash_password(TEST_PASSWORD)


@pytest.fixture
def token_service() -> OpaqueTokenService:
    """Opaque token service."""
    return OpaqueTokenService()


# =============================================================================
# Database
# =============================================================================


@pytest_asyncio.fixture
async def database(tmp_path) -> AsyncGenerator[Database, None]:
    """SQLite database in a temporary file with all tables created.

    A file (not ``:memory:``) so concurrent connections share one database.
    """
    db = Database(f"sqlite+aiosqlite:///{tmp_path / 'claimdesk.db'}")
    await db.create_all()
    yield db
    await db.close()


type UserFactory = Callable[..., Awaitable[UserModel]]


@pytest.fixture
def create_user(database: Database, password_hash: str) -> UserFactory:
    """Factory inserting a user row (verified, active, unlocked by default)."""

    async def _create(
        email: str = "agent@claimdesk.test",
        *,
        password_hash_value: str | None = None,
        email_verified: bool = True,
        is_active: bool = True,
        locked_at: datetime | None = None,
        failed_login_attempts: int = 0,
        sessions_invalid_before: datetime | None = None,
        first_name: str | None = "Ada",
        last_name: str | None = "Lovelace",
        role_id: UUID | None = None,
    ) -> UserModel:
        user = UserModel(
            id=uuid7(),
            email=email,
            password_hash=password_hash_value or password_hash,
            is_active=is_active,
            email_verified_at=datetime.now(UTC) - timedelta(days=1)
            if email_verified
            else None,
            locked_at=locked_at,
            failed_login_attempts=failed_login_attempts,
            sessions_invalid_before=sessions_invalid_before,
            first_name=first_name,
            last_name=last_name,
            role_id=role_id,
        )
        async with database.transaction() as session:
            session.add(user)
        return user

    return _create


@pytest.fixture
def create_role(database: Database) -> Callable[..., Awaitable[RoleModel]]:
    """Factory inserting a role with ``resource:action`` permissions."""

    async def _create(name: str, scopes: list[str]) -> RoleModel:
        role = RoleModel(id=uuid7(), name=name)
        for scope in scopes:
            resource, action = scope.split(":", 1)
            role.permissions.append(
                RolePermissionModel(id=uuid7(), resource=resource, action=action)
            )
        async with database.transaction() as session:
            session.add(role)
        return role

    return _create


# =============================================================================
# Wired auth stack (integration)
# =============================================================================


@dataclass
class AuthStack:
    """Real services and handlers over the test database."""

    database: Database
    tasks: BackgroundTasks
    email: StubEmailService
    user_repo: UserRepository
    session_repo: SessionRepository
    token_repo: PasswordResetTokenRepository
    token_service: OpaqueTokenService
    lockout_counter: LockoutCounter
    session_manager: SessionManager
    token_manager: PasswordResetTokenManager
    login: LoginUserHandler
    logout: LogoutUserHandler
    logout_all: LogoutAllSessionsHandler
    request_reset: RequestPasswordResetHandler
    confirm_reset: ConfirmPasswordResetHandler

    async def settle(self) -> None:
        """Wait for audit writes, email jobs and activity refreshes."""
        await self.tasks.drain()


@pytest.fixture
def auth_stack(
    database: Database,
    tasks: BackgroundTasks,
    logger: Mock,
    password_service: BcryptPasswordService,
    token_service: OpaqueTokenService,
) -> AuthStack:
    """Build the production object graph against the SQLite database."""
    user_repo = UserRepository(database)
    session_repo = SessionRepository(database)
    token_repo = PasswordResetTokenRepository(database)

    email = StubEmailService(logger=logger)
    jobs = InProcessJobDispatcher(tasks=tasks, logger=logger)
    register_email_jobs(jobs, email, reset_url="http://claimdesk.test/reset")
    audit = DatabaseAuditAdapter(database=database, tasks=tasks, logger=logger)

    verifier = CredentialVerifier(password_service)
    lockout_counter = LockoutCounter(user_repo)
    session_manager = SessionManager(
        session_repo,
        token_service,
        tasks,
        logger,
        lifetime=timedelta(days=7),
        activity_staleness=timedelta(minutes=5),
    )
    token_manager = PasswordResetTokenManager(
        user_repo,
        token_repo,
        token_service,
        password_service,
        verifier,
        lifetime=timedelta(hours=1),
    )

    return AuthStack(
        database=database,
        tasks=tasks,
        email=email,
        user_repo=user_repo,
        session_repo=session_repo,
        token_repo=token_repo,
        token_service=token_service,
        lockout_counter=lockout_counter,
        session_manager=session_manager,
        token_manager=token_manager,
        login=LoginUserHandler(
            user_repo=user_repo,
            credential_verifier=verifier,
            lockout_counter=lockout_counter,
            session_manager=session_manager,
            audit=audit,
            jobs=jobs,
            logger=logger,
            max_failed_attempts=LOCKOUT_THRESHOLD,
        ),
        logout=LogoutUserHandler(
            session_manager=session_manager, audit=audit, logger=logger
        ),
        logout_all=LogoutAllSessionsHandler(
            session_manager=session_manager, audit=audit, logger=logger
        ),
        request_reset=RequestPasswordResetHandler(
            token_manager=token_manager, jobs=jobs, audit=audit, logger=logger
        ),
        confirm_reset=ConfirmPasswordResetHandler(
            token_manager=token_manager, audit=audit, logger=logger
        ),
    )

