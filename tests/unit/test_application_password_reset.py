"""Unit tests for password reset (token manager and handlers).

Tests cover:
- Request: unknown/inactive email spends dummy bcrypt work, sends nothing
- Request: token hashed before storage, previous unused tokens replaced,
  reset email queued with the raw token, audit entry written
- Validate: unusable token -> INVALID_RESET_TOKEN
- Confirm: lost consume race -> INVALID_RESET_TOKEN, no audit
- Confirm: success audits PASSWORD_CHANGED (CRITICAL)
"""

from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, Mock

import pytest
from uuid_extensions import uuid7

from claimdesk.application.commands.auth_commands import (
    ConfirmPasswordReset,
    RequestPasswordReset,
)
from claimdesk.application.commands.handlers.confirm_password_reset_handler import (
    ConfirmPasswordResetHandler,
)
from claimdesk.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from claimdesk.application.dtos.auth_dtos import ResetTokenValidity
from claimdesk.application.queries.auth_queries import ValidateResetToken
from claimdesk.application.queries.handlers.validate_reset_token_handler import (
    ValidateResetTokenHandler,
)
from claimdesk.application.services import PasswordResetTokenManager
from claimdesk.core.constants import PASSWORD_RESET_EMAIL_JOB
from claimdesk.core.enums import ErrorCode
from claimdesk.core.errors import NotFoundError
from claimdesk.core.result import Failure, Success
from claimdesk.domain.entities import PasswordResetToken, User
from claimdesk.domain.enums import AuditAction, AuditSeverity


def make_user() -> User:
    return User(
        id=uuid7(),
        email="agent@claimdesk.test",
        password_hash="$2b$04$stored",
        email_verified_at=datetime.now(UTC),
    )


def make_reset_token(user: User) -> PasswordResetToken:
    return PasswordResetToken(
        id=uuid7(),
        user_id=user.id,
        token_hash="e" * 64,
        expires_at=datetime.now(UTC) + timedelta(hours=1),
    )


@pytest.fixture
def user_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def token_repo() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def verifier() -> AsyncMock:
    return AsyncMock()


@pytest.fixture
def token_manager(
    user_repo, token_repo, token_service, password_service, verifier
) -> PasswordResetTokenManager:
    return PasswordResetTokenManager(
        user_repo,
        token_repo,
        token_service,
        password_service,
        verifier,
        lifetime=timedelta(hours=1),
    )


@pytest.mark.unit
class TestPasswordResetTokenManager:
    async def test_request_unknown_email_does_dummy_work(
        self, token_manager, user_repo, token_repo, verifier
    ):
        user_repo.find_active_by_email.return_value = None

        issued = await token_manager.request("nobody@claimdesk.test")

        assert issued is None
        verifier.perform_dummy_password_work.assert_awaited_once()
        token_repo.replace_unused.assert_not_awaited()

    async def test_request_stores_hash_not_raw_token(
        self, token_manager, user_repo, token_repo, token_service
    ):
        user = make_user()
        user_repo.find_active_by_email.return_value = user

        issued = await token_manager.request(user.email)

        assert issued is not None
        assert issued.user is user
        [stored] = token_repo.replace_unused.await_args.args
        assert stored.token_hash == token_service.hash_token(issued.token)
        assert stored.token_hash != issued.token
        assert stored.user_id == user.id
        assert stored.used_at is None
        lifetime = stored.expires_at - stored.created_at
        assert lifetime == timedelta(hours=1)

    async def test_validate_unknown_token(self, token_manager, token_repo):
        token_repo.find_usable_by_token_hash.return_value = None

        result = await token_manager.validate("not-a-token")

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.INVALID_RESET_TOKEN
        assert result.error.message == "Invalid or expired token"

    async def test_validate_looks_up_by_hash(
        self, token_manager, token_repo, token_service
    ):
        reset_token = make_reset_token(make_user())
        token_repo.find_usable_by_token_hash.return_value = reset_token

        result = await token_manager.validate("raw-token")

        assert isinstance(result, Success)
        assert result.value is reset_token
        args = token_repo.find_usable_by_token_hash.await_args
        assert args.args[0] == token_service.hash_token("raw-token")

    async def test_confirm_invalid_token_does_not_hash_or_write(
        self, token_manager, token_repo
    ):
        token_repo.find_usable_by_token_hash.return_value = None

        result = await token_manager.confirm("bad", "BrandNewPass456!")

        assert isinstance(result, Failure)
        token_repo.consume_and_set_password.assert_not_awaited()

    async def test_confirm_lost_race_fails(self, token_manager, token_repo):
        token_repo.find_usable_by_token_hash.return_value = make_reset_token(
            make_user()
        )
        token_repo.consume_and_set_password.return_value = False

        result = await token_manager.confirm("raw", "BrandNewPass456!")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_RESET_TOKEN

    async def test_confirm_writes_bcrypt_hash_of_new_password(
        self, token_manager, token_repo, password_service
    ):
        reset_token = make_reset_token(make_user())
        token_repo.find_usable_by_token_hash.return_value = reset_token
        token_repo.consume_and_set_password.return_value = True

        result = await token_manager.confirm("raw", "BrandNewPass456!")

        assert isinstance(result, Success)
        call = token_repo.consume_and_set_password.await_args
        assert call.args == (reset_token.id, reset_token.user_id)
        assert password_service.verify_password(
            "BrandNewPass456!", call.kwargs["password_hash"]
        )


@pytest.mark.unit
class TestRequestPasswordResetHandler:
    async def test_unknown_email_succeeds_silently(self):
        token_manager = AsyncMock()
        token_manager.request.return_value = None
        jobs, audit, logger = Mock(), Mock(), Mock()
        handler = RequestPasswordResetHandler(token_manager, jobs, audit, logger)

        result = await handler.handle(RequestPasswordReset(email="x@claimdesk.test"))

        assert isinstance(result, Success)
        jobs.enqueue.assert_not_called()
        audit.log.assert_not_called()

    async def test_known_email_queues_email_and_audits(self):
        user = make_user()
        issued = Mock(user=user, token="raw-reset-token")
        issued.reset_token = make_reset_token(user)
        token_manager = AsyncMock()
        token_manager.request.return_value = issued
        jobs, audit, logger = Mock(), Mock(), Mock()
        handler = RequestPasswordResetHandler(token_manager, jobs, audit, logger)

        result = await handler.handle(
            RequestPasswordReset(email=user.email, request_id="req-9")
        )

        assert isinstance(result, Success)
        jobs.enqueue.assert_called_once_with(
            PASSWORD_RESET_EMAIL_JOB,
            {"to": user.email, "user_id": str(user.id), "token": "raw-reset-token"},
        )
        entry, context = audit.log.call_args.args
        assert entry.action == AuditAction.PASSWORD_RESET_REQUESTED
        assert entry.resource_id == user.id
        assert context.request_id == "req-9"


@pytest.mark.unit
class TestConfirmPasswordResetHandler:
    async def test_failure_is_passed_through_without_audit(self):
        token_manager = AsyncMock()
        error = NotFoundError(
            code=ErrorCode.INVALID_RESET_TOKEN,
            message="Invalid or expired token",
            resource_type="PasswordResetToken",
        )
        token_manager.confirm.return_value = Failure(error=error)
        audit = Mock()
        handler = ConfirmPasswordResetHandler(token_manager, audit, Mock())

        result = await handler.handle(
            ConfirmPasswordReset(token="raw", new_password="BrandNewPass456!")
        )

        assert result == Failure(error=error)
        audit.log.assert_not_called()

    async def test_success_audits_password_changed(self):
        user = make_user()
        reset_token = make_reset_token(user)
        token_manager = AsyncMock()
        token_manager.confirm.return_value = Success(value=reset_token)
        audit = Mock()
        handler = ConfirmPasswordResetHandler(token_manager, audit, Mock())

        result = await handler.handle(
            ConfirmPasswordReset(token="raw", new_password="BrandNewPass456!")
        )

        assert isinstance(result, Success)
        entry, context = audit.log.call_args.args
        assert entry.action == AuditAction.PASSWORD_CHANGED
        assert entry.severity == AuditSeverity.CRITICAL
        assert entry.metadata == {"via": "password_reset"}
        assert context.user_id == user.id


@pytest.mark.unit
class TestValidateResetTokenHandler:
    async def test_returns_expiry(self):
        reset_token = make_reset_token(make_user())
        token_manager = AsyncMock()
        token_manager.validate.return_value = Success(value=reset_token)
        handler = ValidateResetTokenHandler(token_manager)

        result = await handler.handle(ValidateResetToken(token="raw"))

        assert result == Success(
            value=ResetTokenValidity(expires_at=reset_token.expires_at)
        )

    async def test_invalid_token(self):
        token_manager = AsyncMock()
        token_manager.validate.return_value = Failure(
            error=NotFoundError(
                code=ErrorCode.INVALID_RESET_TOKEN,
                message="Invalid or expired token",
                resource_type="PasswordResetToken",
            )
        )
        handler = ValidateResetTokenHandler(token_manager)

        result = await handler.handle(ValidateResetToken(token="raw"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_RESET_TOKEN
