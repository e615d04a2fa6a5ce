"""Concurrency tests: lockout counting and single-use reset tokens.

Concurrent requests are real concurrent transactions on separate
connections to the same SQLite file.
"""

import asyncio
from datetime import UTC, datetime

import pytest

from claimdesk.application.commands.auth_commands import (
    ConfirmPasswordReset,
    LoginUser,
)
from claimdesk.core.result import Failure, Success
from claimdesk.infrastructure.persistence.repositories import UserRepository
from tests.utils.db_helpers import (
    LOCKOUT_THRESHOLD,
    fetch_audit_logs,
    fetch_user,
    metadata_of,
)


@pytest.mark.integration
class TestConcurrentLockout:
    async def test_concurrent_increments_are_not_lost(self, database, create_user):
        user = await create_user()
        repo = UserRepository(database)
        now = datetime.now(UTC)

        counts = await asyncio.gather(
            *(
                repo.increment_failed_login_attempts(
                    user.id, threshold=LOCKOUT_THRESHOLD, now=now
                )
                for _ in range(LOCKOUT_THRESHOLD)
            )
        )

        assert sorted(counts) == list(range(1, LOCKOUT_THRESHOLD + 1))
        row = await fetch_user(database, user.id)
        assert row.failed_login_attempts == LOCKOUT_THRESHOLD
        assert row.locked_at is not None

    async def test_concurrent_wrong_passwords_lock_once(self, auth_stack, create_user):
        user = await create_user()

        results = await asyncio.gather(
            *(
                auth_stack.login.handle(
                    LoginUser(email="agent@claimdesk.test", password="WrongPass1!")
                )
                for _ in range(LOCKOUT_THRESHOLD)
            )
        )
        await auth_stack.settle()

        assert all(isinstance(r, Failure) for r in results)
        row = await fetch_user(auth_stack.database, user.id)
        assert row.failed_login_attempts == LOCKOUT_THRESHOLD
        assert row.locked_at is not None
        locked_now = [
            r
            for r in await fetch_audit_logs(auth_stack.database, "LOGIN_FAILED")
            if metadata_of(r)["reason"] == "locked_now"
        ]
        assert len(locked_now) == 1
        assert auth_stack.email.sent == [("account_locked", "agent@claimdesk.test")]

    async def test_counter_passes_threshold_but_one_request_sees_it(
        self, database, create_user
    ):
        user = await create_user()
        repo = UserRepository(database)
        now = datetime.now(UTC)

        counts = await asyncio.gather(
            *(
                repo.increment_failed_login_attempts(
                    user.id, threshold=LOCKOUT_THRESHOLD, now=now
                )
                for _ in range(LOCKOUT_THRESHOLD + 4)
            )
        )

        assert sorted(counts) == list(range(1, LOCKOUT_THRESHOLD + 5))
        assert counts.count(LOCKOUT_THRESHOLD) == 1
        row = await fetch_user(database, user.id)
        assert row.locked_at is not None

    async def test_more_wrong_passwords_than_threshold_lock_once(
        self, auth_stack, create_user
    ):
        user = await create_user()
        attempts = LOCKOUT_THRESHOLD + 4

        results = await asyncio.gather(
            *(
                auth_stack.login.handle(
                    LoginUser(email="agent@claimdesk.test", password="WrongPass1!")
                )
                for _ in range(attempts)
            )
        )
        await auth_stack.settle()

        assert all(isinstance(r, Failure) for r in results)
        row = await fetch_user(auth_stack.database, user.id)
        assert LOCKOUT_THRESHOLD <= row.failed_login_attempts <= attempts
        assert row.locked_at is not None
        locked_now = [
            r
            for r in await fetch_audit_logs(auth_stack.database, "LOGIN_FAILED")
            if metadata_of(r)["reason"] == "locked_now"
        ]
        assert len(locked_now) == 1
        assert metadata_of(locked_now[0])["attempts"] == LOCKOUT_THRESHOLD
        assert auth_stack.email.sent == [("account_locked", "agent@claimdesk.test")]


@pytest.mark.integration
class TestConcurrentResetConfirm:
    async def test_only_one_confirm_wins(self, auth_stack, create_user):
        await create_user()
        issued = await auth_stack.token_manager.request("agent@claimdesk.test")
        passwords = ["WinnerOne111!", "WinnerTwo222!"]

        results = await asyncio.gather(
            *(
                auth_stack.confirm_reset.handle(
                    ConfirmPasswordReset(token=issued.token, new_password=password)
                )
                for password in passwords
            )
        )
        await auth_stack.settle()

        successes = [i for i, r in enumerate(results) if isinstance(r, Success)]
        assert len(successes) == 1
        winner = passwords[successes[0]]
        loser = passwords[1 - successes[0]]
        login = await auth_stack.login.handle(
            LoginUser(email="agent@claimdesk.test", password=winner)
        )
        assert isinstance(login, Success)
        rejected = await auth_stack.login.handle(
            LoginUser(email="agent@claimdesk.test", password=loser)
        )
        assert isinstance(rejected, Failure)
        assert len(await fetch_audit_logs(auth_stack.database, "PASSWORD_CHANGED")) == 1
