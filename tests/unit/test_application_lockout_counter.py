"""Unit tests for LockoutCounter."""

from datetime import UTC, datetime
from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from claimdesk.application.services import LockoutCounter


@pytest.mark.unit
class TestLockoutCounter:
    async def test_increment_delegates_to_atomic_repository_update(self):
        user_id = uuid7()
        user_repo = AsyncMock()
        user_repo.increment_failed_login_attempts.return_value = 3
        counter = LockoutCounter(user_repo)

        new_count = await counter.increment_and_maybe_lock(user_id, 5)

        assert new_count == 3
        call = user_repo.increment_failed_login_attempts.await_args
        assert call.args == (user_id,)
        assert call.kwargs["threshold"] == 5
        assert call.kwargs["now"].tzinfo == UTC
        assert call.kwargs["now"] <= datetime.now(UTC)

    async def test_missing_user_propagates(self):
        user_repo = AsyncMock()
        user_repo.increment_failed_login_attempts.side_effect = LookupError("gone")
        counter = LockoutCounter(user_repo)

        with pytest.raises(LookupError):
            await counter.increment_and_maybe_lock(uuid7(), 5)

    @pytest.mark.parametrize(
        ("new_count", "expected"),
        [(4, False), (5, True), (6, False)],
    )
    def test_just_locked_only_at_threshold(self, new_count, expected):
        assert LockoutCounter.just_locked(new_count, 5) is expected
