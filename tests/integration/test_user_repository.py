"""Integration tests for UserRepository against SQLite.

Tests cover:
- Case-insensitive email lookup (no wildcard matching)
- Active-only lookup
- Role and permissions loaded with the user
- Atomic increment with lock transition at the threshold
"""

from datetime import UTC, datetime

import pytest
from uuid_extensions import uuid7

from claimdesk.infrastructure.persistence.repositories import UserRepository
from tests.utils.db_helpers import fetch_user


@pytest.mark.integration
class TestUserRepositoryLookup:
    async def test_find_by_email_is_case_insensitive(self, database, create_user):
        created = await create_user("agent@claimdesk.test")

        user = await UserRepository(database).find_by_email("Agent@ClaimDesk.TEST")

        assert user is not None
        assert user.id == created.id

    async def test_find_by_email_does_not_treat_underscore_as_wildcard(
        self, database, create_user
    ):
        await create_user("a_b@claimdesk.test")

        repo = UserRepository(database)

        assert await repo.find_by_email("axb@claimdesk.test") is None

    async def test_find_active_by_email_skips_inactive(self, database, create_user):
        await create_user("off@claimdesk.test", is_active=False)
        repo = UserRepository(database)

        assert await repo.find_by_email("off@claimdesk.test") is not None
        assert await repo.find_active_by_email("off@claimdesk.test") is None

    async def test_find_by_id_missing(self, database):
        assert await UserRepository(database).find_by_id(uuid7()) is None

    async def test_role_and_permissions_loaded(
        self, database, create_user, create_role
    ):
        role = await create_role("adjuster", ["claims:read", "claims:approve"])
        created = await create_user(role_id=role.id)

        user = await UserRepository(database).find_by_id(created.id)

        assert user is not None
        assert user.role_name == "adjuster"
        assert sorted(user.permissions) == ["claims:approve", "claims:read"]

    async def test_user_without_role(self, database, create_user):
        created = await create_user()

        user = await UserRepository(database).find_by_id(created.id)

        assert user.role_name is None
        assert user.permissions == []
        assert (user.first_name, user.last_name) == ("Ada", "Lovelace")


@pytest.mark.integration
class TestIncrementFailedLoginAttempts:
    async def test_increment_below_threshold(self, database, create_user):
        created = await create_user(failed_login_attempts=1)
        repo = UserRepository(database)

        count = await repo.increment_failed_login_attempts(
            created.id, threshold=5, now=datetime.now(UTC)
        )

        assert count == 2
        row = await fetch_user(database, created.id)
        assert row.failed_login_attempts == 2
        assert row.locked_at is None

    async def test_reaching_threshold_locks_and_cuts_off_sessions(
        self, database, create_user
    ):
        created = await create_user(failed_login_attempts=4)
        now = datetime.now(UTC)

        count = await UserRepository(database).increment_failed_login_attempts(
            created.id, threshold=5, now=now
        )

        assert count == 5
        row = await fetch_user(database, created.id)
        assert row.locked_at == now
        assert row.sessions_invalid_before == now

    async def test_existing_lock_timestamp_kept(self, database, create_user):
        locked_at = datetime(2026, 1, 1, tzinfo=UTC)
        created = await create_user(failed_login_attempts=7, locked_at=locked_at)

        count = await UserRepository(database).increment_failed_login_attempts(
            created.id, threshold=5, now=datetime.now(UTC)
        )

        assert count == 8
        row = await fetch_user(database, created.id)
        assert row.locked_at == locked_at

    async def test_missing_user_raises(self, database):
        with pytest.raises(LookupError):
            await UserRepository(database).increment_failed_login_attempts(
                uuid7(), threshold=5, now=datetime.now(UTC)
            )
