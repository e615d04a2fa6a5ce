"""Unit tests for Settings validation and derived properties."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from claimdesk.core.config import Settings
from claimdesk.core.constants import BCRYPT_ROUNDS_DEFAULT
from claimdesk.core.enums import Environment


@pytest.mark.unit
class TestSettings:
    def test_defaults(self, monkeypatch):
        for name in ("ENVIRONMENT", "BCRYPT_ROUNDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.max_failed_login_attempts == 5
        assert settings.session_lifetime == timedelta(days=7)
        assert settings.session_activity_staleness == timedelta(minutes=5)
        assert settings.password_reset_lifetime == timedelta(hours=1)
        assert settings.bcrypt_rounds == BCRYPT_ROUNDS_DEFAULT == 12
        assert settings.session_cookie_name == "session"

    def test_reads_environment_variables(self, monkeypatch):
        monkeypatch.setenv("MAX_FAILED_LOGIN_ATTEMPTS", "3")
        monkeypatch.setenv("SESSION_EXPIRY_DAYS", "1")

        settings = Settings()

        assert settings.max_failed_login_attempts == 3
        assert settings.session_lifetime == timedelta(days=1)

    @pytest.mark.parametrize("rounds", [3, 32])
    def test_rejects_bcrypt_rounds_out_of_range(self, rounds):
        with pytest.raises(ValidationError):
            Settings(bcrypt_rounds=rounds)

    @pytest.mark.parametrize(
        "field",
        ["max_failed_login_attempts", "session_expiry_days", "password_reset_expiry_hours"],
    )
    def test_rejects_non_positive_values(self, field):
        with pytest.raises(ValidationError):
            Settings(**{field: 0})

    @pytest.mark.parametrize(
        ("environment", "is_testing", "is_production"),
        [
            (Environment.DEVELOPMENT, False, False),
            (Environment.TESTING, True, False),
            (Environment.CI, True, False),
            (Environment.PRODUCTION, False, True),
        ],
    )
    def test_environment_flags(self, environment, is_testing, is_production):
        settings = Settings(environment=environment)

        assert settings.is_testing is is_testing
        assert settings.is_production is is_production
