"""Unit tests for CredentialVerifier.

Tests cover:
- Matching and non-matching stored hashes
- Missing hash (unknown user) still performs one bcrypt comparison
- Dummy hash is created once, with the configured cost
"""

from unittest.mock import Mock

import pytest

from claimdesk.application.services import CredentialVerifier
from claimdesk.infrastructure.security import BcryptPasswordService


@pytest.mark.unit
class TestCredentialVerifier:
    async def test_verify_matching_password(self, password_service, password_hash):
        verifier = CredentialVerifier(password_service)

        assert await verifier.verify("SecurePass123!", password_hash) is True

    async def test_verify_wrong_password(self, password_service, password_hash):
        verifier = CredentialVerifier(password_service)

        assert await verifier.verify("WrongPass123!", password_hash) is False

    async def test_verify_without_hash_returns_false(self, password_service):
        verifier = CredentialVerifier(password_service)

        assert await verifier.verify("SecurePass123!", None) is False

    async def test_verify_without_hash_still_compares_against_dummy(self):
        password_service = Mock()
        password_service.hash_password.return_value = "$2b$12$dummy"
        password_service.verify_password.return_value = True
        verifier = CredentialVerifier(password_service)

        result = await verifier.verify("anything", None)

        # The dummy comparison result is discarded
        assert result is False
        password_service.verify_password.assert_called_once_with(
            "anything", "$2b$12$dummy"
        )

    async def test_verify_is_called_once_per_attempt_with_hash(self):
        password_service = Mock()
        password_service.hash_password.return_value = "$2b$12$dummy"
        password_service.verify_password.return_value = False
        verifier = CredentialVerifier(password_service)

        await verifier.verify("attempt", "$2b$12$stored")

        password_service.verify_password.assert_called_once_with(
            "attempt", "$2b$12$stored"
        )

    def test_dummy_hash_uses_service_cost(self):
        password_service = BcryptPasswordService(cost_factor=5, allow_low_cost=True)

        verifier = CredentialVerifier(password_service)

        assert verifier._dummy_hash.startswith("$2b$05$")

    async def test_perform_dummy_password_work(self):
        password_service = Mock()
        password_service.hash_password.return_value = "$2b$12$dummy"
        verifier = CredentialVerifier(password_service)

        await verifier.perform_dummy_password_work()

        password_service.verify_password.assert_called_once_with("", "$2b$12$dummy")
