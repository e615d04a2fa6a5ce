"""Unit tests for bcrypt password hashing and opaque tokens."""

import pytest

from claimdesk.core.constants import BCRYPT_ROUNDS_DEFAULT, TOKEN_HASH_LENGTH
from claimdesk.infrastructure.persistence.models import (
    PasswordResetTokenModel,
    SessionModel,
)
from claimdesk.infrastructure.security import BcryptPasswordService, OpaqueTokenService


@pytest.mark.unit
class TestBcryptPasswordService:
    def test_hash_and_verify(self, password_service):
        password_hash = password_service.hash_password("SecurePass123!")

        assert password_hash.startswith("$2b$04$")
        assert password_service.verify_password("SecurePass123!", password_hash)
        assert not password_service.verify_password("WrongPass123!", password_hash)

    def test_hashes_are_salted(self, password_service):
        assert password_service.hash_password("x") != password_service.hash_password(
            "x"
        )

    def test_invalid_hash_returns_false(self, password_service):
        assert password_service.verify_password("SecurePass123!", "not-a-hash") is False

    def test_long_passwords_use_first_72_bytes(self, password_service):
        base = "a" * 72
        password_hash = password_service.hash_password(base + "tail-one")

        assert password_service.verify_password(base + "tail-two", password_hash)

    def test_low_cost_rejected_outside_tests(self):
        with pytest.raises(ValueError, match="at least 10"):
            BcryptPasswordService(cost_factor=4)

    def test_default_cost(self):
        assert BcryptPasswordService().cost_factor == BCRYPT_ROUNDS_DEFAULT

    @pytest.mark.parametrize("cost", [3, 21])
    def test_cost_bounds(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost, allow_low_cost=True)


@pytest.mark.unit
class TestOpaqueTokenService:
    def test_token_is_43_char_base64url(self):
        token = OpaqueTokenService().generate_token()

        assert len(token) == 43
        assert "=" not in token

    def test_tokens_are_unique(self):
        service = OpaqueTokenService()

        assert len({service.generate_token() for _ in range(50)}) == 50

    def test_hash_is_sha256_hex(self):
        digest = OpaqueTokenService().hash_token("abc")

        assert digest == (
            "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
        )

    def test_hash_fits_token_hash_columns(self):
        digest = OpaqueTokenService().hash_token(OpaqueTokenService().generate_token())

        assert len(digest) == TOKEN_HASH_LENGTH
        for model in (SessionModel, PasswordResetTokenModel):
            assert model.__table__.c.token_hash.type.length == TOKEN_HASH_LENGTH
