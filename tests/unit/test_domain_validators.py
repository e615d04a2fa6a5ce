"""Unit tests for centralized validators and Annotated request types."""

import pytest
from pydantic import BaseModel, ValidationError

from claimdesk.domain.types import Email, NewPassword, OpaqueToken
from claimdesk.domain.validators import (
    validate_email,
    validate_strong_password,
    validate_token_format,
)


class _Form(BaseModel):
    email: Email
    password: NewPassword
    token: OpaqueToken


@pytest.mark.unit
class TestValidateEmail:
    def test_normalizes_case_and_whitespace(self):
        assert validate_email("  Agent@ClaimDesk.TEST ") == "agent@claimdesk.test"

    @pytest.mark.parametrize("email", ["no-at-sign", "a@b", "@claimdesk.test", ""])
    def test_rejects_malformed(self, email):
        with pytest.raises(ValueError, match="Invalid email format"):
            validate_email(email)


@pytest.mark.unit
class TestValidateStrongPassword:
    def test_accepts_strong_password(self):
        assert validate_strong_password("SecurePass123!") == "SecurePass123!"

    @pytest.mark.parametrize(
        ("password", "message"),
        [
            ("Sh0rt!", "at least 8"),
            ("securepass123!", "uppercase"),
            ("SECUREPASS123!", "lowercase"),
            ("SecurePass!!!", "digit"),
            ("SecurePass123", "special"),
        ],
    )
    def test_rejects_weak_password(self, password, message):
        with pytest.raises(ValueError, match=message):
            validate_strong_password(password)


@pytest.mark.unit
class TestValidateTokenFormat:
    def test_accepts_urlsafe_token(self):
        assert validate_token_format("abc-DEF_123") == "abc-DEF_123"

    @pytest.mark.parametrize("token", ["has space", "slash/", "plus+", "pad=="])
    def test_rejects_non_urlsafe(self, token):
        with pytest.raises(ValueError):
            validate_token_format(token)


@pytest.mark.unit
def test_annotated_types_validate_through_pydantic():
    form = _Form(
        email="Agent@ClaimDesk.test", password="SecurePass123!", token="tok_en-1"
    )
    assert form.email == "agent@claimdesk.test"

    with pytest.raises(ValidationError):
        _Form(email="agent@claimdesk.test", password="weak", token="tok")
