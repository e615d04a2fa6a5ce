"""Input checks shared by the Annotated request types.

Each function returns the (possibly normalized) value or raises
ValueError, which pydantic reports as a 422 field error.
"""

import re
from collections.abc import Callable

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
_TOKEN_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

MIN_PASSWORD_LENGTH = 8

_PASSWORD_RULES: tuple[tuple[Callable[[str], bool], str], ...] = (
    (
        lambda p: len(p) >= MIN_PASSWORD_LENGTH,
        f"at least {MIN_PASSWORD_LENGTH} characters",
    ),
    (lambda p: any(c.isupper() for c in p), "an uppercase letter"),
    (lambda p: any(c.islower() for c in p), "a lowercase letter"),
    (lambda p: any(c.isdigit() for c in p), "a digit"),
    (lambda p: any(not c.isalnum() for c in p), "a special character"),
)


def validate_email(v: str) -> str:
    """Trim, check shape and lowercase.

    >>> validate_email(" Agent@ClaimDesk.TEST ")
    'agent@claimdesk.test'
    """
    v = v.strip()
    if not _EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v.lower()


def validate_strong_password(v: str) -> str:
    """Strength rules for a password being set, not for one being checked."""
    for rule, requirement in _PASSWORD_RULES:
        if not rule(v):
            raise ValueError(f"Password needs {requirement}")
    return v


def validate_token_format(v: str) -> str:
    """Opaque tokens use the URL-safe base64 alphabet without padding."""
    if not _TOKEN_PATTERN.fullmatch(v):
        raise ValueError("Invalid token format")
    return v
