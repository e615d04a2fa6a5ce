"""bcrypt implementation of PasswordHashingProtocol.

Hashing and verification both take roughly 250ms at cost 12; every extra
unit of cost doubles that.
"""

import bcrypt

from claimdesk.core.constants import BCRYPT_MAX_PASSWORD_BYTES, BCRYPT_ROUNDS_DEFAULT

_MIN_COST = 4
_MIN_PRODUCTION_COST = 10
_MAX_COST = 20


class BcryptPasswordService:
    """Hash and check passwords with bcrypt.

    Args:
        cost_factor: bcrypt log2 rounds.
        allow_low_cost: Permit costs below 10 so test suites stay fast.

    Raises:
        ValueError: ``cost_factor`` is outside the accepted range.
    """

    def __init__(
        self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT, *, allow_low_cost: bool = False
    ) -> None:
        floor = _MIN_COST if allow_low_cost else _MIN_PRODUCTION_COST
        if not floor <= cost_factor <= _MAX_COST:
            raise ValueError(
                f"bcrypt cost factor must be at least {floor} and at most {_MAX_COST}"
            )
        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        """Return a ``$2b$`` hash with a fresh salt."""
        hashed = bcrypt.hashpw(
            _encode(password), bcrypt.gensalt(rounds=self._cost_factor)
        )
        return hashed.decode("ascii")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Constant-time check; a malformed hash counts as a mismatch."""
        try:
            return bcrypt.checkpw(_encode(password), password_hash.encode("ascii"))
        except ValueError:
            return False


def _encode(password: str) -> bytes:
    # bcrypt>=4.1 rejects inputs over 72 bytes; older versions truncated.
    return password.encode("utf-8")[:BCRYPT_MAX_PASSWORD_BYTES]
