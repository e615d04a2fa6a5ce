"""Port for one-way password hashing."""

from typing import Protocol


class PasswordHashingProtocol(Protocol):
    """Hash and check passwords.

    Both calls are CPU-bound and synchronous. Async code runs them through
    ``asyncio.to_thread`` so the event loop keeps serving other requests.
    """

    def hash_password(self, password: str) -> str:
        """Salted hash suitable for storing in ``users.password_hash``."""
        ...

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Whether ``password`` matches; False for a malformed hash."""
        ...
