"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.

Users are never created or deleted here. Counter changes are single atomic
statements; there is no read-modify-save ``update(user)``.
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from claimdesk.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    Methods:
        find_by_id: Retrieve user by ID
        find_by_email: Retrieve user by email (any state)
        find_active_by_email: Retrieve an active user by email
        increment_failed_login_attempts: Atomic increment with lock transition
    """

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID, with role name and permissions.

        Args:
            user_id: User's unique identifier.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email address (case-insensitive), any state.

        Args:
            email: User's email address.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_active_by_email(self, email: str) -> User | None:
        """Find an active user by email address (case-insensitive).

        Args:
            email: User's email address.

        Returns:
            User if found and ``is_active``, None otherwise.
        """
        ...

    async def increment_failed_login_attempts(
        self, user_id: UUID, *, threshold: int, now: datetime
    ) -> int:
        """Atomically count a failed login and lock the account at the threshold.

        Single UPDATE ... RETURNING: increments ``failed_login_attempts``;
        when the new value reaches ``threshold`` and the account is not yet
        locked, also sets ``locked_at`` and ``sessions_invalid_before`` to
        ``now``.

        Args:
            user_id: User's unique identifier.
            threshold: Attempts at which the account locks.
            now: Timestamp for the lock transition.

        Returns:
            int: The post-increment attempt count.

        Raises:
            LookupError: If the user row does not exist.
        """
        ...
