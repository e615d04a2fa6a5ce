"""Atomic failed-login counter with account lockout.

The increment and the lock transition happen in one database statement, so
N concurrent wrong passwords produce exactly N increments and exactly one
caller sees the count equal to the threshold. That caller alone sends the
lockout notification.
"""

from datetime import UTC, datetime
from uuid import UUID

from claimdesk.domain.protocols.user_repository import UserRepository


class LockoutCounter:
    """Failed login counting.

    Example:
        >>> new_count = await counter.increment_and_maybe_lock(user.id, threshold=5)
        >>> if counter.just_locked(new_count, threshold=5):
        ...     notify_account_locked(user)
    """

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def increment_and_maybe_lock(self, user_id: UUID, threshold: int) -> int:
        """Increment the failed attempt counter, locking at ``threshold``.

        Args:
            user_id: User that failed to log in.
            threshold: Attempts at which the account locks.

        Returns:
            int: The post-increment count.

        Raises:
            LookupError: If the user no longer exists.
        """
        return await self._user_repo.increment_failed_login_attempts(
            user_id, threshold=threshold, now=datetime.now(UTC)
        )

    @staticmethod
    def just_locked(new_count: int, threshold: int) -> bool:
        """True for the single increment that reached the threshold."""
        return new_count == threshold
