"""Get current user query handler.

Returns the profile projection (id, email, verification, name, role,
permissions) of the authenticated user.
"""

from claimdesk.application.dtos.auth_dtos import CurrentUser
from claimdesk.application.queries.auth_queries import GetCurrentUser
from claimdesk.core.enums import ErrorCode
from claimdesk.core.errors import AuthenticationError
from claimdesk.core.result import Failure, Result, Success
from claimdesk.domain.protocols import UserRepository


class GetCurrentUserHandler:
    """Handler for GetCurrentUser query."""

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    async def handle(
        self, query: GetCurrentUser
    ) -> Result[CurrentUser, AuthenticationError]:
        """Load the user projection.

        Returns:
            Success(CurrentUser), or Failure(AuthenticationError) when the
            user no longer exists.
        """
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return Failure(
                error=AuthenticationError(
                    code=ErrorCode.AUTHENTICATION_FAILED,
                    message="User not found",
                )
            )
        return Success(value=CurrentUser.from_user(user))
