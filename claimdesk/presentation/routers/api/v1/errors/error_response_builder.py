"""Error response builder.

Converts domain errors returned inside ``Failure`` results into JSON
responses with the matching HTTP status.

Status mapping:
    AuthenticationError -> 401
    NotFoundError       -> 404
    anything else       -> 500
"""

from fastapi import status
from fastapi.responses import JSONResponse

from claimdesk.core.errors import AuthenticationError, DomainError, NotFoundError
from claimdesk.schemas.auth_schemas import ErrorBody, ErrorResponse


class DomainErrorException(Exception):
    """Raised by dependencies that must abort the request with a DomainError."""

    def __init__(self, error: DomainError) -> None:
        super().__init__(str(error))
        self.error = error


class ErrorResponseBuilder:
    """Build ``{"error": {"code", "message"}}`` responses.

    Example:
        >>> match result:
        ...     case Failure(error=error):
        ...         return ErrorResponseBuilder.from_domain_error(error)
    """

    @staticmethod
    def from_domain_error(error: DomainError) -> JSONResponse:
        """Convert a DomainError to a JSON error response.

        Args:
            error: Domain error from a handler or dependency.

        Returns:
            JSONResponse with the mapped status code.
        """
        return ErrorResponseBuilder.build(
            status_code=ErrorResponseBuilder.get_status_code(error),
            code=error.code.value,
            message=error.message,
        )

    @staticmethod
    def build(
        *,
        status_code: int,
        code: str,
        message: str,
        headers: dict[str, str] | None = None,
    ) -> JSONResponse:
        """Build an error response from raw parts."""
        body = ErrorResponse(error=ErrorBody(code=code, message=message))
        return JSONResponse(
            status_code=status_code,
            content=body.model_dump(),
            headers=headers,
        )

    @staticmethod
    def get_status_code(error: DomainError) -> int:
        """Map a DomainError subtype to an HTTP status code.

        Example:
            >>> ErrorResponseBuilder.get_status_code(invalid_reset_token_error())
            404
        """
        if isinstance(error, AuthenticationError):
            return status.HTTP_401_UNAUTHORIZED
        if isinstance(error, NotFoundError):
            return status.HTTP_404_NOT_FOUND
        return status.HTTP_500_INTERNAL_SERVER_ERROR
