"""Global exception handlers for FastAPI application.

Handlers:
    domain_error_exception_handler: DomainErrorException -> mapped status
    http_exception_handler: HTTPException -> error envelope
    generic_exception_handler: Unhandled exceptions -> 500 (logged)

Request validation keeps FastAPI's default 422 response.

Exports:
    register_exception_handlers: Register all exception handlers with FastAPI app
"""

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from claimdesk.core.container import get_logger
from claimdesk.presentation.routers.api.v1.errors.error_response_builder import (
    DomainErrorException,
    ErrorResponseBuilder,
)

# HTTP status code to machine code for HTTPException responses
_HTTP_STATUS_CODES: dict[int, str] = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    415: "UNSUPPORTED_MEDIA_TYPE",
    429: "RATE_LIMIT_EXCEEDED",
    500: "INTERNAL_SERVER_ERROR",
    503: "SERVICE_UNAVAILABLE",
}


async def domain_error_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert DomainErrorException (raised by dependencies) to a response."""
    if not isinstance(exc, DomainErrorException):
        raise exc
    return ErrorResponseBuilder.from_domain_error(exc.error)


async def http_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Convert HTTPException to the error envelope.

    Example:
        >>> raise HTTPException(status_code=404, detail="Not Found")
        >>> # {"error": {"code": "NOT_FOUND", "message": "Not Found"}}
    """
    if not isinstance(exc, HTTPException):
        raise exc
    return ErrorResponseBuilder.build(
        status_code=exc.status_code,
        code=_HTTP_STATUS_CODES.get(exc.status_code, "ERROR"),
        message=str(exc.detail),
        headers=getattr(exc, "headers", None),
    )


async def generic_exception_handler(
    request: Request,
    exc: Exception,
) -> JSONResponse:
    """Catch-all for unhandled exceptions (database faults and the like).

    Logs the exception and returns a 500 without internal details.
    """
    get_logger().error(
        "unhandled_exception",
        error=exc,
        method=request.method,
        path=request.url.path,
    )
    return ErrorResponseBuilder.build(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        code="INTERNAL_SERVER_ERROR",
        message="An unexpected error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register global exception handlers with FastAPI app.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(DomainErrorException, domain_error_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
