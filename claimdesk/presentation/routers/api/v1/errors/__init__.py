"""Error responses and exception handlers for the presentation layer.

Every error body has the shape ``{"error": {"code": ..., "message": ...}}``.

Exports:
    DomainErrorException: Carries a DomainError out of a dependency
    ErrorResponseBuilder: Build error responses from domain errors
    register_exception_handlers: Register global exception handlers with FastAPI
"""

from claimdesk.presentation.routers.api.v1.errors.error_response_builder import (
    DomainErrorException,
    ErrorResponseBuilder,
)
from claimdesk.presentation.routers.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)

__all__ = [
    "DomainErrorException",
    "ErrorResponseBuilder",
    "register_exception_handlers",
]
