"""Base class of every error returned by handlers.

Errors here are values: they travel inside ``Failure`` and are matched on,
never raised. Infrastructure faults (database outages and the like) stay
ordinary exceptions and propagate to the framework's 500 handler.

Usage:
    @dataclass(frozen=True, slots=True, kw_only=True)
    class MyError(DomainError):
        pass  # Inherits code, message, details
"""

from dataclasses import dataclass

from claimdesk.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """Error value with a machine code and a client-safe message.

    Attributes:
        code: ``ErrorCode`` sent to clients as ``error.code``.
        message: Text sent to clients as ``error.message``.
        details: Extra key-value context for logs (never sent to clients).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
