"""Result types for railway-oriented programming.

Handlers return ``Success`` or ``Failure`` instead of raising for expected
outcomes, which keeps every rejection path explicit and easy to assert on.

Usage:
    result = await handler.handle(LoginUser(email=email, password=password))
    match result:
        case Success(value=login):
            set_cookie(login.session_token, login.expires_at)
        case Failure(error=error):
            return error_response(error)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True, kw_only=True)
class Success[T]:
    """Outcome of an operation that did what was asked.

    Attributes:
        value: Payload for the caller (``None`` for commands without output).
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure[E]:
    """Outcome of an operation that was rejected.

    Attributes:
        error: A ``DomainError`` describing the rejection.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
