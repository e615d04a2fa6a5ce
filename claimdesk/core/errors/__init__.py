"""Error values returned inside ``Failure``."""

from claimdesk.core.errors.common_errors import AuthenticationError, NotFoundError
from claimdesk.core.errors.domain_error import DomainError

__all__ = [
    "AuthenticationError",
    "DomainError",
    "NotFoundError",
]
