"""Error categories the HTTP layer maps to status codes.

- NotFoundError -> 404 (reset tokens that are unknown, expired or used)
- AuthenticationError -> 401

Login rejections all carry one code and one message whatever the cause;
the cause itself is only recorded in the audit trail.
"""

from dataclasses import dataclass

from claimdesk.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """A resource is missing or can no longer be used.

    ``resource_id`` is only set when echoing it back reveals nothing.
    """

    resource_type: str
    resource_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Rejected login, or a session that is unknown, expired or revoked."""
