"""Queries (CQRS read operations)."""

from claimdesk.application.queries.auth_queries import (
    GetCurrentUser,
    ValidateResetToken,
)

__all__ = ["GetCurrentUser", "ValidateResetToken"]
