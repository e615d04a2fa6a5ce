"""Data transfer objects returned by handlers."""

from claimdesk.application.dtos.auth_dtos import (
    CurrentUser,
    LoginResult,
    PersonName,
    ResetTokenValidity,
)

__all__ = ["CurrentUser", "LoginResult", "PersonName", "ResetTokenValidity"]
