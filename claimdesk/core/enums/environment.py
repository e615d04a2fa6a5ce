"""Deployment environment.

Selects the log renderer, the session cookie ``Secure`` flag and whether
bcrypt may run below its production cost floor.
"""

from enum import Enum


class Environment(str, Enum):
    """Where the service is running (``ENVIRONMENT`` env var)."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
