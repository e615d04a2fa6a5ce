"""Domain protocols (ports) package.

This package contains protocol definitions that the domain layer needs.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from claimdesk.domain.protocols import PasswordHashingProtocol, UserRepository
"""

# Service protocols
from claimdesk.domain.protocols.audit_protocol import (
    AuditContext,
    AuditEntry,
    AuditProtocol,
)
from claimdesk.domain.protocols.email_protocol import EmailProtocol
from claimdesk.domain.protocols.job_dispatcher_protocol import JobDispatcherProtocol
from claimdesk.domain.protocols.logger_protocol import LoggerProtocol
from claimdesk.domain.protocols.opaque_token_protocol import OpaqueTokenProtocol
from claimdesk.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)

# Repository protocols
from claimdesk.domain.protocols.password_reset_token_repository import (
    PasswordResetTokenRepository,
)
from claimdesk.domain.protocols.session_repository import SessionRepository
from claimdesk.domain.protocols.user_repository import UserRepository

__all__ = [
    # Service protocols
    "AuditContext",
    "AuditEntry",
    "AuditProtocol",
    "EmailProtocol",
    "JobDispatcherProtocol",
    "LoggerProtocol",
    "OpaqueTokenProtocol",
    "PasswordHashingProtocol",
    # Repository protocols
    "PasswordResetTokenRepository",
    "SessionRepository",
    "UserRepository",
]
