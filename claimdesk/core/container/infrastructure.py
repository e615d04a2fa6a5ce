"""Process-wide infrastructure singletons.

Each factory is ``lru_cache``d, so the first call builds the object and
every later call (routers, handlers, lifespan) gets the same one. Adapter
imports are deferred to the factory body to keep ``import claimdesk``
cheap and free of cycles.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from claimdesk.core.background import BackgroundTasks
from claimdesk.core.config import settings
from claimdesk.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from claimdesk.domain.protocols.audit_protocol import AuditProtocol
    from claimdesk.domain.protocols.email_protocol import EmailProtocol
    from claimdesk.domain.protocols.job_dispatcher_protocol import (
        JobDispatcherProtocol,
    )
    from claimdesk.domain.protocols.logger_protocol import LoggerProtocol
    from claimdesk.domain.protocols.opaque_token_protocol import OpaqueTokenProtocol
    from claimdesk.domain.protocols.password_hashing_protocol import (
        PasswordHashingProtocol,
    )


@lru_cache()
def get_database() -> Database:
    """Engine and session factory; closed by the application lifespan."""
    return Database(settings.database_url, echo=settings.db_echo)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """structlog adapter: colored output in development, JSON elsewhere."""
    from claimdesk.infrastructure.logging import ConsoleAdapter

    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """bcrypt at ``settings.bcrypt_rounds``; low costs only under test."""
    from claimdesk.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(
        cost_factor=settings.bcrypt_rounds,
        allow_low_cost=settings.is_testing,
    )


@lru_cache()
def get_token_service() -> "OpaqueTokenProtocol":
    from claimdesk.infrastructure.security import OpaqueTokenService

    return OpaqueTokenService()


@lru_cache()
def get_background_tasks() -> BackgroundTasks:
    """Registry of fire-and-forget work, drained on shutdown."""
    return BackgroundTasks(logger=get_logger())


@lru_cache()
def get_email_service() -> "EmailProtocol":
    from claimdesk.infrastructure.email import StubEmailService

    return StubEmailService(logger=get_logger())


@lru_cache()
def get_job_dispatcher() -> "JobDispatcherProtocol":
    """In-process dispatcher with the email job kinds registered."""
    from claimdesk.infrastructure.jobs import (
        InProcessJobDispatcher,
        register_email_jobs,
    )

    dispatcher = InProcessJobDispatcher(
        tasks=get_background_tasks(), logger=get_logger()
    )
    register_email_jobs(
        dispatcher,
        get_email_service(),
        reset_url=settings.password_reset_url,
    )
    return dispatcher


@lru_cache()
def get_audit() -> "AuditProtocol":
    """Audit adapter that writes rows from background tasks."""
    from claimdesk.infrastructure.audit import DatabaseAuditAdapter

    return DatabaseAuditAdapter(
        database=get_database(),
        tasks=get_background_tasks(),
        logger=get_logger(),
    )
