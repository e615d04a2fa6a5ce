"""Composition root.

Every factory the application and its routers depend on, re-exported from
one place::

    from claimdesk.core.container import get_login_user_handler

``infrastructure`` and ``repositories`` hold process-wide singletons;
``auth_services`` and ``auth_handlers`` build per-request objects on top
of them.
"""

from claimdesk.core.container.auth_handlers import (
    get_confirm_password_reset_handler,
    get_get_current_user_handler,
    get_login_user_handler,
    get_logout_all_sessions_handler,
    get_logout_user_handler,
    get_request_password_reset_handler,
    get_validate_reset_token_handler,
)
from claimdesk.core.container.auth_services import (
    get_credential_verifier,
    get_lockout_counter,
    get_password_reset_token_manager,
    get_session_manager,
)
from claimdesk.core.container.infrastructure import (
    get_audit,
    get_background_tasks,
    get_database,
    get_email_service,
    get_job_dispatcher,
    get_logger,
    get_password_service,
    get_token_service,
)
from claimdesk.core.container.repositories import (
    get_password_reset_token_repository,
    get_session_repository,
    get_user_repository,
)

__all__ = [
    "get_audit",
    "get_background_tasks",
    "get_confirm_password_reset_handler",
    "get_credential_verifier",
    "get_database",
    "get_email_service",
    "get_get_current_user_handler",
    "get_job_dispatcher",
    "get_lockout_counter",
    "get_logger",
    "get_login_user_handler",
    "get_logout_all_sessions_handler",
    "get_logout_user_handler",
    "get_password_reset_token_manager",
    "get_password_reset_token_repository",
    "get_password_service",
    "get_request_password_reset_handler",
    "get_session_manager",
    "get_session_repository",
    "get_token_service",
    "get_user_repository",
    "get_validate_reset_token_handler",
]
