"""Background job dispatch.

Usage:
    from claimdesk.core.container import get_job_dispatcher

    dispatcher = get_job_dispatcher()
    dispatcher.enqueue("email:account-locked", {"to": email, "user_id": str(user_id)})
"""

from claimdesk.infrastructure.jobs.email_jobs import register_email_jobs
from claimdesk.infrastructure.jobs.in_process_dispatcher import (
    InProcessJobDispatcher,
    UnknownJobError,
)

__all__ = [
    "InProcessJobDispatcher",
    "UnknownJobError",
    "register_email_jobs",
]
