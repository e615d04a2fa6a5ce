"""Email job handlers.

Payloads:
    email:account-locked   {"to": str, "user_id": str}
    email:password-reset   {"to": str, "user_id": str, "token": str}
"""

from typing import Any
from urllib.parse import urlencode

from claimdesk.core.constants import ACCOUNT_LOCKED_EMAIL_JOB, PASSWORD_RESET_EMAIL_JOB
from claimdesk.domain.protocols.email_protocol import EmailProtocol
from claimdesk.infrastructure.jobs.in_process_dispatcher import InProcessJobDispatcher


def register_email_jobs(
    dispatcher: InProcessJobDispatcher,
    email_service: EmailProtocol,
    *,
    reset_url: str,
) -> None:
    """Register the email job handlers on ``dispatcher``.

    Args:
        dispatcher: Dispatcher to register on.
        email_service: Email adapter used by the handlers.
        reset_url: Frontend reset page; the token is appended as ``?token=``.
    """

    async def send_account_locked(payload: dict[str, Any]) -> None:
        await email_service.send_account_locked_notification(to_email=payload["to"])

    async def send_password_reset(payload: dict[str, Any]) -> None:
        link = f"{reset_url}?{urlencode({'token': payload['token']})}"
        await email_service.send_password_reset_email(
            to_email=payload["to"], reset_url=link
        )

    dispatcher.register(ACCOUNT_LOCKED_EMAIL_JOB, send_account_locked)
    dispatcher.register(PASSWORD_RESET_EMAIL_JOB, send_password_reset)
