"""Port for outgoing account emails.

Only the job handlers call it; request handlers enqueue a job instead so
that mail delivery never delays or fails a response.
"""

from typing import Protocol


class EmailProtocol(Protocol):
    async def send_password_reset_email(self, to_email: str, reset_url: str) -> None:
        """Deliver ``reset_url`` (already carrying the token) to ``to_email``."""
        ...

    async def send_account_locked_notification(self, to_email: str) -> None:
        """Tell the owner their account locked after repeated failed logins."""
        ...
