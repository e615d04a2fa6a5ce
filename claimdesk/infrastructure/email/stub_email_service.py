"""Stub email service.

Implements EmailProtocol by logging instead of sending. Recipients are
logged; reset URLs are not, since they carry a live token.
"""

from claimdesk.domain.protocols.logger_protocol import LoggerProtocol


class StubEmailService:
    """Email adapter that records sends in the structured log.

    Attributes:
        sent: (template, recipient) pairs, in send order.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._logger = logger
        self.sent: list[tuple[str, str]] = []

    async def send_password_reset_email(self, to_email: str, reset_url: str) -> None:
        """Log a password reset email."""
        self.sent.append(("password_reset", to_email))
        self._logger.info("email_stub_sent", template="password_reset", to=to_email)

    async def send_account_locked_notification(self, to_email: str) -> None:
        """Log an account locked notification."""
        self.sent.append(("account_locked", to_email))
        self._logger.info("email_stub_sent", template="account_locked", to=to_email)
