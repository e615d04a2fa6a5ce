"""Email service implementations.

This package contains email service adapters:
- StubEmailService: Structured-log output instead of delivery
"""

from claimdesk.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "StubEmailService",
]
