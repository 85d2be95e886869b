"""Email service implementations.

- StubEmailService: in-memory outbox + redacted log line (development/testing)
- SMTPEmailService: real delivery over SMTP
"""

from userservice.infrastructure.email.smtp_email_service import SMTPEmailService
from userservice.infrastructure.email.stub_email_service import StubEmailService

__all__ = [
    "SMTPEmailService",
    "StubEmailService",
]
