"""NotificationProtocol - port for outbound verification emails.

Infrastructure provides concrete implementations (StubEmailService,
SMTPEmailService). Delivery failure is returned as a Failure value so that
callers can tell it apart from success; no retry happens here.
"""

from typing import Protocol

from userservice.core.errors import DomainError
from userservice.core.result import Result


class NotificationProtocol(Protocol):
    """Email notification protocol (port)."""

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> Result[None, DomainError]:
        """Send an email verification link.

        Args:
            to_email: Recipient email address.
            verification_url: Full URL carrying the verification token.

        Returns:
            Success(None) when the message was accepted for delivery,
            Failure(error) otherwise.
        """
        ...
