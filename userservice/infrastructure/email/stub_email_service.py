"""Stub email service for development and testing.

Records messages in memory and logs a redacted summary instead of sending.
Wired by the container when no SMTP host is configured.
"""

from collections import deque
from dataclasses import dataclass
from urllib.parse import parse_qs, urlsplit

from userservice.core.errors import DomainError
from userservice.core.result import Result, Success
from userservice.domain.protocols.logger_protocol import LoggerProtocol

OUTBOX_LIMIT = 100


@dataclass(frozen=True, slots=True)
class OutboxMessage:
    """A verification email captured by the stub."""

    to_email: str
    verification_url: str


def redact_email(email: str) -> str:
    """Redact an email address for logging (``al***@example.com``)."""
    if "@" not in email:
        return "redacted"
    local, domain = email.split("@", 1)
    return f"{local[:2]}***@{domain}"


def redact_url(url: str) -> str:
    """Replace the token query value of a verification link with a preview."""
    parts = urlsplit(url)
    token = parse_qs(parts.query).get("token", [""])[0]
    if not token:
        return url
    return url.replace(token, f"{token[:2]}***")


class StubEmailService:
    """In-memory email sender.

    Never fails. ``outbox`` keeps the last OUTBOX_LIMIT messages so a
    developer shell or a test can pick up the verification link; older
    messages are dropped.
    """

    def __init__(self, logger: LoggerProtocol, outbox_limit: int = OUTBOX_LIMIT) -> None:
        self._logger = logger
        self.outbox: deque[OutboxMessage] = deque(maxlen=outbox_limit)

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> Result[None, DomainError]:
        self.outbox.append(OutboxMessage(to_email, verification_url))
        self._logger.info(
            "email_stub_sent",
            to=redact_email(to_email),
            kind="verification",
            url=redact_url(verification_url),
        )
        return Success(value=None)

    def last_message_to(self, to_email: str) -> OutboxMessage | None:
        """Most recent message sent to ``to_email``, if any."""
        for message in reversed(self.outbox):
            if message.to_email == to_email:
                return message
        return None
