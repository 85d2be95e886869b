"""SMTP email service.

Sends verification emails through an SMTP server (STARTTLS or implicit SSL).
The blocking ``smtplib`` exchange runs in a worker thread so the event loop
is never blocked. Failures are returned as EmailDeliveryError; nothing is
retried here.
"""

import asyncio
import smtplib
import ssl
from email.message import EmailMessage

from userservice.core.enums import ErrorCode
from userservice.core.errors import DomainError
from userservice.core.result import Failure, Result, Success
from userservice.domain.protocols.logger_protocol import LoggerProtocol
from userservice.infrastructure.email.stub_email_service import redact_email
from userservice.infrastructure.errors import (
    EmailDeliveryError,
    InfrastructureErrorCode,
)

VERIFICATION_SUBJECT = "Verify your email address"


class SMTPEmailService:
    """SMTP-backed implementation of NotificationProtocol.

    Usage:
        service = SMTPEmailService(
            logger=get_logger(),
            host="smtp.example.com",
            from_email="no-reply@example.com",
        )
        result = await service.send_verification_email(
            "alice@example.com", "https://app/verify?token=aZ3k9Q"
        )
    """

    def __init__(
        self,
        *,
        logger: LoggerProtocol,
        host: str,
        from_email: str,
        port: int = 587,
        user: str | None = None,
        password: str | None = None,
        use_tls: bool = True,
        timeout_seconds: float = 10.0,
        from_name: str = "UserService",
        token_ttl_minutes: int = 5,
    ) -> None:
        self._logger = logger
        self._host = host
        self._port = port
        self._user = user
        self._password = password
        self._use_tls = use_tls
        self._timeout = timeout_seconds
        self._from_email = from_email
        self._from_name = from_name
        self._token_ttl_minutes = token_ttl_minutes

    def _build_message(self, to_email: str, verification_url: str) -> EmailMessage:
        message = EmailMessage()
        message["Subject"] = VERIFICATION_SUBJECT
        message["From"] = f"{self._from_name} <{self._from_email}>"
        message["To"] = to_email

        text_body = (
            "Confirm your email address by opening the link below.\n\n"
            f"{verification_url}\n\n"
            f"The link expires in {self._token_ttl_minutes} minutes. "
            "If you did not create an account, ignore this message.\n"
        )
        html_body = (
            "<p>Confirm your email address by opening the link below.</p>"
            f'<p><a href="{verification_url}">Verify email</a></p>'
            f"<p>The link expires in {self._token_ttl_minutes} minutes. "
            "If you did not create an account, ignore this message.</p>"
        )
        message.set_content(text_body)
        message.add_alternative(html_body, subtype="html")
        return message

    def _deliver(self, message: EmailMessage) -> None:
        context = ssl.create_default_context()
        if self._use_tls:
            with smtplib.SMTP(self._host, self._port, timeout=self._timeout) as server:
                server.starttls(context=context)
                self._login(server)
                server.send_message(message)
        else:
            with smtplib.SMTP_SSL(
                self._host, self._port, context=context, timeout=self._timeout
            ) as server:
                self._login(server)
                server.send_message(message)

    def _login(self, server: smtplib.SMTP) -> None:
        if self._user and self._password:
            server.login(self._user, self._password)

    async def send_verification_email(
        self,
        to_email: str,
        verification_url: str,
    ) -> Result[None, DomainError]:
        """Send the verification link.

        Returns:
            Success(None) once the server accepted the message,
            Failure(EmailDeliveryError) on any SMTP, TLS or network failure.
        """
        message = self._build_message(to_email, verification_url)
        recipient = redact_email(to_email)

        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPRecipientsRefused, smtplib.SMTPSenderRefused) as e:
            return self._failure(
                InfrastructureErrorCode.EMAIL_REJECTED, e, recipient
            )
        except (smtplib.SMTPConnectError, smtplib.SMTPServerDisconnected) as e:
            return self._failure(
                InfrastructureErrorCode.EMAIL_CONNECTION_FAILED, e, recipient
            )
        except TimeoutError as e:
            return self._failure(InfrastructureErrorCode.EMAIL_TIMEOUT, e, recipient)
        except (smtplib.SMTPException, ssl.SSLError, OSError) as e:
            return self._failure(
                InfrastructureErrorCode.EMAIL_CONNECTION_FAILED, e, recipient
            )

        self._logger.info("email_sent", to=recipient, kind="verification")
        return Success(value=None)

    def _failure(
        self,
        infrastructure_code: InfrastructureErrorCode,
        error: Exception,
        recipient: str,
    ) -> Failure[EmailDeliveryError]:
        self._logger.error(
            "email_send_failed",
            error=error,
            to=recipient,
            host=self._host,
            port=self._port,
            infrastructure_code=infrastructure_code.value,
        )
        return Failure(
            error=EmailDeliveryError(
                code=ErrorCode.EMAIL_DELIVERY_FAILED,
                message="Verification email could not be delivered",
                infrastructure_code=infrastructure_code,
                service_name="smtp",
                details={"host": self._host, "error_type": type(error).__name__},
            )
        )
