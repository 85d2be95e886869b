"""Verification token lifecycle: issue, resend, consume.

State per user:
    NoToken -> Active(token, expiry) -> Consumed (user enabled, row deleted)
                                     -> Superseded (replaced by a newer token)

Invariants:
    - At most one live token per user (``replace_for_user`` is atomic)
    - Issuance is all-or-nothing: if the email cannot be delivered the
      freshly stored token is deleted again
    - ``consume`` is the only path that enables a user; the token delete
      and the enable commit together, so a token succeeds at most once

Architecture:
- Application service shared by several handlers
- Depends on domain protocols only; adapters are injected
"""

from datetime import UTC, datetime, timedelta

from userservice.core.enums import ErrorCode
from userservice.core.errors import (
    DomainError,
    ExpiredError,
    NotFoundError,
    internal_error,
)
from userservice.core.result import Failure, Result, Success
from userservice.domain.entities.user import User
from userservice.domain.entities.verification_token import VerificationToken
from userservice.domain.protocols import (
    LoggerProtocol,
    NotificationProtocol,
    TokenGeneratorProtocol,
    UserRepository,
    VerificationTokenRepository,
)

MAX_GENERATION_ATTEMPTS = 3


class VerificationTokenManager:
    """Issues, resends and consumes email verification tokens.

    Usage:
        manager = VerificationTokenManager(
            token_repo=token_repo,
            user_repo=user_repo,
            token_generator=TokenGenerator(),
            notification_service=email_service,
            logger=logger,
        )
        result = await manager.issue(user)
    """

    def __init__(
        self,
        *,
        token_repo: VerificationTokenRepository,
        user_repo: UserRepository,
        token_generator: TokenGeneratorProtocol,
        notification_service: NotificationProtocol,
        logger: LoggerProtocol,
        token_length: int = 6,
        ttl_minutes: int = 5,
        resend_interval_seconds: int = 60,
        verification_url_base: str = "http://localhost:3000",
    ) -> None:
        self._token_repo = token_repo
        self._user_repo = user_repo
        self._token_generator = token_generator
        self._notification_service = notification_service
        self._logger = logger
        self._token_length = token_length
        self._ttl = timedelta(minutes=ttl_minutes)
        self._resend_interval_seconds = resend_interval_seconds
        self._verification_url_base = verification_url_base.rstrip("/")

    def verification_url(self, token: str) -> str:
        """Link delivered by email."""
        return f"{self._verification_url_base}/verify?token={token}"

    async def issue(self, user: User) -> Result[VerificationToken, DomainError]:
        """Create a fresh token for the user and email it.

        Any previous token of the user stops working.

        A generated value already held by another user is regenerated, up to
        MAX_GENERATION_ATTEMPTS times.

        Returns:
            Success(token) once stored and delivered.
            Failure(InternalError) with STORE_UNAVAILABLE or
            EMAIL_DELIVERY_FAILED otherwise.
        """
        expires_at = datetime.now(UTC) + self._ttl

        token: VerificationToken | None = None
        for attempt in range(1, MAX_GENERATION_ATTEMPTS + 1):
            token_value = self._token_generator.generate(self._token_length)
            try:
                token = await self._token_repo.replace_for_user(
                    user.id, token_value, expires_at
                )
            except Exception as e:
                self._logger.error(
                    "store_error",
                    error=e,
                    operation="replace_verification_token",
                    user_id=str(user.id),
                )
                return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE, e))
            if token is not None:
                break
            self._logger.warning(
                "verification_token_collision", user_id=str(user.id), attempt=attempt
            )

        if token is None:
            return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE))

        sent = await self._notification_service.send_verification_email(
            user.email, self.verification_url(token.token)
        )
        if isinstance(sent, Failure):
            self._logger.warning(
                "verification_email_failed",
                user_id=str(user.id),
                error_code=sent.error.code.value,
            )
            await self._discard(token)
            return Failure(
                error=internal_error(ErrorCode.EMAIL_DELIVERY_FAILED, sent.error)
            )

        self._logger.info(
            "verification_token_issued",
            user_id=str(user.id),
            expires_at=token.expires_at.isoformat(),
            token_preview=token.preview,
        )
        return Success(value=token)

    async def resend(self, user: User) -> Result[VerificationToken, DomainError]:
        """Issue again, unless the live token is younger than the resend interval.

        A throttled resend sends nothing and returns the current token.
        """
        if self._resend_interval_seconds > 0:
            try:
                current = await self._token_repo.find_by_user_id(user.id)
            except Exception as e:
                self._logger.error(
                    "store_error",
                    error=e,
                    operation="find_verification_token",
                    user_id=str(user.id),
                )
                return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE, e))

            now = datetime.now(UTC)
            if (
                current is not None
                and not current.is_expired(now)
                and current.issued_within(self._resend_interval_seconds, now)
            ):
                self._logger.info(
                    "verification_resend_throttled",
                    user_id=str(user.id),
                    interval_seconds=self._resend_interval_seconds,
                )
                return Success(value=current)

        return await self.issue(user)

    async def consume(self, token: str) -> Result[User, DomainError]:
        """Verify a token: delete it and enable its user in one commit.

        Returns:
            Success(user) with the user now enabled.
            Failure(NotFoundError) if the token (or its user) is unknown.
            Failure(ExpiredError) if the token is past expiry; the row is
            deleted and the user stays disabled.
            Failure(InternalError) on store failure.
        """
        try:
            record = await self._token_repo.find_by_token(token)
            if record is None:
                self._logger.warning("verification_failed", reason="not_found")
                return Failure(error=_token_not_found())

            if record.is_expired():
                await self._token_repo.delete(record.id)
                self._logger.warning(
                    "verification_failed",
                    reason="expired",
                    user_id=str(record.user_id),
                )
                return Failure(
                    error=ExpiredError(
                        code=ErrorCode.TOKEN_EXPIRED,
                        message="Verification token has expired",
                        resource_type="VerificationToken",
                    )
                )

            user = await self._user_repo.find_by_id(record.user_id)
            if user is None:
                await self._token_repo.delete(record.id)
                self._logger.warning(
                    "verification_failed",
                    reason="user_missing",
                    user_id=str(record.user_id),
                )
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.USER_NOT_FOUND,
                        message="User not found",
                        resource_type="User",
                        resource_id=str(record.user_id),
                    )
                )

            consumed = await self._token_repo.consume(record.id, user.id)
            if not consumed:
                # Another request consumed or replaced the token first
                self._logger.warning(
                    "verification_failed",
                    reason="already_consumed",
                    user_id=str(record.user_id),
                )
                return Failure(error=_token_not_found())
            user.enable()
        except Exception as e:
            self._logger.error("store_error", error=e, operation="consume_token")
            return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE, e))

        self._logger.info("email_verified", user_id=str(user.id))
        return Success(value=user)

    async def _discard(self, token: VerificationToken) -> None:
        try:
            await self._token_repo.delete(token.id)
        except Exception as e:
            # Token expires on its own within the TTL
            self._logger.error(
                "store_error",
                error=e,
                operation="discard_verification_token",
                user_id=str(token.user_id),
            )


def _token_not_found() -> NotFoundError:
    return NotFoundError(
        code=ErrorCode.TOKEN_NOT_FOUND,
        message="Verification token not found",
        resource_type="VerificationToken",
    )
