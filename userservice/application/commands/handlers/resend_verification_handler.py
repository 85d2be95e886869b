"""ResendVerification command handler.

Flow:
1. Find user by email
2. Unknown or already verified -> Success(None), nothing sent
3. Otherwise resend (subject to the minimum resend interval)

The outcome for unknown emails equals the outcome for known ones so the
endpoint cannot be used to discover which addresses are registered.
"""

from userservice.application.commands.auth_commands import ResendVerification
from userservice.application.services.verification_token_manager import (
    VerificationTokenManager,
)
from userservice.core.enums import ErrorCode
from userservice.core.errors import DomainError, internal_error
from userservice.core.result import Failure, Result, Success
from userservice.domain.protocols import LoggerProtocol, UserRepository


class ResendVerificationHandler:
    """Handler for resending the verification email."""

    def __init__(
        self,
        user_repo: UserRepository,
        token_manager: VerificationTokenManager,
        logger: LoggerProtocol,
    ) -> None:
        self._user_repo = user_repo
        self._token_manager = token_manager
        self._logger = logger

    async def handle(self, cmd: ResendVerification) -> Result[None, DomainError]:
        """Handle resend command.

        Returns:
            Success(None) unless the store or the mail server fails.
        """
        try:
            user = await self._user_repo.find_by_email(cmd.email)
        except Exception as e:
            self._logger.error("store_error", error=e, operation="find_user")
            return Failure(error=internal_error(ErrorCode.STORE_UNAVAILABLE, e))

        if user is None or user.enabled:
            self._logger.debug(
                "verification_resend_skipped",
                reason="unknown" if user is None else "already_verified",
            )
            return Success(value=None)

        resent = await self._token_manager.resend(user)
        if isinstance(resent, Failure):
            return Failure(error=resent.error)
        return Success(value=None)
