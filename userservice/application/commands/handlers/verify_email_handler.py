"""VerifyEmail command handler.

Thin wrapper over VerificationTokenManager.consume: the token is the only
input, the enabled user the only output.
"""

from userservice.application.commands.auth_commands import VerifyEmail
from userservice.application.services.verification_token_manager import (
    VerificationTokenManager,
)
from userservice.core.errors import DomainError
from userservice.core.result import Result
from userservice.domain.entities.user import User


class VerifyEmailHandler:
    """Handler for email verification command."""

    def __init__(self, token_manager: VerificationTokenManager) -> None:
        self._token_manager = token_manager

    async def handle(self, cmd: VerifyEmail) -> Result[User, DomainError]:
        """Consume the token.

        Returns:
            Success(User) now enabled, or Failure(NotFoundError | ExpiredError
            | InternalError).
        """
        return await self._token_manager.consume(cmd.token)
