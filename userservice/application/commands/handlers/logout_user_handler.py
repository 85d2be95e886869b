"""LogoutUser command handler.

Revokes the refresh token. Logging out with an unknown token is not an
error; the access token simply runs out on its own.
"""

from userservice.application.commands.auth_commands import LogoutUser
from userservice.application.services.session_issuer import SessionIssuer
from userservice.core.errors import DomainError
from userservice.core.result import Failure, Result, Success


class LogoutUserHandler:
    """Handler for logout command."""

    def __init__(self, session_issuer: SessionIssuer) -> None:
        self._session_issuer = session_issuer

    async def handle(self, cmd: LogoutUser) -> Result[None, DomainError]:
        revoked = await self._session_issuer.revoke(cmd.refresh_token)
        if isinstance(revoked, Failure):
            return Failure(error=revoked.error)
        return Success(value=None)
