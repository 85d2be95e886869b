"""RefreshAccessToken command handler.

Rotates the presented refresh token: a new pair is returned and the old
refresh token stops working.
"""

from userservice.application.commands.auth_commands import RefreshAccessToken
from userservice.application.services.session_issuer import SessionIssuer, TokenPair
from userservice.core.errors import DomainError
from userservice.core.result import Result


class RefreshAccessTokenHandler:
    """Handler for refresh token exchange."""

    def __init__(self, session_issuer: SessionIssuer) -> None:
        self._session_issuer = session_issuer

    async def handle(self, cmd: RefreshAccessToken) -> Result[TokenPair, DomainError]:
        """Exchange the refresh token.

        Returns:
            Success(TokenPair), Failure(AuthenticationError) for an unknown or
            expired token, Failure(InternalError) if the store fails.
        """
        return await self._session_issuer.refresh(cmd.refresh_token)
