"""Token signing protocol for stateless access tokens.

Architecture:
    - Domain defines protocol (port)
    - Infrastructure implements adapter (JWTService)

Token Strategy:
    - Access tokens: short-lived signed JWT, validated without a store lookup
    - Refresh tokens: opaque, kept in RefreshTokenStore (handled separately)
"""

from typing import Any, Protocol
from uuid import UUID

from userservice.core.errors import DomainError
from userservice.core.result import Result


class TokenSigningProtocol(Protocol):
    """Access token signing and verification interface."""

    @property
    def expires_in_seconds(self) -> int:
        """Lifetime of issued access tokens."""
        ...

    def sign(self, username: str, user_id: UUID, **claims: Any) -> str:
        """Sign an access token asserting ``username``.

        Args:
            username: Subject of the token (``sub`` claim).
            user_id: User ID (``uid`` claim).
            **claims: Extra claims merged into the payload.

        Returns:
            Encoded access token.
        """
        ...

    def verify(self, token: str) -> Result[dict[str, Any], DomainError]:
        """Verify signature and expiry and return the claims.

        Returns:
            Success(claims) if valid, Failure(AuthenticationError) otherwise.
        """
        ...
