"""RefreshTokenStore protocol (port).

Keyed store mapping refresh token -> owning user. A refresh token is valid
only while it remains in the store.

Session policy: single active session per username. ``put`` replaces the
previous token of the same username atomically.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol
from uuid import UUID

from userservice.core.errors import DomainError
from userservice.core.result import Result


@dataclass(frozen=True, slots=True, kw_only=True)
class RefreshTokenRecord:
    """Stored refresh token data (the raw token is not part of it).

    Attributes:
        username: Owning username.
        user_id: Owning user ID.
        issued_at: Issuance timestamp (UTC).
        expires_at: Expiry timestamp (UTC).
    """

    username: str
    user_id: UUID
    issued_at: datetime
    expires_at: datetime


class RefreshTokenStore(Protocol):
    """Protocol for refresh token storage."""

    async def put(
        self,
        token: str,
        username: str,
        user_id: UUID,
        expires_in_seconds: int,
    ) -> Result[None, DomainError]:
        """Store a refresh token, replacing the username's previous one.

        Args:
            token: Raw refresh token (implementations store a digest).
            username: Owning username.
            user_id: Owning user ID.
            expires_in_seconds: Lifetime of the token.
        """
        ...

    async def get(self, token: str) -> Result[RefreshTokenRecord | None, DomainError]:
        """Look up a refresh token.

        Returns:
            Success(record) if present, Success(None) if absent or expired.
        """
        ...

    async def delete(self, token: str) -> Result[bool, DomainError]:
        """Revoke a refresh token.

        Returns:
            Success(True) if it existed, Success(False) otherwise.
        """
        ...
