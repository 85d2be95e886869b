"""VerificationTokenRepository protocol (port).

Following hexagonal architecture:
- Domain defines what it needs (protocol/port)
- Infrastructure provides implementation (adapter)
- Domain has no knowledge of how tokens are stored
"""

from datetime import datetime
from typing import Protocol
from uuid import UUID

from userservice.domain.entities.verification_token import VerificationToken


class VerificationTokenRepository(Protocol):
    """Protocol for verification token persistence.

    Token Lifecycle:
        1. replace_for_user on issue/resend (prior tokens of the user removed)
        2. find_by_token on verification
        3. consume on verification (row deleted, user enabled)
        4. delete_expired as optional cleanup

    At most one row exists per user. ``replace_for_user`` is the atomic
    unit (delete + insert in one transaction) that enforces it.
    """

    async def replace_for_user(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> VerificationToken | None:
        """Atomically delete the user's tokens and insert a new one.

        Args:
            user_id: Owning user.
            token: Generated token string.
            expires_at: Expiry timestamp (UTC).

        Returns:
            The persisted token, or None if the token string is already
            held by another user (nothing changed).
        """
        ...

    async def save(
        self,
        user_id: UUID,
        token: str,
        expires_at: datetime,
    ) -> VerificationToken:
        """Insert a token row.

        Fails if the user already has a token; use replace_for_user.
        """
        ...

    async def delete_by_user_id(self, user_id: UUID) -> int:
        """Delete every token of the user.

        Returns:
            Number of rows deleted.
        """
        ...

    async def find_by_token(self, token: str) -> VerificationToken | None:
        """Find a token by its string.

        Does NOT check expiration; the caller compares expires_at.
        """
        ...

    async def find_by_user_id(self, user_id: UUID) -> VerificationToken | None:
        """Find the user's current token, if any."""
        ...

    async def delete(self, token_id: UUID) -> bool:
        """Delete one token row.

        Returns:
            True if the row existed, False if it was already gone.
        """
        ...

    async def consume(self, token_id: UUID, user_id: UUID) -> bool:
        """Delete the token and enable its user in one transaction.

        Returns:
            True only for the call that removed the row; the user is
            enabled in that case alone.
        """
        ...

    async def delete_expired(self, now: datetime | None = None) -> int:
        """Delete tokens whose expiry has passed.

        Returns:
            Number of rows deleted.
        """
        ...
