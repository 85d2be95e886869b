"""Email verification token entity.

A short-lived capability proving ownership of an email address.

Token Lifecycle:
    1. Issued on registration or resend (replaces any prior token of the user)
    2. Delivered by email as part of a verification link
    3. Consumed once (deleted) on successful verification
    4. Treated as invalid once expires_at has passed
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class VerificationToken:
    """Verification token data.

    Attributes:
        id: Token row identifier.
        user_id: Owning user.
        token: Opaque alphanumeric token string.
        expires_at: Expiry timestamp (UTC).
        created_at: Issuance timestamp (UTC).
    """

    id: UUID
    user_id: UUID
    token: str
    expires_at: datetime
    created_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        """Check whether the token is past its validity window.

        A token whose expiry equals the current instant is expired.

        Args:
            now: Reference time (defaults to current UTC time).
        """
        return self.expires_at <= (now or datetime.now(UTC))

    def issued_within(self, seconds: int, now: datetime | None = None) -> bool:
        """Check whether the token was issued less than ``seconds`` ago."""
        reference = now or datetime.now(UTC)
        return (reference - self.created_at).total_seconds() < seconds

    @property
    def preview(self) -> str:
        """First two characters, for logs."""
        return f"{self.token[:2]}***"
