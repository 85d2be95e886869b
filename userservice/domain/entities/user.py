"""User domain entity.

Pure business logic, no framework dependencies.

Lifecycle:
    - Created disabled at registration
    - Enabled exactly once, by consuming a verification token
    - Never deleted by this package
"""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID


@dataclass
class User:
    """User account.

    Business Rules:
        - username is unique and compared case-sensitively
        - email is unique and stored lowercase
        - password_hash always holds a bcrypt digest, never plaintext
        - login requires enabled=True

    Attributes:
        id: Unique user identifier (UUIDv7)
        username: Unique, case-sensitive login name
        email: Unique email address (lowercase)
        password_hash: Bcrypt hashed password
        enabled: False until the email address is verified
        created_at: Timestamp when user was created
        updated_at: Timestamp when user was last updated

    Example:
        >>> user = User(
        ...     id=uuid7(),
        ...     username="alice",
        ...     email="a@x.com",
        ...     password_hash="$2b$12$...",
        ...     enabled=False,
        ...     created_at=datetime.now(UTC),
        ...     updated_at=datetime.now(UTC),
        ... )
        >>> user.enable()
        True
        >>> user.enable()
        False
    """

    id: UUID
    username: str
    email: str
    password_hash: str
    enabled: bool
    created_at: datetime
    updated_at: datetime

    def enable(self) -> bool:
        """Flip the account to enabled.

        Returns:
            bool: True if the flag changed, False if already enabled.
        """
        if self.enabled:
            return False
        self.enabled = True
        self.updated_at = datetime.now(UTC)
        return True

    def can_login(self) -> bool:
        """Check if the account may receive tokens."""
        return self.enabled
