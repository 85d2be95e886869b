"""UserRepository protocol for user persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from userservice.domain.entities.user import User


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Username comparison is case-sensitive; email comparison is
    case-insensitive. Implementations raise their own exceptions on
    store failures; callers translate them into InternalError.
    """

    async def exists_by_username(self, username: str) -> bool:
        """Check if a user with this exact username exists."""
        ...

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with this email exists (case-insensitive)."""
        ...

    async def find_by_username(self, username: str) -> User | None:
        """Find user by exact username.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> User | None:
        """Find user by email (case-insensitive).

        Returns:
            User if found, None otherwise.
        """
        ...

    async def find_by_id(self, user_id: UUID) -> User | None:
        """Find user by ID.

        Returns:
            User if found, None otherwise.
        """
        ...

    async def save(self, user: User) -> None:
        """Create new user.

        Raises:
            IntegrityError: If username or email collides (race with a
                concurrent registration).
        """
        ...

    async def enable(self, user_id: UUID) -> None:
        """Set enabled=True for the user.

        Raises:
            NoResultFound: If user doesn't exist.
        """
        ...
