"""User queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class GetUser:
    """Look up a user by ID.

    Attributes:
        user_id: User identifier.
    """

    user_id: UUID
