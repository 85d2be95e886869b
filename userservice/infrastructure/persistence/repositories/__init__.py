"""Repository implementations (adapters for the domain ports)."""

from userservice.infrastructure.persistence.repositories.user_repository import (
    UserRepository,
)
from userservice.infrastructure.persistence.repositories.verification_token_repository import (
    VerificationTokenRepository,
)

__all__ = ["UserRepository", "VerificationTokenRepository"]
