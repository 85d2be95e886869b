"""Domain entities."""

from userservice.domain.entities.user import User
from userservice.domain.entities.verification_token import VerificationToken

__all__ = ["User", "VerificationToken"]
