"""Database models.

Importing this package registers every table on BaseModel.metadata.
"""

from userservice.infrastructure.persistence.models.user import UserModel
from userservice.infrastructure.persistence.models.verification_token import (
    VerificationTokenModel,
)

__all__ = ["UserModel", "VerificationTokenModel"]
