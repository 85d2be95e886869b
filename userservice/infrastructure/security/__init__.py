"""Security adapters: password hashing, token generation and signing."""

from userservice.infrastructure.security.bcrypt_password_service import (
    BcryptPasswordService,
)
from userservice.infrastructure.security.jwt_service import JWTService
from userservice.infrastructure.security.token_generator import TokenGenerator

__all__ = ["BcryptPasswordService", "JWTService", "TokenGenerator"]
