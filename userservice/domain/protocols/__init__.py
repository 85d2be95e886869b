"""Domain protocols (ports).

Usage:
    from userservice.domain.protocols import UserRepository, RefreshTokenStore
"""

from userservice.domain.protocols.logger_protocol import LoggerProtocol
from userservice.domain.protocols.notification_protocol import NotificationProtocol
from userservice.domain.protocols.password_hashing_protocol import (
    PasswordHashingProtocol,
)
from userservice.domain.protocols.refresh_token_store import (
    RefreshTokenRecord,
    RefreshTokenStore,
)
from userservice.domain.protocols.token_generator_protocol import (
    TokenGeneratorProtocol,
)
from userservice.domain.protocols.token_signing_protocol import TokenSigningProtocol
from userservice.domain.protocols.user_repository import UserRepository
from userservice.domain.protocols.verification_token_repository import (
    VerificationTokenRepository,
)

__all__ = [
    "LoggerProtocol",
    "NotificationProtocol",
    "PasswordHashingProtocol",
    "RefreshTokenRecord",
    "RefreshTokenStore",
    "TokenGeneratorProtocol",
    "TokenSigningProtocol",
    "UserRepository",
    "VerificationTokenRepository",
]
