"""Application services shared across handlers."""

from userservice.application.services.session_issuer import SessionIssuer, TokenPair
from userservice.application.services.verification_token_manager import (
    VerificationTokenManager,
)

__all__ = ["SessionIssuer", "TokenPair", "VerificationTokenManager"]
