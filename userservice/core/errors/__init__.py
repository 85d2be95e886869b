"""Core errors package.

Usage:
    from userservice.core.errors import DomainError, ConflictError, NotFoundError
"""

from userservice.core.errors.common_errors import (
    GENERIC_DENIAL_MESSAGE,
    GENERIC_RETRY_MESSAGE,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    ExpiredError,
    InternalError,
    NotFoundError,
    ValidationError,
    internal_error,
    user_message,
)
from userservice.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ExpiredError",
    "InternalError",
    "GENERIC_DENIAL_MESSAGE",
    "GENERIC_RETRY_MESSAGE",
    "internal_error",
    "user_message",
]
