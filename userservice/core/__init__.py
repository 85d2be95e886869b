"""Core shared kernel.

Result types, error values and settings used by every layer.
The core module has NO dependencies on other application layers.
"""

from userservice.core.enums import ErrorCode
from userservice.core.errors import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    DomainError,
    ExpiredError,
    InternalError,
    NotFoundError,
    ValidationError,
)
from userservice.core.result import Failure, Result, Success

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    "DomainError",
    "ErrorCode",
    "ExpiredError",
    "Failure",
    "InternalError",
    "NotFoundError",
    "Result",
    "Success",
    "ValidationError",
]
