"""Domain-level error codes (machine-readable).

Codes follow ENTITY_ACTION_REASON naming and travel inside DomainError
values returned in Failure results.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes for the account lifecycle."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Conflict errors
    USERNAME_ALREADY_EXISTS = "username_already_exists"
    EMAIL_ALREADY_EXISTS = "email_already_exists"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"

    # Authorization errors
    EMAIL_NOT_VERIFIED = "email_not_verified"

    # Resource errors
    USER_NOT_FOUND = "user_not_found"
    TOKEN_NOT_FOUND = "token_not_found"

    # Expiry errors
    TOKEN_EXPIRED = "token_expired"

    # Internal errors (downstream failures)
    STORE_UNAVAILABLE = "store_unavailable"
    EMAIL_DELIVERY_FAILED = "email_delivery_failed"
