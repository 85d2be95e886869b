"""Centralized validation functions.

Validators are pure functions that raise ValueError on failure and return
the (possibly normalized) value. They are attached to the Annotated types
in ``userservice.domain.types``.
"""

import re

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_.-]{3,50}$")
EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")
ALPHANUMERIC_PATTERN = re.compile(r"^[A-Za-z0-9]+$")
URLSAFE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def validate_username(v: str) -> str:
    """Validate username format.

    Usernames are case-sensitive and are NOT normalized.

    Example:
        >>> validate_username("alice")
        'alice'
        >>> validate_username("a b")
        ValueError: Invalid username format
    """
    if not USERNAME_PATTERN.match(v):
        raise ValueError(
            "Invalid username format: 3-50 characters of letters, digits, '_', '.', '-'"
        )
    return v


def validate_email(v: str) -> str:
    """Validate email format and normalize to lowercase.

    Example:
        >>> validate_email("User@Example.COM")
        'user@example.com'
    """
    if not EMAIL_PATTERN.match(v):
        raise ValueError("Invalid email format")
    return v.lower()


def validate_password(v: str) -> str:
    """Validate password length.

    No composition rules are enforced; the only hard limit is bcrypt's
    72-byte input size.
    """
    if not v:
        raise ValueError("Password cannot be empty")
    if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return v


def validate_verification_token(v: str) -> str:
    """Validate verification token format (alphanumeric)."""
    if not v:
        raise ValueError("Token cannot be empty")
    if not ALPHANUMERIC_PATTERN.match(v):
        raise ValueError("Token must be alphanumeric")
    return v


def validate_refresh_token_format(v: str) -> str:
    """Validate refresh token format (urlsafe base64)."""
    if not v:
        raise ValueError("Refresh token cannot be empty")
    if not URLSAFE_PATTERN.match(v):
        raise ValueError("Invalid refresh token format")
    return v
