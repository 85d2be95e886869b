"""Annotated types with centralized validation.

Define validation once, use everywhere. Commands declare their fields with
these types; the transport edge builds commands through
``pydantic.TypeAdapter`` so that malformed input is rejected before it
reaches a handler.

Usage:
    from pydantic import TypeAdapter
    from userservice.application.commands.auth_commands import RegisterUser

    command = TypeAdapter(RegisterUser).validate_python(payload)
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from userservice.domain.validators import (
    validate_email,
    validate_password,
    validate_refresh_token_format,
    validate_username,
    validate_verification_token,
)

Username = Annotated[
    str,
    Field(
        min_length=3,
        max_length=50,
        description="Case-sensitive login name",
        examples=["alice"],
    ),
    AfterValidator(validate_username),
]
"""Login name. Case-sensitive: "Alice" and "alice" are different users."""

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address",
        examples=["alice@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address, normalized to lowercase."""

Password = Annotated[
    str,
    Field(
        min_length=1,
        max_length=72,
        description="Plaintext password (hashed before storage)",
    ),
    AfterValidator(validate_password),
]

VerificationTokenStr = Annotated[
    str,
    Field(
        min_length=4,
        max_length=64,
        description="Email verification token (alphanumeric)",
        examples=["aZ3k9Q"],
    ),
    AfterValidator(validate_verification_token),
]

RefreshToken = Annotated[
    str,
    Field(
        min_length=16,
        max_length=256,
        description="Opaque refresh token (urlsafe base64)",
        pattern=r"^[A-Za-z0-9_-]+$",
    ),
    AfterValidator(validate_refresh_token_format),
]
