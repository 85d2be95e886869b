"""Commands (write operations)."""

from userservice.application.commands.auth_commands import (
    LoginUser,
    LogoutUser,
    RefreshAccessToken,
    RegisterUser,
    ResendVerification,
    VerifyEmail,
)

__all__ = [
    "LoginUser",
    "LogoutUser",
    "RefreshAccessToken",
    "RegisterUser",
    "ResendVerification",
    "VerifyEmail",
]
