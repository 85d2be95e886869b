"""Command handlers."""

from userservice.application.commands.handlers.login_user_handler import (
    LoginUserHandler,
)
from userservice.application.commands.handlers.logout_user_handler import (
    LogoutUserHandler,
)
from userservice.application.commands.handlers.refresh_access_token_handler import (
    RefreshAccessTokenHandler,
)
from userservice.application.commands.handlers.register_user_handler import (
    RegisterUserHandler,
)
from userservice.application.commands.handlers.resend_verification_handler import (
    ResendVerificationHandler,
)
from userservice.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "LoginUserHandler",
    "LogoutUserHandler",
    "RefreshAccessTokenHandler",
    "RegisterUserHandler",
    "ResendVerificationHandler",
    "VerifyEmailHandler",
]
