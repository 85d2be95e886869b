"""Error taxonomy for the account and token lifecycle.

Error Types:
- ConflictError: username or email already taken
- AuthenticationError: bad credentials or unusable refresh token
  (never says whether the username exists)
- AuthorizationError: valid credentials, account not verified yet
- NotFoundError: token lookup miss, user-by-id miss
- ExpiredError: verification token past its validity window
- InternalError: store, delivery or signing failure downstream
- ValidationError: malformed input rejected before reaching the core

Usage:
    from userservice.core.errors import ConflictError
    from userservice.core.enums import ErrorCode
    from userservice.core.result import Failure

    return Failure(
        error=ConflictError(
            code=ErrorCode.USERNAME_ALREADY_EXISTS,
            message="Username is already taken",
            resource_type="User",
            conflicting_field="username",
        )
    )
"""

from dataclasses import dataclass

from userservice.core.enums import ErrorCode
from userservice.core.errors.domain_error import DomainError

GENERIC_DENIAL_MESSAGE = "Request denied"
GENERIC_RETRY_MESSAGE = "Something went wrong. Please try again later."


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate username/email).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that collided (username, email).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure.

    The message is identical for unknown usernames and wrong passwords.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthorizationError(DomainError):
    """Authenticated but not allowed (unverified account).

    Attributes:
        required_permission: Permission or state that was required.
    """

    required_permission: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (User, VerificationToken).
        resource_id: Identifier used for the lookup (never a full token value).
    """

    resource_type: str
    resource_id: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class ExpiredError(DomainError):
    """Time-bounded credential used after its validity window.

    Attributes:
        resource_type: Type of expired resource.
    """

    resource_type: str


@dataclass(frozen=True, slots=True, kw_only=True)
class InternalError(DomainError):
    """Downstream failure (store, email delivery, signing).

    ``message`` is always the generic retry message; the cause lives in
    ``details`` and in the logs only.
    """

    pass


def internal_error(code: ErrorCode, cause: object | None = None) -> InternalError:
    """Build an InternalError with the generic retry message.

    Args:
        code: STORE_UNAVAILABLE or EMAIL_DELIVERY_FAILED.
        cause: Underlying exception or infrastructure error. Only its type
            is kept in details; its text may carry bound query parameters.

    Returns:
        InternalError safe to hand back to callers.
    """
    details = None
    if cause is not None:
        details = {"cause_type": type(cause).__name__}
    return InternalError(code=code, message=GENERIC_RETRY_MESSAGE, details=details)


def user_message(error: DomainError) -> str:
    """Map an error to the message shown to end users.

    Conflicts, denials and token problems keep their own short message;
    internal failures collapse to the generic retry message so that
    store or mail server detail never leaks.

    Args:
        error: Any DomainError.

    Returns:
        User-facing message.
    """
    if isinstance(error, InternalError):
        return GENERIC_RETRY_MESSAGE
    if isinstance(error, (AuthenticationError, AuthorizationError, ConflictError)):
        return error.message or GENERIC_DENIAL_MESSAGE
    return error.message
