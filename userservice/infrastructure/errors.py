"""Infrastructure layer error types.

Failures of external systems (database, refresh token store, mail server).

Architecture:
- Adapters catch library exceptions and return these as Failure values
- Infrastructure errors inherit from DomainError (not Exception)
- InfrastructureErrorCode tracks the low-level cause
- Application code maps them to InternalError before they reach callers
"""

from dataclasses import dataclass
from enum import Enum

from userservice.core.errors import DomainError


class InfrastructureErrorCode(Enum):
    """Infrastructure-specific error codes (internal tracking only)."""

    # Database errors
    DATABASE_CONNECTION_FAILED = "database_connection_failed"
    DATABASE_TIMEOUT = "database_timeout"
    DATABASE_CONSTRAINT_VIOLATION = "database_constraint_violation"
    DATABASE_ERROR = "database_error"

    # Refresh token store errors
    CACHE_CONNECTION_ERROR = "cache_connection_error"
    CACHE_TIMEOUT = "cache_timeout"
    CACHE_GET_ERROR = "cache_get_error"
    CACHE_SET_ERROR = "cache_set_error"
    CACHE_DELETE_ERROR = "cache_delete_error"
    CACHE_DATA_CORRUPT = "cache_data_corrupt"

    # Mail errors
    EMAIL_CONNECTION_FAILED = "email_connection_failed"
    EMAIL_TIMEOUT = "email_timeout"
    EMAIL_REJECTED = "email_rejected"
    EMAIL_NOT_CONFIGURED = "email_not_configured"


@dataclass(frozen=True, slots=True, kw_only=True)
class InfrastructureError(DomainError):
    """Base infrastructure error.

    Attributes:
        code: Domain ErrorCode.
        message: Human-readable message (internal, never shown to users).
        infrastructure_code: Original infrastructure error code.
        details: Additional context.
    """

    infrastructure_code: InfrastructureErrorCode | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class DatabaseError(InfrastructureError):
    """Database failure wrapping a SQLAlchemy exception."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class CacheError(InfrastructureError):
    """Refresh token store failure wrapping a Redis exception.

    Details carry the operation and the hashed key, never the raw token.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class EmailDeliveryError(InfrastructureError):
    """Outbound email failure.

    Attributes:
        service_name: Name of the mail backend (smtp, stub).
    """

    service_name: str = "smtp"
