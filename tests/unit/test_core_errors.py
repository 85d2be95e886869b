"""Unit tests for the error taxonomy and user-facing message mapping."""

import pytest

from userservice.core.enums import ErrorCode
from userservice.core.errors import (
    GENERIC_DENIAL_MESSAGE,
    GENERIC_RETRY_MESSAGE,
    AuthenticationError,
    ConflictError,
    DomainError,
    ExpiredError,
    InternalError,
    NotFoundError,
    internal_error,
    user_message,
)


@pytest.mark.unit
class TestDomainError:
    """Test base error behavior."""

    def test_str_includes_code_and_message(self):
        error = DomainError(code=ErrorCode.TOKEN_EXPIRED, message="Token expired")

        assert str(error) == "token_expired: Token expired"

    def test_errors_are_values_not_exceptions(self):
        error = ConflictError(
            code=ErrorCode.USERNAME_ALREADY_EXISTS,
            message="Username is already taken",
            resource_type="User",
            conflicting_field="username",
        )

        assert not isinstance(error, Exception)
        assert isinstance(error, DomainError)

    def test_errors_are_immutable(self):
        error = NotFoundError(
            code=ErrorCode.USER_NOT_FOUND, message="User not found", resource_type="User"
        )

        with pytest.raises(AttributeError):
            error.message = "changed"  # type: ignore[misc]


@pytest.mark.unit
class TestInternalError:
    """Test internal_error builder."""

    def test_message_is_generic(self):
        error = internal_error(ErrorCode.STORE_UNAVAILABLE, ConnectionError("db down"))

        assert isinstance(error, InternalError)
        assert error.message == GENERIC_RETRY_MESSAGE
        assert "db down" not in error.message

    def test_only_cause_type_is_kept_in_details(self):
        error = internal_error(ErrorCode.STORE_UNAVAILABLE, ConnectionError("db down"))

        assert error.details == {"cause_type": "ConnectionError"}

    def test_cause_text_with_bound_parameters_is_dropped(self):
        cause = RuntimeError(
            "UNIQUE constraint failed: verification_tokens.token "
            "[parameters: ('aZ3k9Q',)]"
        )

        error = internal_error(ErrorCode.STORE_UNAVAILABLE, cause)

        assert "aZ3k9Q" not in repr(error)

    def test_no_cause_means_no_details(self):
        error = internal_error(ErrorCode.EMAIL_DELIVERY_FAILED)

        assert error.details is None


@pytest.mark.unit
class TestUserMessage:
    """Test mapping errors to end-user messages."""

    def test_internal_error_maps_to_retry_message(self):
        error = InternalError(
            code=ErrorCode.EMAIL_DELIVERY_FAILED,
            message="smtp.example.com refused",
            details={"host": "smtp.example.com"},
        )

        assert user_message(error) == GENERIC_RETRY_MESSAGE

    def test_authentication_error_keeps_its_message(self):
        error = AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS, message="Invalid username or password"
        )

        assert user_message(error) == "Invalid username or password"

    def test_empty_denial_falls_back_to_generic(self):
        error = AuthenticationError(code=ErrorCode.TOKEN_INVALID, message="")

        assert user_message(error) == GENERIC_DENIAL_MESSAGE

    def test_expired_error_keeps_its_message(self):
        error = ExpiredError(
            code=ErrorCode.TOKEN_EXPIRED,
            message="Verification token has expired",
            resource_type="VerificationToken",
        )

        assert user_message(error) == "Verification token has expired"
