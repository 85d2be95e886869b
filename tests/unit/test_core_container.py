"""Unit tests for container adapter selection and handler wiring."""

from unittest.mock import Mock

import pytest

from userservice.application.commands.handlers import (
    LoginUserHandler,
    RegisterUserHandler,
)
from userservice.core.config import get_settings
from userservice.core.container import (
    get_email_service,
    get_logger,
    get_login_user_handler,
    get_password_service,
    get_register_user_handler,
    get_token_service,
)
from userservice.infrastructure.email import SMTPEmailService, StubEmailService

CACHED = (get_settings, get_logger, get_email_service, get_password_service, get_token_service)


@pytest.fixture(autouse=True)
def clear_container_caches():
    for factory in CACHED:
        factory.cache_clear()
    yield
    for factory in CACHED:
        factory.cache_clear()


@pytest.mark.unit
class TestEmailServiceSelection:
    """Test stub vs SMTP selection."""

    def test_stub_without_smtp_host(self, monkeypatch):
        monkeypatch.delenv("SMTP_HOST", raising=False)

        assert isinstance(get_email_service(), StubEmailService)

    def test_smtp_when_configured(self, monkeypatch):
        monkeypatch.setenv("SMTP_HOST", "smtp.example.com")
        monkeypatch.setenv("EMAIL_FROM", "no-reply@example.com")

        assert isinstance(get_email_service(), SMTPEmailService)

    def test_singleton(self):
        assert get_email_service() is get_email_service()


@pytest.mark.unit
class TestSecurityServices:
    """Test settings flow into security adapters."""

    def test_bcrypt_rounds_from_settings(self, monkeypatch):
        monkeypatch.setenv("BCRYPT_ROUNDS", "4")

        assert get_password_service().cost_factor == 4

    def test_access_token_lifetime_from_settings(self, monkeypatch):
        monkeypatch.setenv("ACCESS_TOKEN_EXPIRE_MINUTES", "5")

        assert get_token_service().expires_in_seconds == 300


@pytest.mark.unit
class TestHandlerFactories:
    """Test request-scoped handler wiring."""

    def test_register_handler_shares_session(self):
        session = Mock()

        handler = get_register_user_handler(session)

        assert isinstance(handler, RegisterUserHandler)
        assert handler._user_repo.session is session
        assert handler._token_manager._token_repo.session is session

    def test_login_handler(self):
        handler = get_login_user_handler(Mock())

        assert isinstance(handler, LoginUserHandler)
