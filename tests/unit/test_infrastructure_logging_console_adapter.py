"""Unit tests for ConsoleAdapter and the redaction processor.

Architecture:
- structlog is patched; no real output
- redact_sensitive is tested directly as a plain processor function
"""

from unittest.mock import MagicMock, patch

import pytest

from userservice.infrastructure.logging.console_adapter import (
    REDACTED,
    ConsoleAdapter,
    redact_sensitive,
)

STRUCTLOG = "userservice.infrastructure.logging.console_adapter.structlog"


@pytest.mark.unit
class TestConsoleAdapterLogging:
    """Test ConsoleAdapter logging methods."""

    def test_info_forwards_message_and_context(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.info("user_registered", user_id="123", username="alice")

            mock_logger.info.assert_called_once_with(
                "user_registered", user_id="123", username="alice"
            )

    def test_warning_and_debug_forward(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.debug("verification_resend_skipped", reason="unknown")
            adapter.warning("verification_failed", reason="expired")

            mock_logger.debug.assert_called_once_with(
                "verification_resend_skipped", reason="unknown"
            )
            mock_logger.warning.assert_called_once_with(
                "verification_failed", reason="expired"
            )

    def test_error_adds_exception_details(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            adapter.error("store_error", error=TimeoutError("slow"), operation="get")

            mock_logger.error.assert_called_once_with(
                "store_error",
                operation="get",
                error_type="TimeoutError",
                error_message="slow",
            )

    def test_bind_returns_new_adapter(self):
        with patch(STRUCTLOG) as mock_structlog:
            mock_logger = MagicMock()
            bound_logger = MagicMock()
            mock_logger.bind.return_value = bound_logger
            mock_structlog.get_logger.return_value = mock_logger

            adapter = ConsoleAdapter()
            bound = adapter.bind(app="UserService")
            bound.info("login_succeeded")

            assert bound is not adapter
            mock_logger.bind.assert_called_once_with(app="UserService")
            bound_logger.info.assert_called_once_with("login_succeeded")
            mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestConsoleAdapterConfiguration:
    """Test renderer and level selection."""

    def test_json_renderer_when_requested(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(use_json=True)

            mock_structlog.processors.JSONRenderer.assert_called_once()
            mock_structlog.dev.ConsoleRenderer.assert_not_called()

    def test_console_renderer_by_default(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter()

            mock_structlog.dev.ConsoleRenderer.assert_called_once_with(colors=True)

    def test_level_name_is_applied(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="warning")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(30)

    def test_unknown_level_falls_back_to_info(self):
        with patch(STRUCTLOG) as mock_structlog:
            ConsoleAdapter(level="chatty")

            mock_structlog.make_filtering_bound_logger.assert_called_once_with(20)


@pytest.mark.unit
class TestRedactSensitive:
    """Test the redaction processor."""

    def test_masks_sensitive_keys(self):
        event = {
            "event": "login",
            "password": "pw1",
            "refresh_token": "abc",
            "token": "aZ3k9Q",
            "username": "alice",
        }

        result = redact_sensitive(None, "info", event)

        assert result["password"] == REDACTED
        assert result["refresh_token"] == REDACTED
        assert result["token"] == REDACTED
        assert result["username"] == "alice"

    def test_leaves_previews_alone(self):
        event = {"event": "verification_token_issued", "token_preview": "aZ***"}

        result = redact_sensitive(None, "info", event)

        assert result["token_preview"] == "aZ***"
