"""
Tests for actionstack configuration.
"""
import logging

import pytest
from pydantic import ValidationError

from actionstack.config import ActionSettings, configure_logging, get_settings
from actionstack.config.schemas import DEFAULT_LOG_FORMAT


class TestGetSettings:
    """Tests for get_settings()."""

    def test_defaults(self, monkeypatch):
        for name in (
            "ACTIONSTACK_DEBUG",
            "ACTIONSTACK_RERAISE_ERRORS",
            "ACTIONSTACK_CAPTURE_TRACEBACK",
            "ACTIONSTACK_LOG_LEVEL",
        ):
            monkeypatch.delenv(name, raising=False)

        settings = get_settings()

        assert settings.service_name == "actionstack"
        assert settings.debug is False
        assert settings.reraise_errors is False
        assert settings.capture_traceback is True
        assert settings.log_level == "INFO"

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ACTIONSTACK_DEBUG", "true")
        monkeypatch.setenv("ACTIONSTACK_RERAISE_ERRORS", "TRUE")
        monkeypatch.setenv("ACTIONSTACK_LOG_LEVEL", "WARNING")

        settings = get_settings()

        assert settings.debug is True
        assert settings.reraise_errors is True
        assert settings.log_level == "WARNING"

    def test_log_format_from_environment(self, monkeypatch):
        monkeypatch.setenv("ACTIONSTACK_LOG_FORMAT", "%(levelname)s %(message)s")

        assert get_settings().log_format == "%(levelname)s %(message)s"

    def test_log_format_default(self, monkeypatch):
        monkeypatch.delenv("ACTIONSTACK_LOG_FORMAT", raising=False)

        assert get_settings().log_format == DEFAULT_LOG_FORMAT

    def test_service_identity_from_environment(self, monkeypatch):
        monkeypatch.setenv("ACTIONSTACK_SERVICE_NAME", "provisioner")
        monkeypatch.setenv("ACTIONSTACK_ENVIRONMENT", "production")

        settings = get_settings()

        assert settings.service_name == "provisioner"
        assert settings.environment == "production"

    def test_cached(self):
        assert get_settings() is get_settings()


class TestActionSettings:
    """Tests for the settings model."""

    def test_validation(self):
        with pytest.raises(ValidationError):
            ActionSettings(debug="not a bool")

    def test_configure_logging(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(ActionSettings(log_level="warning"))

        assert calls[0]["level"] == "WARNING"
        assert "%(message)s" in calls[0]["format"]

    def test_configure_logging_debug(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))

        configure_logging(ActionSettings(debug=True))

        assert calls[0]["level"] == logging.DEBUG
