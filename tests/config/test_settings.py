"""Tests for application settings."""

import logging

import pytest
from pydantic import ValidationError

from src.config.settings import Settings, configure_logging


class TestSettings:
    """Test settings loading."""

    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("LOG_FAILED_VALIDATIONS", raising=False)

        config = Settings(_env_file=None)

        assert config.log_level == "INFO"
        assert config.log_failed_validations is False

    def test_loaded_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_FAILED_VALIDATIONS", "true")

        config = Settings(_env_file=None)

        assert config.log_level == "DEBUG"
        assert config.log_failed_validations is True

    def test_invalid_log_level_rejected(self):
        with pytest.raises(ValidationError, match="Log level must be one of"):
            Settings(_env_file=None, log_level="verbose")


class TestConfigureLogging:
    """Test logging configuration."""

    def test_sets_application_log_level(self):
        app_logger = logging.getLogger("src")
        previous = app_logger.level
        try:
            configured = configure_logging(Settings(_env_file=None, log_level="WARNING"))

            assert configured is app_logger
            assert app_logger.level == logging.WARNING
        finally:
            app_logger.setLevel(previous)
