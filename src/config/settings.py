"""Application settings and configuration."""

import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Only logging is configurable. Validation bounds and messages are fixed
    constants in src.shared.validators.
    """

    # Application (hardcoded constants)
    app_name: str = "Field Validators"

    # Logging
    log_level: str = "INFO"
    log_failed_validations: bool = False

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        level = str(v).upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}, got {level}")
        return level


def configure_logging(config: Settings | None = None) -> logging.Logger:
    """Apply the configured log level to the application's loggers."""
    config = config or settings
    app_logger = logging.getLogger("src")
    app_logger.setLevel(config.log_level)
    logger.debug(f"Logging configured at {config.log_level} for {config.app_name}")
    return app_logger


settings = Settings()
