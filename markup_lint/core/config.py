"""
Configuration module - centralized settings for the linter.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Linter settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    Every variable is prefixed, for example:
        export MARKUP_LINT_LOG_LEVEL=DEBUG
    """

    model_config = SettingsConfigDict(
        env_prefix="MARKUP_LINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # APP_NAME: Name used as the root logger name
    APP_NAME: str = "markup_lint"

    # DEBUG: Verbose logging of rule registration and dispatch
    DEBUG: bool = False

    # LOG_LEVEL: Level of the package logger when DEBUG is off
    LOG_LEVEL: str = "WARNING"

    @field_validator("LOG_LEVEL")
    @classmethod
    def normalize_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.DEBUG else self.LOG_LEVEL


# Usage: from markup_lint.core.config import settings
settings = Settings()
