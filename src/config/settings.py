"""
Application settings - pydantic-settings configuration.

The only environment-driven setting is the logging verbosity. It is read
once at startup and handed to the logging setup; the process environment
is never written back.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Short names accepted alongside the canonical logging level names
_LEVEL_ALIASES = {"WARN": "WARNING", "TRACE": "DEBUG"}


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(case_sensitive=False)

    # Logging configuration (LOG_LEVEL)
    log_level: str = "info"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level, resolve aliases, reject names logging does not know."""
        level = v.strip().upper()
        level = _LEVEL_ALIASES.get(level, level)
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {v!r}")
        return level

    @property
    def log_level_number(self) -> int:
        """Numeric logging level for the configured name."""
        return logging.getLevelName(self.log_level)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
