"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
prefixed with ``RESULT_EDGE_``. Only the ambient concerns are configurable
(logging and problem details rendering); Result semantics are fixed.

Usage:
    from result_edge.core.config import settings

    if settings.is_development:
        # Human-readable logs
        ...

Environment variables:
    RESULT_EDGE_ENVIRONMENT: development | testing | ci | production
    RESULT_EDGE_DEBUG: Enable debug logging
    RESULT_EDGE_LOG_LEVEL: DEBUG | INFO | WARNING | ERROR | CRITICAL
    RESULT_EDGE_PROBLEM_BASE_URL: Base URL for problem ``type`` URIs
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from result_edge.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Library settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode (forces DEBUG log level)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    problem_base_url: str | None = Field(
        default=None,
        description="Base URL for RFC 7807 problem type URIs "
        "(None renders 'about:blank')",
    )

    model_config = SettingsConfigDict(
        env_prefix="RESULT_EDGE_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the name is not a standard log level.
        """
        level = v.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {sorted(_LOG_LEVELS)}")
        return level

    @field_validator("problem_base_url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Remove trailing slashes from the base URL."""
        if v is None:
            return None
        return v.rstrip("/")

    @property
    def effective_log_level(self) -> str:
        """Log level after applying the debug override."""
        return "DEBUG" if self.debug else self.log_level

    @property
    def is_development(self) -> bool:
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
