"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables
prefixed with ``ROUTEKIT_``.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Complex values (lists) are read as JSON

Usage:
    from routekit.core.config import get_settings

    settings = get_settings()
    if settings.is_development:
        # Dev-specific behavior
        ...

Environment:
    ROUTEKIT_ENVIRONMENT=production
    ROUTEKIT_LOG_LEVEL=debug
    ROUTEKIT_DEFAULT_POLICIES='["global::is-authenticated"]'
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from routekit.core.enums import Environment

LOG_LEVELS: frozenset[str] = frozenset(
    {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
)


class Settings(BaseSettings):
    """
    Routekit settings (flat structure).

    Configuration precedence:
        1. Environment variables (ROUTEKIT_*)
        2. Default values
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    default_policies: list[str] = Field(
        default_factory=list,
        description="Policy names prepended to every route that declares policies",
    )

    model_config = SettingsConfigDict(
        env_prefix="ROUTEKIT_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Validate and normalize the log level name.

        Args:
            v: Log level name (case-insensitive).

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        normalized = v.strip().upper()
        if normalized not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(LOG_LEVELS))}"
            )
        return normalized

    @field_validator("default_policies")
    @classmethod
    def validate_default_policies(cls, v: list[str]) -> list[str]:
        """
        Reject blank policy names.

        Args:
            v: Policy names read from the environment.

        Returns:
            list[str]: The policy names, unchanged.

        Raises:
            ValueError: If any name is empty or whitespace.
        """
        if any(not name.strip() for name in v):
            raise ValueError("default_policies cannot contain empty names")
        return v

    @property
    def is_development(self) -> bool:
        """
        Check if running in development environment.

        Returns:
            bool: True if environment is DEVELOPMENT, False otherwise.
        """
        return self.environment == Environment.DEVELOPMENT


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Settings are loaded once and reused; call ``get_settings.cache_clear()``
    to reload after changing the environment (tests).

    Returns:
        Settings: Application configuration.
    """
    return Settings()
