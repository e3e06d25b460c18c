"""Application settings using pydantic-settings.

This module provides environment variable support for configuration
using pydantic-settings. Settings can be overridden via environment
variables with the appropriate prefix.

Environment Variables:
    STATECHART_LINT_SCHEMA_VERSION: Schema version assumed when a document
        does not declare one (4 or 5)
    STATECHART_LINT_MAX_WORKERS: Maximum threads used to classify states
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from statechart_lint.config.defaults import (
    DEFAULT_MAX_WORKERS,
    DEFAULT_SCHEMA_VERSION,
    MAX_WORKERS_MAX,
    MAX_WORKERS_MIN,
    SUPPORTED_SCHEMA_VERSIONS,
)

__all__ = [
    "LintSettings",
    "Settings",
    "get_settings",
]


class LintSettings(BaseSettings):
    """Settings for the analyzer.

    Attributes:
        schema_version: Schema version used when a document declares none.
        max_workers: Maximum threads used to classify states.

    """

    model_config = SettingsConfigDict(
        env_prefix="STATECHART_LINT_",
        extra="ignore",
    )

    schema_version: int = Field(
        default=DEFAULT_SCHEMA_VERSION,
        description="Schema version used when a document declares none",
    )
    max_workers: int = Field(
        default=DEFAULT_MAX_WORKERS,
        ge=MAX_WORKERS_MIN,
        le=MAX_WORKERS_MAX,
        description="Maximum threads used to classify states",
    )

    @field_validator("schema_version")
    @classmethod
    def _check_supported(cls, value: int) -> int:
        if value not in SUPPORTED_SCHEMA_VERSIONS:
            raise ValueError(
                f"Schema version {value} is not supported. "
                f"Supported versions: {list(SUPPORTED_SCHEMA_VERSIONS)}"
            )
        return value


class Settings(BaseSettings):
    """Root settings container.

    Use get_settings() to access the cached singleton instance.

    Attributes:
        lint: Analyzer settings.

    """

    model_config = SettingsConfigDict(
        env_prefix="STATECHART_",
        extra="ignore",
    )

    lint: LintSettings = Field(default_factory=LintSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the cached settings singleton.

    Returns:
        The Settings instance with values from environment variables.

    """
    return Settings()
