"""Centralized configuration management using pydantic-settings.

This module provides type-safe configuration with environment variable loading,
validation, and sensible defaults for all productmeta settings.
"""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from productmeta.const import PRODUCT_OVERRIDES_FILE


class OverridesSettings(BaseSettings):
    """Product override file configuration."""

    model_config = SettingsConfigDict(env_prefix="OVERRIDES_", extra="ignore")

    directory: Path = Field(
        default=Path("overrides"),
        description="Root directory holding one override folder per package path",
    )
    file_name: str = Field(
        default=PRODUCT_OVERRIDES_FILE,
        description="Name of the product override file inside each package folder",
    )
    auto_load: bool = Field(
        default=False,
        description="Load overrides on first lookup instead of failing",
    )

    @field_validator("file_name")
    @classmethod
    def reject_nested_file_name(cls, v: str) -> str:
        if not v or "/" in v:
            raise ValueError("file_name must be a plain file name")
        return v


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    debug_all: bool = Field(
        default=False,
        validation_alias="DEBUG_ALL",
        description="Enable debug logging for all libraries",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Log level for productmeta namespace",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def uppercase_log_level(cls, v: str) -> str:
        if isinstance(v, str):
            return v.upper()
        return v


class Settings(BaseSettings):
    """Root settings class with all nested configurations.

    Usage:
        from productmeta.config import get_settings

        settings = get_settings()
        overrides_dir = settings.overrides.directory
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=True,
    )

    overrides: OverridesSettings = Field(default_factory=OverridesSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# Singleton pattern for settings
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get or create the global settings instance.

    Returns:
        The singleton Settings instance with all configuration loaded.
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
