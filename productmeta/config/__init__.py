"""Configuration module for productmeta.

This module provides centralized, type-safe configuration management
using pydantic-settings with environment variable loading.

Usage:
    from productmeta.config import get_settings

    settings = get_settings()

    overrides_dir = settings.overrides.directory
    file_name = settings.overrides.file_name
"""

from productmeta.config.settings import (
    LoggingSettings,
    OverridesSettings,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = [
    "LoggingSettings",
    "OverridesSettings",
    "Settings",
    "get_settings",
    "reset_settings",
]
