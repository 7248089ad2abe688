"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from recordkit.config import RecordKitSettings

    # Load from environment variables (RECORDKIT_*)
    settings = RecordKitSettings()

    # Or override with explicit values
    settings = RecordKitSettings(warn_on_overwrite=True)
"""

from __future__ import annotations

from typing import Any

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. Install with: pip install recordkit"
    ) from e


class RecordKitSettings(BaseSettings):  # type: ignore[misc]
    """Library-wide behaviour switches.

    Attributes:
        cache_descriptors: Cache resolved field descriptors per (record type, field name).
        warn_on_overwrite: Warn when a change set replaces an earlier mutation of a field.
        warn_on_readonly_write: Warn when a read-only field is written via its backing slot.

    Environment Variables:
        RECORDKIT_CACHE_DESCRIPTORS
        RECORDKIT_WARN_ON_OVERWRITE
        RECORDKIT_WARN_ON_READONLY_WRITE
    """

    model_config = SettingsConfigDict(
        env_prefix="RECORDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    cache_descriptors: bool = True
    warn_on_overwrite: bool = False
    warn_on_readonly_write: bool = False


_settings: RecordKitSettings | None = None


def get_settings() -> RecordKitSettings:
    """Access the process-wide settings, loading them from the environment on first use.

    Returns:
        The active RecordKitSettings instance.
    """
    global _settings
    if _settings is None:
        _settings = RecordKitSettings()
    return _settings


def configure(**overrides: Any) -> RecordKitSettings:
    """Replace the process-wide settings.

    Values not given in overrides are loaded from the environment as usual.

    Args:
        **overrides: Field values for RecordKitSettings.

    Returns:
        The new active settings.
    """
    global _settings
    _settings = RecordKitSettings(**overrides)
    return _settings
