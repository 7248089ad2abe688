"""Configuration module using Pydantic Settings.

Usage:
    from recordkit.config import configure, get_settings

    configure(warn_on_overwrite=True)
    settings = get_settings()
"""

from recordkit.config.settings import RecordKitSettings, configure, get_settings

__all__ = [
    "RecordKitSettings",
    "configure",
    "get_settings",
]
