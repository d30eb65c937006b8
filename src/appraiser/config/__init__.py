"""
Configuration Layer

Application configuration with environment variable support.
"""

from appraiser.config.settings import (
    ApplicationSettings,
    AppraiserConfig,
    LoggingSettings,
    ReferenceDataSettings,
    get_settings,
)

__all__ = [
    "AppraiserConfig",
    "ApplicationSettings",
    "LoggingSettings",
    "ReferenceDataSettings",
    "get_settings",
]
