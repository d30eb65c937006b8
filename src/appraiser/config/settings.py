"""
Pydantic settings models for Appraiser configuration.

This module provides type-safe configuration with validation using Pydantic.
Configuration is loaded from config.yaml with environment variable substitution.

Valuation formula constants are fixed in code. Only application metadata,
logging and the reference-data location are configurable.
"""

from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Optional

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# =============================================================================
# Application Settings
# =============================================================================


class ApplicationSettings(BaseSettings):
    """Application metadata and environment configuration."""

    model_config = SettingsConfigDict(env_prefix="APPRAISER_")

    name: str = Field(default="Appraiser")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development")
    debug: bool = Field(default=False)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment is development or production."""
        if v not in ["development", "production"]:
            raise ValueError("environment must be 'development' or 'production'")
        return v


# =============================================================================
# Logging Settings
# =============================================================================


class LoggingSettings(BaseSettings):
    """Logging level and optional log file."""

    model_config = SettingsConfigDict(env_prefix="APPRAISER_LOG_")

    level: str = Field(default="INFO")
    file: Optional[str] = Field(default=None)

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate level is a standard logging level name."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level


# =============================================================================
# Reference Data Settings
# =============================================================================


class ReferenceDataSettings(BaseSettings):
    """Location of optional industry multiple overrides."""

    model_config = SettingsConfigDict(env_prefix="APPRAISER_REFERENCE_")

    industry_multiples_path: Optional[str] = Field(default=None)


# =============================================================================
# Main Configuration
# =============================================================================


class AppraiserConfig(BaseSettings):
    """
    Master configuration - single source of truth.

    Example:
        >>> config = AppraiserConfig.from_yaml("config.yaml")
        >>> print(config.logging.level)
        INFO
    """

    model_config = SettingsConfigDict(extra="allow")

    application: ApplicationSettings = Field(default_factory=ApplicationSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    reference_data: ReferenceDataSettings = Field(default_factory=ReferenceDataSettings)

    @classmethod
    def from_yaml(cls, config_path: str | Path = "config.yaml") -> "AppraiserConfig":
        """
        Load configuration from YAML file with environment variable substitution.

        Args:
            config_path: Path to config.yaml file (default: "config.yaml")

        Returns:
            Validated AppraiserConfig instance

        Raises:
            ValidationError: If configuration is invalid
            FileNotFoundError: If config file doesn't exist
            ValueError: If required environment variable is missing
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r") as f:
            yaml_content = f.read()

        # Pattern: ${VAR_NAME} or ${VAR_NAME:-default_value}
        def env_var_replacer(match):
            var_spec = match.group(1)
            if ":-" in var_spec:
                var_name, default = var_spec.split(":-", 1)
                return os.getenv(var_name, default)
            value = os.getenv(var_spec)
            if value is None:
                raise ValueError(f"Environment variable {var_spec} not set and no default provided")
            return value

        yaml_content = re.sub(r"\$\{([^}]+)\}", env_var_replacer, yaml_content)

        config_dict = yaml.safe_load(yaml_content) or {}

        return cls(**config_dict)


def get_settings(config_path: str | Path = "config.yaml") -> AppraiserConfig:
    """
    Load settings from YAML, falling back to defaults when the file is absent.

    Example:
        >>> settings = get_settings()
        >>> print(settings.application.name)
        Appraiser
    """
    try:
        return AppraiserConfig.from_yaml(config_path)
    except FileNotFoundError:
        return AppraiserConfig()


__all__ = [
    "AppraiserConfig",
    "ApplicationSettings",
    "LoggingSettings",
    "ReferenceDataSettings",
    "get_settings",
]
