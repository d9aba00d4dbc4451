"""
Application Settings for the ElasticPress Configuration Accessor

This module provides the ambient settings the configuration accessor runs with:
where stored options live, which site context to answer with, the fallback
server URL and logging level. Settings are loaded from several sources, each
overriding the previous one:

1. Model defaults
2. A `.env` file in the working directory
3. An optional YAML or JSON configuration file
4. Environment variables

Example Usage:
    from elasticpress_config.config import load_settings

    settings = load_settings("config.yaml")
    print(settings.settings_backend, settings.ep_host)

Environment Variables:
    ENVIRONMENT: Environment name (development/staging/production)
    EP_HOST: Fallback server URL used when no host option is stored
    EP_SETTINGS_BACKEND: Option storage backend (memory/disk)
    EP_SETTINGS_DIR: Directory of the disk option store
    EP_SITE_ID: Identifier of the current site
    EP_SITE_URL: Base URL of the current site
    EP_NETWORK_URL: Network-wide base URL
    EP_POST_TYPES: Comma separated list of public content types
    LOG_LEVEL: Logging level
"""

import json
import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from .constants import DEFAULT_POST_TYPES

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_BACKENDS = ["memory", "disk"]


class Environment(str, Enum):
    """Environment enumeration."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class ConfigurationError(Exception):
    """Base configuration error."""

    pass


class InvalidConfigurationError(ConfigurationError):
    """Invalid configuration error."""

    pass


class Settings(BaseModel):
    """Ambient settings of the configuration accessor."""

    environment: Environment = Environment.DEVELOPMENT
    ep_host: Optional[str] = Field(None, description="Fallback server URL")
    settings_backend: str = Field("disk", description="Option storage backend")
    settings_dir: Path = Field(
        Path(".cache/settings"), description="Directory of the disk option store"
    )
    current_site_id: int = Field(1, ge=1, description="Current site identifier")
    sites: Dict[int, str] = Field(
        default_factory=dict, description="Site identifier to base URL"
    )
    network_url: str = Field("", description="Network-wide base URL")
    post_types: Dict[str, bool] = Field(
        default_factory=lambda: dict(DEFAULT_POST_TYPES),
        description="Content type name to public flag",
    )
    log_level: str = Field("INFO", description="Log level")

    @field_validator("settings_backend")
    @classmethod
    def validate_backend(cls, value: str) -> str:
        """Validate storage backend name."""
        value = value.lower()
        if value not in VALID_BACKENDS:
            raise ValueError(
                f"Unknown settings backend {value!r}, expected one of {VALID_BACKENDS}"
            )
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate log level name."""
        value = value.upper()
        if value not in VALID_LOG_LEVELS:
            raise ValueError(f"Invalid log level: {value}")
        return value

    @property
    def current_site_url(self) -> str:
        """Get the base URL of the current site."""
        return self.sites.get(self.current_site_id, "")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create settings from dictionary.

        Args:
            data: Settings dictionary.

        Returns:
            Settings instance.

        Raises:
            InvalidConfigurationError: If settings are invalid.
        """
        try:
            return cls(**data)
        except ValidationError as e:
            raise InvalidConfigurationError(f"Invalid settings: {e}") from e

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(mode="json")


def _load_file(path: Path) -> Dict[str, Any]:
    """Load a YAML or JSON settings file.

    Args:
        path: Path of the file to load.

    Returns:
        Settings data.

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        with open(path) as f:
            if path.suffix in (".yaml", ".yml"):
                data = yaml.safe_load(f) or {}
            elif path.suffix == ".json":
                data = json.load(f)
            else:
                raise ConfigurationError(f"Unsupported file format: {path.suffix}")
    except ConfigurationError:
        raise
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigurationError(f"Failed to load {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(f"Configuration file {path} must hold a mapping")
    return data


def _load_from_env(data: Dict[str, Any]) -> Dict[str, Any]:
    """Overlay environment variables on settings data."""
    data = dict(data)

    if os.getenv("ENVIRONMENT"):
        data["environment"] = os.environ["ENVIRONMENT"]
    if os.getenv("EP_HOST") is not None:
        data["ep_host"] = os.environ["EP_HOST"]
    if os.getenv("EP_SETTINGS_BACKEND"):
        data["settings_backend"] = os.environ["EP_SETTINGS_BACKEND"]
    if os.getenv("EP_SETTINGS_DIR"):
        data["settings_dir"] = os.environ["EP_SETTINGS_DIR"]
    if os.getenv("EP_SITE_ID"):
        data["current_site_id"] = os.environ["EP_SITE_ID"]
    if os.getenv("EP_NETWORK_URL") is not None:
        data["network_url"] = os.environ["EP_NETWORK_URL"]
    if os.getenv("LOG_LEVEL"):
        data["log_level"] = os.environ["LOG_LEVEL"]

    if os.getenv("EP_SITE_URL") is not None:
        sites = dict(data.get("sites") or {})
        site_id = data.get("current_site_id", 1)
        try:
            site_id = int(site_id)
        except (TypeError, ValueError):
            raise InvalidConfigurationError(f"Invalid site id: {site_id!r}")
        sites[site_id] = os.environ["EP_SITE_URL"]
        data["sites"] = sites

    if os.getenv("EP_POST_TYPES"):
        names = [name.strip() for name in os.environ["EP_POST_TYPES"].split(",")]
        data["post_types"] = {name: True for name in names if name}

    return data


def load_settings(config_file: Optional[Union[str, Path]] = None) -> Settings:
    """Load settings.

    Args:
        config_file: Optional YAML or JSON configuration file.

    Returns:
        Loaded settings.

    Raises:
        ConfigurationError: If settings loading fails.
    """
    # Load environment variables from .env file
    env_file = Path(".env")
    if env_file.exists():
        load_dotenv(env_file)

    data: Dict[str, Any] = {}
    if config_file:
        data = _load_file(Path(config_file))
        logger.debug(f"Loaded settings from {config_file}")

    settings = Settings.from_dict(_load_from_env(data))
    logger.debug(
        f"Settings loaded for {settings.environment.value} environment "
        f"(backend: {settings.settings_backend})"
    )
    return settings


__all__ = [
    "ConfigurationError",
    "Environment",
    "InvalidConfigurationError",
    "Settings",
    "load_settings",
]
