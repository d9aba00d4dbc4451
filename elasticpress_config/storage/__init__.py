"""Settings storage backends."""

import logging

from ..config import ConfigurationError, Settings
from .base import MemorySettingsProvider, SettingsProvider
from .disk import DiskSettingsProvider

logger = logging.getLogger(__name__)


def create_provider(settings: Settings) -> SettingsProvider:
    """Create the settings provider selected by configuration.

    Args:
        settings: Application settings

    Returns:
        Settings provider instance

    Raises:
        ConfigurationError: If the backend is unknown
    """
    if settings.settings_backend == "memory":
        return MemorySettingsProvider()
    if settings.settings_backend == "disk":
        return DiskSettingsProvider(settings.settings_dir)
    raise ConfigurationError(f"Unknown settings backend: {settings.settings_backend}")


__all__ = [
    "DiskSettingsProvider",
    "MemorySettingsProvider",
    "SettingsProvider",
    "create_provider",
]
