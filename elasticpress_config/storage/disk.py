"""Persistent settings provider on top of diskcache."""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from diskcache import Cache

from .base import SettingsProvider

logger = logging.getLogger(__name__)


class DiskSettingsProvider(SettingsProvider):
    """Settings provider storing options in a diskcache directory.

    Options never expire. The directory is created when missing and can be
    shared between processes.
    """

    def __init__(self, directory: Union[str, Path]):
        """Initialize disk provider.

        Args:
            directory: Directory holding the option store
        """
        self.directory = Path(directory)
        os.makedirs(self.directory, exist_ok=True)
        self._cache: Optional[Cache] = Cache(str(self.directory))
        logger.debug(f"Using disk settings store at {self.directory}")

    def _get_cache(self) -> Cache:
        if self._cache is None:
            self._cache = Cache(str(self.directory))
        return self._cache

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        return self._get_cache().get(key, default=default)

    def set(self, key: str, value: Any) -> None:
        self._get_cache().set(key, value)

    def delete(self, key: str) -> None:
        self._get_cache().delete(key)

    def close(self) -> None:
        """Close the underlying cache handle."""
        if self._cache is not None:
            self._cache.close()
            self._cache = None
            logger.debug(f"Closed disk settings store at {self.directory}")
