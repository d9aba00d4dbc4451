"""Settings provider interface and in-memory backend."""

import logging
import threading
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class SettingsProvider:
    """Base settings provider interface.

    A provider persists namespaced option values for the platform. Values are
    scalars (str, int or bool).
    """

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        """Get option value.

        Args:
            key: Namespaced option key
            default: Value returned when the option is not stored

        Returns:
            Stored value or default
        """
        raise NotImplementedError

    def set(self, key: str, value: Any) -> None:
        """Store option value.

        Args:
            key: Namespaced option key
            value: Value to store
        """
        raise NotImplementedError

    def delete(self, key: str) -> None:
        """Delete option value.

        Args:
            key: Namespaced option key
        """
        raise NotImplementedError

    def close(self) -> None:
        """Release provider resources."""
        pass


class MemorySettingsProvider(SettingsProvider):
    """Process-local provider backed by a dictionary."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._values: Dict[str, Any] = dict(initial or {})
        self._lock = threading.RLock()

    def get(self, key: str, default: Optional[Any] = None) -> Any:
        with self._lock:
            return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._values[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._values.pop(key, None)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._values
