"""
Filter Hooks

A filter is a named chain of callbacks that may observe or replace a computed
value before it is returned to the caller. Callbacks run in ascending priority
and, within one priority, in the order they were registered. Each callback is
called with the current value followed by any extra arguments and returns the
value handed to the next callback.

Example Usage:
    filters = FilterRegistry()
    filters.add_filter("ep_index_name", lambda name: f"staging-{name}")
    filters.apply_filters("ep_index_name", "abc-1")  # "staging-abc-1"
"""

import logging
import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List

from .constants import DEFAULT_FILTER_PRIORITY

logger = logging.getLogger(__name__)

FilterCallback = Callable[..., Any]


@dataclass
class _Registration:
    callback: FilterCallback
    priority: int
    sequence: int


class FilterRegistry:
    """Registry of filter callbacks keyed by filter name."""

    def __init__(self):
        self._filters: Dict[str, List[_Registration]] = {}
        self._sequence = 0
        self._lock = threading.RLock()

    def add_filter(
        self,
        name: str,
        callback: FilterCallback,
        priority: int = DEFAULT_FILTER_PRIORITY,
    ) -> None:
        """Register a callback for a filter.

        Args:
            name: Filter name
            callback: Callable receiving the value and extra arguments
            priority: Lower priorities run first
        """
        with self._lock:
            self._sequence += 1
            registrations = self._filters.setdefault(name, [])
            registrations.append(_Registration(callback, priority, self._sequence))
            registrations.sort(key=lambda r: (r.priority, r.sequence))
        logger.debug(f"Registered filter {name} (priority {priority})")

    def remove_filter(self, name: str, callback: FilterCallback) -> bool:
        """Remove every registration of a callback from a filter.

        Returns:
            Whether anything was removed
        """
        with self._lock:
            registrations = self._filters.get(name, [])
            remaining = [r for r in registrations if r.callback != callback]
            removed = len(remaining) != len(registrations)
            if remaining:
                self._filters[name] = remaining
            else:
                self._filters.pop(name, None)
        return removed

    def has_filter(self, name: str) -> bool:
        with self._lock:
            return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        """Run a value through the callbacks registered for a filter.

        A callback that raises is logged and skipped; the value it received is
        passed on unchanged.

        Args:
            name: Filter name
            value: Value to filter
            *args: Extra arguments passed to every callback

        Returns:
            Filtered value
        """
        with self._lock:
            registrations = list(self._filters.get(name, []))

        for registration in registrations:
            try:
                value = registration.callback(value, *args)
            except Exception as e:
                logger.error(f"Error in {name} filter: {e}", exc_info=True)
        return value

    def clear(self) -> None:
        """Remove all registered filters."""
        with self._lock:
            self._filters.clear()
