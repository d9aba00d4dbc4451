"""
ElasticPress Configuration - Search Backend Settings Accessor

This package provides the configuration accessor of a search backend
integration embedded in a multi-site content management platform. It stores
the Elasticsearch connection settings, derives the server URL, names per-site
indexes and the network alias, and exposes filter hooks so other code can
override every computed value.

Key Features:
- Typed getters and setters over namespaced site options
- Server URL derivation with an EP_HOST fallback
- Deterministic per-site index names and index URLs
- Filter hooks on index name, indexable types and statuses and network alias
- Memory and disk option storage backends
- Command line interface for inspecting and changing settings

License: MIT
"""

import logging
from importlib.metadata import version

from .config import ConfigurationError, Settings, load_settings
from .hooks import FilterRegistry
from .store import ConfigStore

__version__ = version("elasticpress-config")

logger = logging.getLogger(__name__)

__all__ = [
    "ConfigStore",
    "ConfigurationError",
    "FilterRegistry",
    "Settings",
    "__version__",
    "load_settings",
]
