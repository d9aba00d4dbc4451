"""
Search Backend Configuration Store

This module provides the ConfigStore, the accessor the search integration uses
to read and write its connection settings and to derive the values built from
them: the server URL, per-site index names and URLs, the network alias and the
content types and statuses that get indexed.

All option state lives in the settings provider supplied by the host platform;
a ConfigStore only holds references to its collaborators. Malformed input
never raises: setters report whether they wrote anything, derived values
degrade to None or False.

Process-wide access goes through ConfigStore.factory(). An application either
installs its own store once at startup with ConfigStore.configure(), or lets
the first factory() call build one from load_settings(). That first build runs
under a lock, so concurrent first callers share a single instance.

Example Usage:
    from elasticpress_config.store import ConfigStore

    store = ConfigStore.factory()
    store.set_server_host("search.example.com")
    store.get_server_url()  # "http://search.example.com:9200"
"""

import hashlib
import logging
import re
import threading
from typing import Any, Dict, List, Optional, Sequence, Union

from .config import Settings, load_settings
from .constants import (
    DEFAULT_PORT,
    DEFAULT_POST_STATUS,
    GLOBAL_ALIAS_FILTER,
    GLOBAL_ALIAS_SUFFIX,
    HOST,
    INDEX_NAME_FILTER,
    INDEXABLE_POST_STATUS_FILTER,
    INDEXABLE_POST_TYPES_FILTER,
    MAX_PORT,
    MAX_RELATED_POSTS,
    PORT,
    POST_COUNT_FIELD,
    SHOW_RELATED_POSTS_FIELD,
)
from .hooks import FilterRegistry
from .site import SiteContext, StaticSiteContext
from .storage import SettingsProvider, create_provider

logger = logging.getLogger(__name__)

PORT_PATTERN = re.compile(r"\d{1,5}", re.ASCII)
SCHEME_PATTERN = re.compile(r"https?://(www\.)?", re.IGNORECASE)
NON_WORD_PATTERN = re.compile(r"\W", re.ASCII)


class ConfigStore:
    """Typed accessor over the search backend's stored options."""

    _instance: Optional["ConfigStore"] = None
    _instance_lock = threading.Lock()

    def __init__(
        self,
        provider: SettingsProvider,
        site: SiteContext,
        filters: Optional[FilterRegistry] = None,
        fallback_url: Optional[str] = None,
    ):
        """Initialize configuration store.

        Args:
            provider: Persistent option store
            site: Site identity and URL resolution
            filters: Filter registry, a private one is created when omitted
            fallback_url: Server URL used when no host is stored
        """
        self.provider = provider
        self.site = site
        self.filters = filters if filters is not None else FilterRegistry()
        self.fallback_url = fallback_url

    @classmethod
    def from_settings(cls, settings: Settings) -> "ConfigStore":
        """Create a store wired from application settings."""
        return cls(
            provider=create_provider(settings),
            site=StaticSiteContext.from_settings(settings),
            fallback_url=settings.ep_host,
        )

    @classmethod
    def factory(cls) -> "ConfigStore":
        """Get the process-wide store, building it from settings on first use."""
        if cls._instance is None:
            with cls._instance_lock:
                if cls._instance is None:
                    cls._instance = cls.from_settings(load_settings())
                    logger.debug("Initialized process-wide configuration store")
        return cls._instance

    @classmethod
    def configure(cls, store: "ConfigStore") -> "ConfigStore":
        """Install a store as the process-wide instance, closing the one it replaces."""
        with cls._instance_lock:
            previous, cls._instance = cls._instance, store
        if previous is not None and previous is not store:
            previous.provider.close()
        return store

    @classmethod
    def reset(cls) -> None:
        """Drop the process-wide instance, closing its provider."""
        with cls._instance_lock:
            instance, cls._instance = cls._instance, None
        if instance is not None:
            instance.provider.close()

    # Connection settings

    def get_server_host(self) -> Optional[str]:
        """Get the host name or address of the search server."""
        return self.provider.get(HOST, None)

    def set_server_host(self, host: Optional[str] = None) -> bool:
        """Set the host name or address of the search server.

        Args:
            host: Host name or IP address. None leaves the stored host as is.

        Returns:
            Whether the host was written
        """
        if host is None:
            return False
        self.provider.set(HOST, host)
        logger.debug(f"Server host set to {host}")
        return True

    def get_server_port(self) -> int:
        """Get the port number of the search server (0-65535)."""
        value = self.provider.get(PORT, DEFAULT_PORT)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed stored port {value!r}")
            return DEFAULT_PORT

    def set_server_port(self, port: Optional[Union[str, int]] = None) -> bool:
        """Set the port number of the search server.

        The port is written only when it is one to five decimal digits with a
        value of at most 65535. Anything else leaves the stored port as is.

        Args:
            port: Port number as text or integer

        Returns:
            Whether the port was written
        """
        if port is None:
            return False

        text = str(port) if not isinstance(port, bool) else ""
        if not PORT_PATTERN.fullmatch(text) or int(text) > MAX_PORT:
            logger.warning(f"Rejected invalid server port {port!r}")
            return False

        self.provider.set(PORT, int(text))
        logger.debug(f"Server port set to {text}")
        return True

    def get_server_url(self) -> Optional[str]:
        """Get the search server URL.

        Returns:
            URL built from the stored host and port, the fallback URL when no
            host is stored, or None when neither is available
        """
        host = self.get_server_host()
        if host is not None:
            return f"http://{host}:{self.get_server_port()}"
        if self.fallback_url:
            return self.fallback_url
        return None

    # Related posts

    def get_show_related_posts(self) -> bool:
        """Get whether related posts are shown below single posts."""
        return bool(self.provider.get(SHOW_RELATED_POSTS_FIELD, False))

    def set_show_related_posts(self, show: bool = True) -> bool:
        """Set whether related posts are shown below single posts."""
        self.provider.set(SHOW_RELATED_POSTS_FIELD, bool(show))
        logger.debug(f"Show related posts set to {bool(show)}")
        return True

    def get_related_posts_count(self) -> int:
        """Get how many related posts are shown."""
        value = self.provider.get(POST_COUNT_FIELD, MAX_RELATED_POSTS)
        try:
            return int(value)
        except (TypeError, ValueError):
            logger.warning(f"Ignoring malformed stored related posts count {value!r}")
            return MAX_RELATED_POSTS

    def set_related_posts_count(self, count: Optional[Union[str, int]] = None) -> bool:
        """Set how many related posts are shown (1 to MAX_RELATED_POSTS).

        Returns:
            Whether the count was written
        """
        if count is None or isinstance(count, bool):
            return False
        try:
            value = int(count)
        except (TypeError, ValueError):
            logger.warning(f"Rejected invalid related posts count {count!r}")
            return False
        if not 1 <= value <= MAX_RELATED_POSTS:
            logger.warning(f"Rejected out of range related posts count {value}")
            return False

        self.provider.set(POST_COUNT_FIELD, value)
        return True

    # Index naming

    def get_index_name(self, site_id: Optional[int] = None) -> Union[str, bool]:
        """Generate the index name for a site.

        Args:
            site_id: Site identifier. Defaults to the current site.

        Returns:
            SHA-1 of the site URL joined to the site id, or False when the
            site has no URL
        """
        if not site_id:
            site_id = self.site.get_current_site_id()

        site_url = self.site.get_site_url(site_id)

        if site_url:
            digest = hashlib.sha1(site_url.encode("utf-8")).hexdigest()
            index_name: Union[str, bool] = f"{digest}-{site_id}"
        else:
            index_name = False

        return self.filters.apply_filters(INDEX_NAME_FILTER, index_name)

    def get_index_url(self, index: Optional[Union[str, Sequence[str]]] = None) -> str:
        """Get the URL of an index. Defaults to the current site's index.

        Args:
            index: Index name, or a list of names addressed together

        Returns:
            Server URL without trailing slashes, "/" and the index
        """
        if index is None:
            index = self.get_index_name()
        elif isinstance(index, (list, tuple)):
            index = ",".join(str(name) for name in index if name)

        if index is None or index is False:
            index = ""

        server_url = (self.get_server_url() or "").rstrip("/\\")
        return f"{server_url}/{index}"

    def get_indexable_post_types(self) -> List[str]:
        """Get the content types indexed for the current site."""
        post_types = self.site.get_post_types(public=True)
        return self.filters.apply_filters(INDEXABLE_POST_TYPES_FILTER, post_types)

    def get_indexable_post_status(self) -> List[str]:
        """Get the post statuses indexed for the current site."""
        return self.filters.apply_filters(
            INDEXABLE_POST_STATUS_FILTER, list(DEFAULT_POST_STATUS)
        )

    def get_network_alias(self) -> str:
        """Generate the network-wide alias name."""
        url = self.site.get_network_site_url()
        slug = SCHEME_PATTERN.sub("", url)
        slug = NON_WORD_PATTERN.sub("", slug)

        alias = slug + GLOBAL_ALIAS_SUFFIX

        return self.filters.apply_filters(GLOBAL_ALIAS_FILTER, alias)

    def to_dict(self) -> Dict[str, Any]:
        """Snapshot stored and derived values."""
        return {
            "server_host": self.get_server_host(),
            "server_port": self.get_server_port(),
            "server_url": self.get_server_url(),
            "show_related_posts": self.get_show_related_posts(),
            "related_posts_count": self.get_related_posts_count(),
            "index_name": self.get_index_name(),
            "index_url": self.get_index_url(),
            "network_alias": self.get_network_alias(),
            "indexable_post_types": self.get_indexable_post_types(),
            "indexable_post_status": self.get_indexable_post_status(),
        }
