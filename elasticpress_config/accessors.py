"""
Procedural accessors for the process-wide configuration store.

Each function delegates to the matching ConfigStore method on
ConfigStore.factory(). See the ConfigStore docstrings for details.
"""

from typing import List, Optional, Sequence, Union

from .constants import DEFAULT_FILTER_PRIORITY
from .hooks import FilterCallback
from .store import ConfigStore


def get_index_url(index: Optional[Union[str, Sequence[str]]] = None) -> str:
    return ConfigStore.factory().get_index_url(index)


def get_index_name(site_id: Optional[int] = None) -> Union[str, bool]:
    return ConfigStore.factory().get_index_name(site_id)


def get_indexable_post_types() -> List[str]:
    return ConfigStore.factory().get_indexable_post_types()


def get_indexable_post_status() -> List[str]:
    return ConfigStore.factory().get_indexable_post_status()


def get_network_alias() -> str:
    return ConfigStore.factory().get_network_alias()


def get_server_host() -> Optional[str]:
    return ConfigStore.factory().get_server_host()


def set_server_host(host: Optional[str] = None) -> bool:
    return ConfigStore.factory().set_server_host(host)


def get_server_port() -> int:
    return ConfigStore.factory().get_server_port()


def set_server_port(port: Optional[Union[str, int]] = None) -> bool:
    return ConfigStore.factory().set_server_port(port)


def get_server_url() -> Optional[str]:
    return ConfigStore.factory().get_server_url()


def get_show_related_posts() -> bool:
    return ConfigStore.factory().get_show_related_posts()


def set_show_related_posts(show: bool = True) -> bool:
    return ConfigStore.factory().set_show_related_posts(show)


def get_related_posts_count() -> int:
    return ConfigStore.factory().get_related_posts_count()


def set_related_posts_count(count: Optional[Union[str, int]] = None) -> bool:
    return ConfigStore.factory().set_related_posts_count(count)


def add_filter(
    name: str, callback: FilterCallback, priority: int = DEFAULT_FILTER_PRIORITY
) -> None:
    ConfigStore.factory().filters.add_filter(name, callback, priority)


def remove_filter(name: str, callback: FilterCallback) -> bool:
    return ConfigStore.factory().filters.remove_filter(name, callback)
