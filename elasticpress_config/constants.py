"""Constants for the search backend configuration accessor."""

from typing import Dict, List

# Option namespace shared by every stored setting
NAMESPACE = "ep4wpe"

# Option keys
HOST = f"{NAMESPACE}_host"
PORT = f"{NAMESPACE}_port"
POST_COUNT_FIELD = f"{NAMESPACE}_rp_count"
SHOW_RELATED_POSTS_FIELD = f"{NAMESPACE}_show_rp"

# Defaults
DEFAULT_PORT = 9200
MAX_PORT = 65535
MAX_RELATED_POSTS = 10
DEFAULT_POST_STATUS: List[str] = ["publish"]
GLOBAL_ALIAS_SUFFIX = "-global"

# Filter names
INDEX_NAME_FILTER = "ep_index_name"
INDEXABLE_POST_TYPES_FILTER = "ep_indexable_post_types"
INDEXABLE_POST_STATUS_FILTER = "ep_indexable_post_status"
GLOBAL_ALIAS_FILTER = "ep_global_alias"

DEFAULT_FILTER_PRIORITY = 10

# Content types known to a fresh install, mapped to whether they are public
DEFAULT_POST_TYPES: Dict[str, bool] = {
    "post": True,
    "page": True,
    "attachment": True,
    "revision": False,
    "nav_menu_item": False,
}
