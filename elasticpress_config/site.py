"""Site context provided by the host platform."""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List

from .config import Settings
from .constants import DEFAULT_POST_TYPES

logger = logging.getLogger(__name__)


class SiteContext(ABC):
    """Base interface for resolving site identity and URLs."""

    @abstractmethod
    def get_current_site_id(self) -> int:
        """Get the identifier of the site handling the current request."""
        pass

    @abstractmethod
    def get_site_url(self, site_id: int) -> str:
        """Get the base URL of a site.

        Args:
            site_id: Site identifier

        Returns:
            Base URL, empty when the site is unknown
        """
        pass

    @abstractmethod
    def get_network_site_url(self) -> str:
        """Get the network-wide base URL."""
        pass

    @abstractmethod
    def get_post_types(self, public: bool = True) -> List[str]:
        """Get registered content type names.

        Args:
            public: Visibility the returned types must have

        Returns:
            Content type names in registration order
        """
        pass


@dataclass
class StaticSiteContext(SiteContext):
    """Site context answering from fixed data."""

    current_site_id: int = 1
    sites: Dict[int, str] = field(default_factory=dict)
    network_url: str = ""
    post_types: Dict[str, bool] = field(
        default_factory=lambda: dict(DEFAULT_POST_TYPES)
    )

    def get_current_site_id(self) -> int:
        return self.current_site_id

    def get_site_url(self, site_id: int) -> str:
        url = self.sites.get(site_id, "")
        if not url:
            logger.debug(f"No URL known for site {site_id}")
        return url

    def get_network_site_url(self) -> str:
        return self.network_url

    def get_post_types(self, public: bool = True) -> List[str]:
        return [name for name, flag in self.post_types.items() if flag == public]

    @classmethod
    def from_settings(cls, settings: Settings) -> "StaticSiteContext":
        """Create site context from application settings."""
        return cls(
            current_site_id=settings.current_site_id,
            sites=dict(settings.sites),
            network_url=settings.network_url,
            post_types=dict(settings.post_types),
        )
