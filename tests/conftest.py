"""Shared fixtures."""

import pytest

from elasticpress_config.hooks import FilterRegistry
from elasticpress_config.site import StaticSiteContext
from elasticpress_config.storage import MemorySettingsProvider
from elasticpress_config.store import ConfigStore

ENV_VARS = [
    "ENVIRONMENT",
    "EP_HOST",
    "EP_SETTINGS_BACKEND",
    "EP_SETTINGS_DIR",
    "EP_SITE_ID",
    "EP_SITE_URL",
    "EP_NETWORK_URL",
    "EP_POST_TYPES",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Isolate tests from the caller's environment and .env files."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    yield
    ConfigStore.reset()


@pytest.fixture
def provider():
    return MemorySettingsProvider()


@pytest.fixture
def site():
    return StaticSiteContext(
        current_site_id=5,
        sites={1: "http://network.example.com", 5: "http://example.com"},
        network_url="https://www.My-Site.org",
    )


@pytest.fixture
def filters():
    return FilterRegistry()


@pytest.fixture
def store(provider, site, filters):
    return ConfigStore(provider, site, filters)
