import pytest

from elasticpress_config.config import Settings
from elasticpress_config.storage import (
    DiskSettingsProvider,
    MemorySettingsProvider,
    create_provider,
)


def test_memory_provider():
    provider = MemorySettingsProvider({"ep4wpe_host": "localhost"})
    assert provider.get("ep4wpe_host") == "localhost"
    assert provider.get("ep4wpe_port", 9200) == 9200

    provider.set("ep4wpe_port", 9201)
    assert "ep4wpe_port" in provider
    provider.delete("ep4wpe_port")
    assert provider.get("ep4wpe_port") is None


def test_disk_provider_persists(tmp_path):
    provider = DiskSettingsProvider(tmp_path / "settings")
    provider.set("ep4wpe_host", "search.example.com")
    provider.set("ep4wpe_show_rp", True)
    provider.close()

    reopened = DiskSettingsProvider(tmp_path / "settings")
    try:
        assert reopened.get("ep4wpe_host") == "search.example.com"
        assert reopened.get("ep4wpe_show_rp") is True
        assert reopened.get("ep4wpe_port", 9200) == 9200

        reopened.delete("ep4wpe_host")
        assert reopened.get("ep4wpe_host") is None
    finally:
        reopened.close()


def test_disk_provider_reopens_after_close(tmp_path):
    provider = DiskSettingsProvider(tmp_path)
    provider.close()
    provider.set("ep4wpe_host", "localhost")
    assert provider.get("ep4wpe_host") == "localhost"
    provider.close()


@pytest.mark.parametrize(
    "backend,expected",
    [("memory", MemorySettingsProvider), ("disk", DiskSettingsProvider)],
)
def test_create_provider(tmp_path, backend, expected):
    settings = Settings(settings_backend=backend, settings_dir=tmp_path)
    provider = create_provider(settings)
    try:
        assert isinstance(provider, expected)
    finally:
        provider.close()
