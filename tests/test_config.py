import json
import os
from pathlib import Path

import pytest

from elasticpress_config.config import (
    ConfigurationError,
    Environment,
    InvalidConfigurationError,
    Settings,
    load_settings,
)


def test_defaults():
    settings = load_settings()
    assert settings.environment == Environment.DEVELOPMENT
    assert settings.ep_host is None
    assert settings.settings_backend == "disk"
    assert settings.settings_dir == Path(".cache/settings")
    assert settings.current_site_id == 1
    assert settings.current_site_url == ""
    assert settings.log_level == "INFO"


def test_yaml_file(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "ep_host: https://es.fallback/\n"
        "settings_backend: memory\n"
        "current_site_id: 2\n"
        "sites:\n"
        "  1: http://one.example.com\n"
        "  2: http://two.example.com\n"
        "network_url: https://www.example.com\n"
    )

    settings = load_settings(config_file)
    assert settings.ep_host == "https://es.fallback/"
    assert settings.settings_backend == "memory"
    assert settings.current_site_url == "http://two.example.com"
    assert settings.network_url == "https://www.example.com"


def test_json_file(tmp_path):
    config_file = tmp_path / "config.json"
    config_file.write_text(json.dumps({"log_level": "debug", "sites": {"1": "http://a.com"}}))

    settings = load_settings(str(config_file))
    assert settings.log_level == "DEBUG"
    assert settings.sites == {1: "http://a.com"}


def test_environment_overrides_file(tmp_path, monkeypatch):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("ep_host: https://from-file/\ncurrent_site_id: 2\n")
    monkeypatch.setenv("EP_HOST", "https://from-env/")
    monkeypatch.setenv("EP_SITE_URL", "http://two.example.com")
    monkeypatch.setenv("EP_POST_TYPES", "post, product")

    settings = load_settings(config_file)
    assert settings.ep_host == "https://from-env/"
    assert settings.sites == {2: "http://two.example.com"}
    assert settings.post_types == {"post": True, "product": True}


def test_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("EP_NETWORK_URL=https://www.dotenv.org\n")
    try:
        settings = load_settings()
        assert settings.network_url == "https://www.dotenv.org"
    finally:
        os.environ.pop("EP_NETWORK_URL", None)


def test_missing_file():
    with pytest.raises(ConfigurationError):
        load_settings("missing.yaml")


def test_unsupported_file(tmp_path):
    config_file = tmp_path / "config.ini"
    config_file.write_text("[ep]\n")
    with pytest.raises(ConfigurationError):
        load_settings(config_file)


def test_invalid_backend(monkeypatch):
    monkeypatch.setenv("EP_SETTINGS_BACKEND", "redis")
    with pytest.raises(InvalidConfigurationError):
        load_settings()


def test_invalid_log_level():
    with pytest.raises(InvalidConfigurationError):
        Settings.from_dict({"log_level": "chatty"})


def test_to_dict():
    data = Settings(ep_host="https://es/").to_dict()
    assert data["ep_host"] == "https://es/"
    assert data["environment"] == "development"
