import hashlib
import logging

import pytest
from click.testing import CliRunner

from elasticpress_config.cli import cli


@pytest.fixture
def runner(tmp_path, monkeypatch):
    monkeypatch.setenv("EP_SETTINGS_DIR", str(tmp_path / "settings"))
    monkeypatch.setenv("EP_SITE_URL", "http://example.com")
    monkeypatch.setenv("EP_NETWORK_URL", "https://www.My-Site.org")
    return CliRunner()


def test_set_host_persists(runner):
    result = runner.invoke(cli, ["set-host", "search.example.com"])
    assert result.exit_code == 0
    assert "http://search.example.com:9200" in result.output

    result = runner.invoke(cli, ["index-url", "a", "", "b"])
    assert result.exit_code == 0
    assert result.output.strip() == "http://search.example.com:9200/a,b"


def test_set_port(runner):
    result = runner.invoke(cli, ["set-port", "9201"])
    assert result.exit_code == 0
    assert "9201" in result.output


def test_set_invalid_port(runner):
    result = runner.invoke(cli, ["set-port", "123456"])
    assert result.exit_code == 1
    assert "Invalid port" in result.output


def test_index_name(runner):
    result = runner.invoke(cli, ["index-name"])
    assert result.exit_code == 0
    assert result.output.strip() == hashlib.sha1(b"http://example.com").hexdigest() + "-1"


def test_index_name_unknown_site(runner):
    result = runner.invoke(cli, ["index-name", "--site-id", "9"])
    assert result.exit_code == 1


def test_alias(runner):
    result = runner.invoke(cli, ["alias"])
    assert result.output.strip() == "MySiteorg-global"


def test_post_types_and_status(runner):
    result = runner.invoke(cli, ["post-types"])
    assert result.output.split() == ["post", "page", "attachment"]

    result = runner.invoke(cli, ["post-status"])
    assert result.output.split() == ["publish"]


def test_related_posts(runner):
    result = runner.invoke(cli, ["related-posts", "--enable", "--count", "4"])
    assert result.exit_code == 0
    assert "enabled" in result.output
    assert "count: 4" in result.output

    result = runner.invoke(cli, ["related-posts", "--count", "40"])
    assert result.exit_code == 1


def test_show(runner):
    result = runner.invoke(cli, ["show"])
    assert result.exit_code == 0
    assert "network_alias" in result.output


def test_bad_config_file(runner):
    result = runner.invoke(cli, ["--config-file", "missing.yaml", "show"])
    assert result.exit_code == 1
    assert "not found" in result.output


def test_log_level_setting_applies(runner, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    result = runner.invoke(cli, ["post-status"])
    assert result.exit_code == 0
    assert logging.getLogger().level == logging.DEBUG


def test_verbose_flag_overrides_log_level(runner, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    result = runner.invoke(cli, ["-v", "post-status"])
    assert result.exit_code == 0
    assert logging.getLogger().level == logging.INFO
