"""Tests for configuration loading."""

import pytest

from linkedin_api_mcp.cli import build_client_config
from linkedin_api_mcp.config import AppConfig, load_config
from linkedin_api_mcp.constants import DEFAULT_BASE_URL
from linkedin_api_mcp.exceptions import ConfigurationError

_ENV_VARS = (
    "HARVESTAPI_API_KEY",
    "LINKEDIN_API_KEY",
    "HARVESTAPI_BASE_URL",
    "HARVESTAPI_TIMEOUT",
    "PROXY_URL",
    "HTTP_PROXY",
    "HTTPS_PROXY",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.lower(), raising=False)
    # Keep a stray .env in the working directory out of the picture
    monkeypatch.chdir(tmp_path)


def test_defaults():
    config = AppConfig()
    assert config.api_key == ""
    assert not config.has_api_key
    assert config.base_url == DEFAULT_BASE_URL
    assert config.request_timeout == 30.0
    assert config.proxy_url is None
    assert config.log_level == "WARNING"
    assert config.log_format == "compact"


def test_primary_api_key_wins(monkeypatch):
    monkeypatch.setenv("HARVESTAPI_API_KEY", "primary")
    monkeypatch.setenv("LINKEDIN_API_KEY", "fallback")
    assert AppConfig().api_key == "primary"


def test_fallback_api_key(monkeypatch):
    monkeypatch.setenv("HARVESTAPI_API_KEY", "")
    monkeypatch.setenv("LINKEDIN_API_KEY", "fallback")
    assert AppConfig().api_key == "fallback"


def test_proxy_precedence(monkeypatch):
    monkeypatch.setenv("HTTPS_PROXY", "http://https-proxy:3128")
    assert AppConfig().proxy_url == "http://https-proxy:3128"

    monkeypatch.setenv("HTTP_PROXY", "http://http-proxy:3128")
    assert AppConfig().proxy_url == "http://http-proxy:3128"

    monkeypatch.setenv("PROXY_URL", "http://explicit:3128")
    assert AppConfig().proxy_url == "http://explicit:3128"


def test_api_key_hidden_from_repr(monkeypatch):
    monkeypatch.setenv("HARVESTAPI_API_KEY", "super-secret")
    assert "super-secret" not in repr(AppConfig())


def test_config_is_immutable():
    config = AppConfig()
    with pytest.raises(Exception):
        config.api_key = "changed"


def test_env_values_normalized(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("LOG_FORMAT", "JSON")
    monkeypatch.setenv("HARVESTAPI_TIMEOUT", "12.5")
    config = AppConfig()
    assert config.log_level == "DEBUG"
    assert config.log_format == "json"
    assert config.request_timeout == 12.5


def test_command_line_overrides_environment(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    config = load_config(["--log-level", "DEBUG", "--timeout", "5", "--base-url", "http://localhost:9000"])
    assert config.log_level == "DEBUG"
    assert config.request_timeout == 5.0
    assert config.base_url == "http://localhost:9000"
    assert config.print_config is False


def test_print_config_flag():
    assert load_config(["--print-config"]).print_config is True


def test_invalid_timeout_rejected():
    with pytest.raises(ConfigurationError):
        load_config(["--timeout", "0"])


def test_missing_api_key_only_warns(caplog):
    with caplog.at_level("WARNING"):
        config = load_config([])
    assert not config.has_api_key
    assert "No HarvestAPI key configured" in caplog.text


def test_client_config_snippet_never_contains_key(monkeypatch):
    monkeypatch.setenv("HARVESTAPI_API_KEY", "super-secret")
    snippet = build_client_config(AppConfig())
    entry = snippet["mcpServers"]["linkedin-api-mcp"]
    assert "HARVESTAPI_API_KEY" in entry["env"]
    assert "super-secret" not in str(snippet)
