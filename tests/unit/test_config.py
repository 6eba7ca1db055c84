"""
Unit tests for Config module.

Tests configuration loading, dataclass behavior, and defaults.
"""

import json

from reddit_fetcher.config import (
    Config,
    ApiConfig,
    PagingConfig,
    AuthConfig,
    load_config,
    get_config,
    set_config,
)


class TestApiConfig:
    """Test ApiConfig dataclass."""

    def test_default_values(self):
        config = ApiConfig()
        assert config.base_url == "https://oauth.reddit.com"
        assert config.timeout == 30.0
        assert config.connect_timeout == 10.0
        assert config.user_agent.startswith("python:reddit_fetcher:")


class TestPagingConfig:
    """Test PagingConfig dataclass."""

    def test_default_values(self):
        assert PagingConfig().default_limit == 25


class TestAuthConfig:
    """Test AuthConfig dataclass."""

    def test_resolve_token_from_env(self, monkeypatch):
        monkeypatch.setenv("MY_TOKEN", "abc")
        assert AuthConfig(token_env="MY_TOKEN").resolve_token() == "abc"

    def test_resolve_token_missing(self, monkeypatch):
        monkeypatch.delenv("MY_TOKEN", raising=False)
        assert AuthConfig(token_env="MY_TOKEN").resolve_token() is None

    def test_empty_token_is_missing(self, monkeypatch):
        monkeypatch.setenv("MY_TOKEN", "")
        assert AuthConfig(token_env="MY_TOKEN").resolve_token() is None


class TestLoadConfig:
    """Test load_config function."""

    def test_load_nonexistent_file_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "nonexistent.json")

        assert isinstance(config, Config)
        assert config.api.base_url == "https://oauth.reddit.com"
        assert config.paging.default_limit == 25
        assert config.auth.token_env == "REDDIT_ACCESS_TOKEN"

    def test_load_full_config(self, tmp_path):
        config_data = {
            "api": {
                "base_url": "https://oauth.example.test",
                "timeout": 12.5,
                "connect_timeout": 3.0,
                "user_agent": "python:custom:1.0",
            },
            "paging": {"default_limit": 100},
            "auth": {"token_env": "CUSTOM_TOKEN"},
        }
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps(config_data))

        config = load_config(config_path)

        assert config.api.base_url == "https://oauth.example.test"
        assert config.api.timeout == 12.5
        assert config.api.connect_timeout == 3.0
        assert config.api.user_agent == "python:custom:1.0"
        assert config.paging.default_limit == 100
        assert config.auth.token_env == "CUSTOM_TOKEN"

    def test_load_partial_config(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"paging": {"default_limit": 10}}))

        config = load_config(config_path)

        assert config.paging.default_limit == 10
        assert config.api.timeout == 30.0
        assert config.auth.token_env == "REDDIT_ACCESS_TOKEN"

    def test_missing_keys_in_section_use_defaults(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"api": {"timeout": 60.0}}))

        config = load_config(config_path)

        assert config.api.timeout == 60.0
        assert config.api.base_url == "https://oauth.reddit.com"

    def test_unknown_keys_are_ignored(self, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({
            "api": {"timeout": 15.0, "retries": 3},
            "storage": {"dir": "data"},
        }))

        config = load_config(config_path)

        assert config.api.timeout == 15.0
        assert not hasattr(config.api, "retries")


class TestConfigSingleton:
    """Test get_config / set_config."""

    def test_get_config_is_cached(self):
        assert get_config() is get_config()

    def test_set_config_overrides(self, test_config):
        set_config(test_config)
        assert get_config() is test_config

    def test_set_config_none_reloads(self, test_config):
        set_config(test_config)
        set_config(None)
        assert get_config() is not test_config
