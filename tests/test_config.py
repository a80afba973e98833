"""Tests for configuration loading."""

import pytest

from business_groups.core import config as config_module
from business_groups.core.config import DEFAULT_TIMEOUT, DEFAULT_URL, APIConfig
from business_groups.core.exceptions import ConfigurationError


class TestAPIConfig:
    def test_defaults(self):
        config = APIConfig.from_env()
        assert config.url == DEFAULT_URL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_env_vars(self, monkeypatch):
        monkeypatch.setenv("ADMIRAL_URL", "https://admiral.example.com/")
        monkeypatch.setenv("ADMIRAL_TIMEOUT", "12.5")
        config = APIConfig.from_env()
        assert config.url == "https://admiral.example.com/"
        assert config.groups_url == "https://admiral.example.com"
        assert config.timeout == 12.5

    def test_bad_timeout(self, monkeypatch):
        monkeypatch.setenv("ADMIRAL_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            APIConfig.from_env()

    def test_yaml_file(self, tmp_path):
        path = tmp_path / "admiral.yaml"
        path.write_text("url: http://yaml.test:8282\ntimeout: 3\n", encoding="utf-8")
        config = APIConfig.load(config_file=path)
        assert config.url == "http://yaml.test:8282"
        assert config.timeout == 3.0

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        path = tmp_path / "admiral.yaml"
        path.write_text("url: http://yaml.test:8282\n", encoding="utf-8")
        monkeypatch.setenv("ADMIRAL_CONFIG", str(path))
        monkeypatch.setenv("ADMIRAL_URL", "http://env.test")
        assert APIConfig.load().url == "http://env.test"

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "admiral.yaml"
        path.write_text("url: [unclosed\n", encoding="utf-8")
        with pytest.raises(ConfigurationError):
            APIConfig.from_file(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            APIConfig.from_file(tmp_path / "missing.yaml")

    def test_reload_config(self, monkeypatch):
        monkeypatch.setattr(config_module, "_config", None)
        monkeypatch.setenv("ADMIRAL_URL", "http://reload.test")
        assert config_module.reload_config().url == "http://reload.test"
        assert config_module.get_config().url == "http://reload.test"
