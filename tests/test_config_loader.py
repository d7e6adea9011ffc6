"""Tests for configuration loading."""

import pytest

from berth import config as config_module
from berth.config import load_config
from berth.errors import ConfigError


@pytest.fixture
def config_file(tmp_path):
    """Write a config file and return its path."""
    path = tmp_path / "berth.yaml"
    path.write_text(
        "name: shop\n"
        "version: '1.4'\n"
        "port: 8000\n"
        "log_level: debug\n"
        "runtime:\n"
        "  docker_host: unix:///var/run/docker.sock\n"
        "  removal_timeout: 10\n"
    )
    return path


@pytest.fixture
def no_default_file(tmp_path, monkeypatch):
    """Point the default config location at a missing file."""
    monkeypatch.setattr(config_module, "DEFAULT_CONFIG_FILE", tmp_path / "missing.yaml")


class TestLoadConfig:
    """Test load_config."""

    def test_load_from_file(self, config_file):
        config = load_config(config_file)

        assert config.name == "shop"
        assert config.version == "1.4"
        assert config.port == 8000
        assert config.log_level == "DEBUG"
        assert config.runtime.docker_host == "unix:///var/run/docker.sock"
        assert config.runtime.removal_timeout == 10.0

    def test_overrides_win(self, config_file):
        config = load_config(config_file, version="1.5", port=9000, removal_timeout=0)

        assert config.version == "1.5"
        assert config.port == 9000
        assert config.runtime.removal_timeout == 0
        assert config.runtime.docker_host == "unix:///var/run/docker.sock"

    def test_none_overrides_ignored(self, config_file):
        config = load_config(config_file, version=None, port=None, docker_host=None)

        assert config.version == "1.4"
        assert config.port == 8000
        assert config.runtime.docker_host == "unix:///var/run/docker.sock"

    def test_default_file_used(self, config_file, monkeypatch):
        monkeypatch.setattr(config_module, "DEFAULT_CONFIG_FILE", config_file)

        assert load_config().name == "shop"

    def test_overrides_only(self, no_default_file):
        config = load_config(name="app", version="1.0", port=80)

        assert config.name == "app"
        assert config.runtime.docker_host is None

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml")

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")

        config = load_config(path, name="app")

        assert config.name == "app"
        assert config.version is None

    def test_non_mapping_file(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            load_config(path)

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("name: [unclosed\n")

        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(path)

    def test_invalid_values(self, config_file):
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(config_file, port=99999)

    def test_missing_name(self, no_default_file):
        with pytest.raises(ConfigError):
            load_config(version="1.0")
