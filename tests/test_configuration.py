"""
Tests for the configuration management system.
"""

from pathlib import Path

import pytest
import yaml

from plugin_registry.framework.configuration import (
    ConfigurationBuilder,
    EnvironmentConfigurationSource,
    LoggingConfiguration,
    PluginsConfiguration,
    PluginSystemConfiguration,
    YAMLConfigurationSource,
    load_configuration_from_file,
    load_default_configuration,
)
from plugin_registry.infrastructure.exceptions import ConfigurationError


@pytest.fixture
def clean_environment(monkeypatch):
    """Remove any PLUGINS_ variables inherited from the test runner."""
    import os
    for key in list(os.environ):
        if key.startswith("PLUGINS_"):
            monkeypatch.delenv(key)
    return monkeypatch


def write_yaml(path: Path, data) -> Path:
    with open(path, 'w', encoding='utf-8') as f:
        yaml.safe_dump(data, f)
    return path


class TestConfigurationModels:
    """Test configuration data models."""

    def test_plugins_configuration_defaults(self):
        """Defaults match the host's conventional layout."""
        config = PluginsConfiguration()
        assert config.settings_file_name == "plugins.txt"
        assert config.descriptor_file_name == "plugin.txt"
        assert config.about_file_name == "about.txt"
        assert config.asset_directories == ["data", "images", "sounds"]
        assert config.global_settings_path == Path("./resources") / "plugins.txt"
        assert config.local_settings_path == Path("./config") / "plugins.txt"

    def test_file_names_cannot_contain_separators(self):
        """File names are names, not paths."""
        with pytest.raises(ValueError, match="path separators"):
            PluginsConfiguration(settings_file_name="nested/plugins.txt")

    def test_asset_directories_cannot_be_empty(self):
        """At least one asset directory is needed to recognize plugins."""
        with pytest.raises(ValueError):
            PluginsConfiguration(asset_directories=[])

    def test_logging_configuration_levels(self):
        """Only known levels are accepted."""
        assert LoggingConfiguration(level="DEBUG").level == "DEBUG"
        with pytest.raises(ValueError):
            LoggingConfiguration(level="LOUD")

    def test_logging_file_output_requires_path(self):
        """File output needs a file path."""
        with pytest.raises(ValueError, match="file_path is required"):
            LoggingConfiguration(output="file")
        assert LoggingConfiguration(output="both", file_path="plugins.log").file_path == "plugins.log"


class TestConfigurationSources:
    """Test YAML and environment sources."""

    def test_yaml_source_loads_mapping(self, tmp_path):
        """A YAML mapping is returned as a dict."""
        path = write_yaml(tmp_path / "config.yaml", {"config_path": "/home/user/.config/game"})

        assert YAMLConfigurationSource(path).load() == {"config_path": "/home/user/.config/game"}

    def test_yaml_source_missing_file(self, tmp_path):
        """A missing configuration file is a configuration error."""
        with pytest.raises(ConfigurationError) as exc_info:
            YAMLConfigurationSource(tmp_path / "missing.yaml").load()

        assert exc_info.value.error_code == "CONFIG_ERROR"
        assert exc_info.value.context["config_path"].endswith("missing.yaml")

    def test_yaml_source_invalid_yaml(self, tmp_path):
        """Malformed YAML is a configuration error."""
        path = tmp_path / "bad.yaml"
        path.write_text("config_path: [unterminated\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            YAMLConfigurationSource(path).load()

    def test_yaml_source_must_be_mapping(self, tmp_path):
        """A YAML list at the top level is rejected."""
        path = write_yaml(tmp_path / "list.yaml", ["a", "b"])

        with pytest.raises(ConfigurationError, match="mapping"):
            YAMLConfigurationSource(path).load()

    def test_empty_yaml_is_empty_config(self, tmp_path):
        """An empty file loads as no settings."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert YAMLConfigurationSource(path).load() == {}

    def test_environment_source(self, clean_environment):
        """Prefixed variables map onto configuration fields."""
        clean_environment.setenv("PLUGINS_CONFIG_PATH", "/tmp/config")
        clean_environment.setenv("PLUGINS_PLUGIN_SEARCH_PATHS", "/a, /b")
        clean_environment.setenv("PLUGINS_ASSET_DIRECTORIES", "data")
        clean_environment.setenv("PLUGINS_LOGGING_CONFIG_LEVEL", "DEBUG")

        config = EnvironmentConfigurationSource().load()

        assert config["config_path"] == "/tmp/config"
        assert config["plugin_search_paths"] == ["/a", "/b"]
        assert config["asset_directories"] == ["data"]
        assert config["logging_config"] == {"level": "DEBUG"}


class TestPluginSystemConfiguration:
    """Test merging and validation."""

    def test_defaults_without_sources(self):
        """With no sources the model defaults are used."""
        configuration = PluginSystemConfiguration()
        assert configuration.get_plugins_config() == PluginsConfiguration()
        assert configuration.get_raw_config() == {}

    def test_environment_overrides_yaml(self, tmp_path, clean_environment):
        """Higher priority sources win, nested values merge."""
        path = write_yaml(tmp_path / "config.yaml", {
            "resources_path": "/opt/game/resources",
            "config_path": "/yaml/config",
            "logging_config": {"level": "WARNING", "format": "json"},
        })
        clean_environment.setenv("PLUGINS_CONFIG_PATH", "/env/config")
        clean_environment.setenv("PLUGINS_LOGGING_CONFIG_LEVEL", "DEBUG")

        config = load_configuration_from_file(path).get_plugins_config()

        assert config.resources_path == "/opt/game/resources"
        assert config.config_path == "/env/config"
        assert config.logging_config.level == "DEBUG"
        assert config.logging_config.format == "json"
        assert config.local_settings_path == Path("/env/config/plugins.txt")

    def test_invalid_values_raise_configuration_error(self, tmp_path, clean_environment):
        """Validation failures are wrapped with their messages."""
        path = write_yaml(tmp_path / "config.yaml", {"logging_config": {"level": "LOUD"}})

        with pytest.raises(ConfigurationError) as exc_info:
            load_configuration_from_file(path)

        errors = exc_info.value.context["validation_errors"]
        assert any("logging_config.level" in error for error in errors)

    def test_builder_defaults_to_environment(self, clean_environment):
        """Building without sources reads the environment."""
        clean_environment.setenv("PLUGINS_RESOURCES_PATH", "/env/resources")

        config = ConfigurationBuilder().build().get_plugins_config()

        assert config.resources_path == "/env/resources"
        assert load_default_configuration().get_plugins_config().resources_path == "/env/resources"

    def test_reload_picks_up_changes(self, tmp_path, clean_environment):
        """Reloading re-reads every source."""
        path = write_yaml(tmp_path / "config.yaml", {"config_path": "/first"})
        configuration = ConfigurationBuilder().add_yaml_source(path).build()
        assert configuration.get_plugins_config().config_path == "/first"

        write_yaml(path, {"config_path": "/second"})
        configuration.reload_configuration()

        assert configuration.get_plugins_config().config_path == "/second"

    def test_added_source_applies_without_reload(self, tmp_path, clean_environment):
        """A source added after construction is used by the next lookup."""
        configuration = PluginSystemConfiguration()
        assert configuration.get_plugins_config().config_path == "./config"

        path = write_yaml(tmp_path / "config.yaml", {"config_path": "/added"})
        configuration.add_source(YAMLConfigurationSource(path))

        assert configuration.get_plugins_config().config_path == "/added"
        assert configuration.get_raw_config() == {"config_path": "/added"}
