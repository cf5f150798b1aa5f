"""
Configuration builder for creating PluginSystemConfiguration instances.
"""

from typing import List, Union
from pathlib import Path

from .core import PluginSystemConfiguration
from .sources import ConfigurationSource, YAMLConfigurationSource, EnvironmentConfigurationSource


class ConfigurationBuilder:
    """
    Builder for creating PluginSystemConfiguration instances with multiple sources.
    """

    def __init__(self):
        self._sources: List[ConfigurationSource] = []

    def add_yaml_source(self, path: Union[str, Path], priority: int = 100) -> 'ConfigurationBuilder':
        """
        Add a YAML configuration source.

        Args:
            path: Path to the YAML configuration file
            priority: Priority of this source (higher = more important)
        """
        self._sources.append(YAMLConfigurationSource(path, priority))
        return self

    def add_environment_source(self, prefix: str = "PLUGINS_", priority: int = 200) -> 'ConfigurationBuilder':
        """
        Add environment variable configuration source.

        Args:
            prefix: Environment variable prefix (default: PLUGINS_)
            priority: Priority of this source (higher = more important)
        """
        self._sources.append(EnvironmentConfigurationSource(prefix, priority))
        return self

    def add_source(self, source: ConfigurationSource) -> 'ConfigurationBuilder':
        self._sources.append(source)
        return self

    def build(self) -> PluginSystemConfiguration:
        """Build the configuration, defaulting to environment variables when no source was added."""
        if not self._sources:
            self.add_environment_source()

        return PluginSystemConfiguration(self._sources.copy())
