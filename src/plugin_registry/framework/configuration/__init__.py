"""
Configuration Management System

Type-safe configuration with YAML and environment variable sources merged
by priority.
"""

from .models import (
    LoggingConfiguration,
    PluginsConfiguration
)

from .sources import (
    ConfigurationSource,
    YAMLConfigurationSource,
    EnvironmentConfigurationSource
)

from .core import PluginSystemConfiguration

from .builder import ConfigurationBuilder

from .utils import (
    load_configuration_from_file,
    load_default_configuration
)

__all__ = [
    # Models
    'LoggingConfiguration',
    'PluginsConfiguration',

    # Sources
    'ConfigurationSource',
    'YAMLConfigurationSource',
    'EnvironmentConfigurationSource',

    # Core
    'PluginSystemConfiguration',

    # Builder
    'ConfigurationBuilder',

    # Utilities
    'load_configuration_from_file',
    'load_default_configuration'
]
