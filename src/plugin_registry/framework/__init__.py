"""
Framework Layer - plugin registry services

Configuration management, plugin management and the PluginSystem facade.
"""

from .plugin_system import PluginSystem
from .configuration import PluginSystemConfiguration, ConfigurationBuilder
from .plugin_management import (
    Plugin,
    PluginDependencies,
    PluginDiscovery,
    PluginRegistry,
    PluginSettings,
    PluginValidator,
)

__all__ = [
    "PluginSystem",
    "PluginSystemConfiguration",
    "ConfigurationBuilder",
    "Plugin",
    "PluginDependencies",
    "PluginDiscovery",
    "PluginRegistry",
    "PluginSettings",
    "PluginValidator",
]
