"""
Plugin Management System

Plugin metadata parsing, dependency validation, the plugin registry and
persistence of each plugin's enabled state.
"""

from .plugin_descriptor import Plugin, PluginDependencies
from .plugin_validator import PluginValidator
from .plugin_registry import PluginRegistry
from .plugin_discovery import PluginDiscovery
from .plugin_settings import PluginSettings

__all__ = [
    'Plugin',
    'PluginDependencies',
    'PluginValidator',
    'PluginRegistry',
    'PluginDiscovery',
    'PluginSettings',
]
