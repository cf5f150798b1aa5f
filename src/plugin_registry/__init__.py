"""
Plugin Registry - discovery, metadata, dependency validation and
enabled-state persistence for host application plugins.
"""

__version__ = "1.0.0"

from .framework import (
    PluginSystem,
    Plugin,
    PluginDependencies,
    PluginDiscovery,
    PluginRegistry,
    PluginSettings,
)

__all__ = [
    "PluginSystem",
    "Plugin",
    "PluginDependencies",
    "PluginDiscovery",
    "PluginRegistry",
    "PluginSettings",
]
