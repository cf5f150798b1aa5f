"""
Plugin Registry Module

The single source of truth for every plugin known to the host during a
session, keyed by plugin name.
"""

import logging
from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional

from .plugin_descriptor import Plugin

logger = logging.getLogger(__name__)


class PluginRegistry:
    """
    Keyed collection of plugins.

    Looking up an unknown name through :meth:`get_or_create` inserts an
    empty, invalid placeholder which the loader or the settings later fill
    in. The registry is not synchronized; hosts calling it from several
    threads must serialize access themselves.
    """

    def __init__(self):
        self._plugins: Dict[str, Plugin] = {}

    def get_or_create(self, name: str) -> Plugin:
        """Return the plugin registered under ``name``, inserting a placeholder if absent."""
        plugin = self._plugins.get(name)
        if plugin is None:
            plugin = Plugin()
            self._plugins[name] = plugin
        return plugin

    def get(self, name: str) -> Optional[Plugin]:
        """Return the plugin registered under ``name`` without inserting anything."""
        return self._plugins.get(name)

    def all(self) -> Mapping[str, Plugin]:
        """Read-only view of every entry, ordered by name."""
        return MappingProxyType({name: self._plugins[name] for name in sorted(self._plugins)})

    def toggle(self, name: str) -> None:
        """Flip the state the plugin will have after the next restart."""
        plugin = self.get_or_create(name)
        plugin.current_state = not plugin.current_state
        logger.debug(f"Plugin {name!r} toggled to {'enabled' if plugin.current_state else 'disabled'}")

    def has_changed(self) -> bool:
        """True if any plugin was toggled away from its launch state, i.e. a restart is needed."""
        return any(plugin.enabled != plugin.current_state for plugin in self._plugins.values())

    def is_empty(self) -> bool:
        return not self._plugins

    def __len__(self) -> int:
        return len(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._plugins

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._plugins))
