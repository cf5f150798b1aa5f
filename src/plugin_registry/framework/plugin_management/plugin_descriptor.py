"""
Plugin Descriptor Module

Defines data structures for plugin metadata and dependency declarations.
"""

from dataclasses import dataclass, field
from typing import Optional, Set

from ...domain.interfaces import ErrorLog
from .plugin_validator import PluginValidator


@dataclass
class PluginDependencies:
    """Names of the plugins a plugin requires, can use, or cannot run alongside."""
    game_version: str = ""
    required: Set[str] = field(default_factory=set)
    optional: Set[str] = field(default_factory=set)
    conflicted: Set[str] = field(default_factory=set)

    def is_empty(self) -> bool:
        """True if no dependency of any kind is declared, whatever the game version."""
        return not (self.required or self.optional or self.conflicted)

    def is_valid(self, error_log: Optional[ErrorLog] = None) -> bool:
        """
        Check for contradictory declarations, logging each problem found.

        A conflicted name that is also required or optional makes the
        declaration invalid. A name both required and optional only produces
        a warning.
        """
        errors, warnings = PluginValidator.validate_dependencies(self)
        if error_log is not None:
            for message in warnings + errors:
                error_log.log_error(message)
        return not errors


@dataclass
class Plugin:
    """
    A plugin known to the registry.

    ``enabled`` is the state the plugin had when the host launched;
    ``current_state`` is the state the user has toggled to, which takes
    effect after a restart.
    """
    name: str = ""
    path: str = ""
    about_text: str = ""
    version: str = ""
    authors: Set[str] = field(default_factory=set)
    tags: Set[str] = field(default_factory=set)
    dependencies: PluginDependencies = field(default_factory=PluginDependencies)
    enabled: bool = True
    current_state: bool = True

    def is_valid(self) -> bool:
        """A plugin is valid once its metadata has been loaded, i.e. it has a name."""
        return bool(self.name)
