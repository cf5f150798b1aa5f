"""
Plugin System - main orchestration class

Wires configuration, the registry, metadata loading and settings
persistence together for a host application.
"""

import logging
from typing import List, Optional, Sequence

from ..domain.interfaces import ErrorLog, FileSystem, PathLike
from ..infrastructure.observability.logging import ROOT_LOGGER_NAME, LoggerErrorLog, configure_logging, get_logger
from .configuration import PluginSystemConfiguration
from .plugin_management import Plugin, PluginDiscovery, PluginRegistry, PluginSettings


class PluginSystem:
    """
    Facade over the plugin registry for a host application.

    Typical use::

        plugins = PluginSystem(load_configuration_from_file("plugins.yaml"))
        plugins.initialize()
        ...
        plugins.toggle("My Plugin")
        if plugins.has_changed():
            notify_restart_required()
        ...
        plugins.shutdown()
    """

    def __init__(
        self,
        configuration: Optional[PluginSystemConfiguration] = None,
        file_system: Optional[FileSystem] = None,
        error_log: Optional[ErrorLog] = None,
        setup_logging: bool = True
    ):
        self.configuration = configuration or PluginSystemConfiguration()
        config = self.configuration.get_plugins_config()

        if setup_logging:
            self.plugin_logger = configure_logging(config.logging_config)
        else:
            self.plugin_logger = get_logger(ROOT_LOGGER_NAME)
        self.error_log = error_log or LoggerErrorLog(self.plugin_logger)
        self.logger = logging.getLogger(__name__)

        self.registry = PluginRegistry()
        self.discovery = PluginDiscovery(
            self.registry,
            file_system=file_system,
            error_log=self.error_log,
            descriptor_file_name=config.descriptor_file_name,
            about_file_name=config.about_file_name,
            asset_directories=config.asset_directories
        )
        self.settings = PluginSettings(
            self.registry,
            global_path=config.global_settings_path,
            local_path=config.local_settings_path,
            error_log=self.error_log,
            file_system=file_system
        )
        self._initialized = False

    def initialize(self, search_paths: Optional[Sequence[PathLike]] = None) -> List[Plugin]:
        """
        Load every plugin under the search paths, then apply the saved
        enabled states.

        Args:
            search_paths: Directories containing plugin directories; defaults
                to the configured ``plugin_search_paths``

        Returns:
            The plugins that were loaded
        """
        if self._initialized:
            self.logger.warning("Plugin system is already initialized")
            return [plugin for plugin in self.registry.all().values() if plugin.is_valid()]

        if search_paths is None:
            search_paths = self.configuration.get_plugins_config().plugin_search_paths

        # Diagnostics from one startup share a correlation ID.
        with self.plugin_logger.correlation_context():
            loaded = self.discovery.discover(search_paths)
            self.settings.load_settings()
        self._initialized = True

        self.logger.info(
            "Plugin system initialized",
            extra={"loaded_plugins": len(loaded), "registry_entries": len(self.registry)}
        )
        return loaded

    def shutdown(self) -> None:
        """Save the current plugin states."""
        self.settings.save()
        self.logger.info("Plugin system shutdown completed")

    def toggle(self, name: str) -> None:
        self.registry.toggle(name)

    def has_changed(self) -> bool:
        return self.registry.has_changed()
