"""
Plugin Settings Module

Persists which plugins are enabled. Settings are read from a global file
shipped with the host and then from the user's local file, so local entries
override global ones; only the local file is ever written.

File format::

    state
        "My Plugin" 1
        "Other Plugin" 0
"""

import logging
from pathlib import Path
from typing import Optional

from ...domain.interfaces import ErrorLog, FileSystem, PathLike
from ...infrastructure.datafile import DataFile, DataWriter
from ...infrastructure.exceptions import DataFileError, PluginSettingsError
from ...infrastructure.files import LocalFileSystem
from ...infrastructure.observability.logging import LoggerErrorLog
from .plugin_registry import PluginRegistry

logger = logging.getLogger(__name__)

STATE_KEY = "state"


class PluginSettings:
    """
    Loads and saves the enabled state of the plugins in a registry.

    Settings are read through the file system collaborator; saving always
    writes the local file on disk.
    """

    def __init__(
        self,
        registry: PluginRegistry,
        global_path: PathLike,
        local_path: PathLike,
        error_log: Optional[ErrorLog] = None,
        file_system: Optional[FileSystem] = None
    ):
        self.registry = registry
        self.global_path = Path(global_path)
        self.local_path = Path(local_path)
        self._error_log = error_log or LoggerErrorLog()
        self._files = file_system or LocalFileSystem()

    def load_settings(self) -> None:
        """Apply the global and then the local settings file to the registry."""
        self._load_settings_from_file(self.global_path)
        self._load_settings_from_file(self.local_path)

    def _load_settings_from_file(self, path: Path) -> None:
        applied = 0
        for node in DataFile.from_string(self._files.read(path)):
            if node.token(0) != STATE_KEY:
                continue

            for child in node:
                if child.size() != 2:
                    continue
                if not child.is_bool(1):
                    self._error_log.log_error(child.trace("Expected a boolean plugin state:"))

                # Entries are keyed by the name in the file, which may not match any loaded plugin.
                plugin = self.registry.get_or_create(child.token(0))
                plugin.enabled = child.bool_value(1)
                plugin.current_state = plugin.enabled
                applied += 1

        logger.debug(f"Applied {applied} plugin states from {path}")

    def save(self) -> None:
        """
        Write the current state of every valid plugin to the local settings
        file. Nothing is written when the registry is empty.
        """
        if self.registry.is_empty():
            return

        try:
            with DataWriter(self.local_path) as out:
                out.write(STATE_KEY)
                out.begin_child()
                for name, plugin in self.registry.all().items():
                    if plugin.is_valid():
                        out.write(name, plugin.current_state)
                out.end_child()
        except DataFileError as e:
            self._error_log.log_error(f"Failed to save plugin settings to \"{self.local_path}\": {e}")
            raise PluginSettingsError(
                "Failed to save plugin settings",
                settings_path=str(self.local_path),
                cause=e
            ) from e

        logger.info(f"Plugin settings saved to {self.local_path}")
