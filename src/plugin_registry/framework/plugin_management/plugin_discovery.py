"""
Plugin Discovery Module

Reads plugin descriptor files into the registry and finds plugin directories
under configured search paths.
"""

import logging
from pathlib import Path
from typing import List, Optional, Sequence

from ...domain.interfaces import ErrorLog, FileSystem, PathLike
from ...infrastructure.datafile import DataFile, DataNode
from ...infrastructure.files import LocalFileSystem
from ...infrastructure.observability.logging import LoggerErrorLog
from .plugin_descriptor import Plugin, PluginDependencies
from .plugin_registry import PluginRegistry
from .plugin_validator import DEFAULT_ASSET_DIRECTORIES, PluginValidator

logger = logging.getLogger(__name__)

UNRECOGNIZED_ATTRIBUTE = "Skipping unrecognized attribute:"


class PluginDiscovery:
    """
    Loads plugin metadata into a registry.

    Plugin names are unique across all loads made through the same
    registry: the first directory to claim a name keeps it.
    """

    def __init__(
        self,
        registry: PluginRegistry,
        file_system: Optional[FileSystem] = None,
        error_log: Optional[ErrorLog] = None,
        descriptor_file_name: str = "plugin.txt",
        about_file_name: str = "about.txt",
        asset_directories: Sequence[str] = DEFAULT_ASSET_DIRECTORIES
    ):
        self.registry = registry
        self._files = file_system or LocalFileSystem()
        self._error_log = error_log or LoggerErrorLog()
        self.descriptor_file_name = descriptor_file_name
        self.about_file_name = about_file_name
        self.asset_directories = tuple(asset_directories)

    def is_plugin_directory(self, path: PathLike) -> bool:
        """Whether ``path`` contains any of the asset directories that mark a plugin."""
        return PluginValidator.is_plugin_directory(self._files, path, self.asset_directories)

    def discover(self, search_paths: Sequence[PathLike]) -> List[Plugin]:
        """Load every plugin directory found directly under the search paths, in name order."""
        loaded = []

        for search_path in (Path(p) for p in search_paths):
            if not search_path.is_dir():
                logger.warning(f"Plugin search path does not exist: {search_path}")
                continue

            logger.info(f"Discovering plugins in: {search_path}")
            for item in sorted(search_path.iterdir()):
                if not item.is_dir() or not self.is_plugin_directory(item):
                    continue
                plugin = self.load(item)
                if plugin is not None:
                    loaded.append(plugin)

        logger.info(f"Loaded {len(loaded)} plugins")
        return loaded

    def load(self, directory: PathLike) -> Optional[Plugin]:
        """
        Load the plugin in ``directory`` into the registry.

        The plugin is named by the ``name`` entry of its descriptor file, or
        after the directory when there is none. Returns the registered plugin,
        or None if another plugin already holds the name or the plugin's
        dependencies contradict each other.
        """
        path = str(directory)
        directory = Path(directory)
        name = directory.name

        descriptor_path = directory / self.descriptor_file_name
        about_text = ""
        version = ""
        authors = set()
        tags = set()
        dependencies = PluginDependencies()

        has_name = False
        for child in DataFile.from_string(self._files.read(descriptor_path)):
            key = child.token(0)
            if key == "name" and child.size() >= 2:
                name = child.token(1)
                has_name = True
            elif key == "about" and child.size() >= 2:
                about_text += child.token(1) + '\n'
            elif key == "version" and child.size() >= 2:
                version = child.token(1)
            elif key == "authors" and child.has_children():
                authors.update(grand.token(0) for grand in child)
            elif key == "tags" and child.has_children():
                tags.update(grand.token(0) for grand in child)
            elif key == "dependencies" and child.has_children():
                self._parse_dependencies(child, dependencies)
            else:
                self._error_log.log_error(child.trace(UNRECOGNIZED_ATTRIBUTE))

        if self._files.exists(descriptor_path) and not has_name:
            self._error_log.log_error(
                f'Warning: Missing required "name" field inside {self.descriptor_file_name}'
            )

        existing = self.registry.get(name)
        if existing is not None and existing.is_valid():
            self._error_log.log_error(
                f'Warning: Skipping plugin located at "{path}" because another plugin'
                f' with the same name has already been loaded from: "{existing.path}".'
            )
            return None

        if not dependencies.is_valid(self._error_log):
            self._error_log.log_error(
                f'Warning: Skipping plugin located at "{path}"'
                ' because plugin has errors in its dependencies.'
            )
            return None

        # Keeps any state already read from the settings files for this name.
        plugin = self.registry.get_or_create(name)
        plugin.name = name
        plugin.path = path
        # Plugins without "about" entries may still ship the older about file.
        plugin.about_text = about_text or self._files.read(directory / self.about_file_name)
        plugin.version = version
        plugin.authors = authors
        plugin.tags = tags
        plugin.dependencies = dependencies

        logger.debug(f"Loaded plugin {name!r} from {path}")
        return plugin

    def _parse_dependencies(self, node: DataNode, dependencies: PluginDependencies) -> None:
        targets = {
            "requires": dependencies.required,
            "optional": dependencies.optional,
            "conflicts": dependencies.conflicted,
        }
        for grand in node:
            key = grand.token(0)
            if key == "game version" and grand.size() >= 2:
                dependencies.game_version = grand.token(1)
            elif key in targets and grand.has_children():
                targets[key].update(great.token(0) for great in grand)
            else:
                self._error_log.log_error(grand.trace(UNRECOGNIZED_ATTRIBUTE))
