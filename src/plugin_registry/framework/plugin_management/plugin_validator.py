"""
Plugin Validator Module

Consistency checks for declared plugin dependencies and the predicate that
decides whether a directory holds a plugin at all.
"""

from pathlib import Path
from typing import TYPE_CHECKING, List, Sequence, Tuple

from ...domain.interfaces import FileSystem, PathLike

if TYPE_CHECKING:
    from .plugin_descriptor import PluginDependencies

DEFAULT_ASSET_DIRECTORIES = ("data", "images", "sounds")


class PluginValidator:
    """Validates plugin dependency declarations and plugin directories."""

    @staticmethod
    def validate_dependencies(dependencies: 'PluginDependencies') -> Tuple[List[str], List[str]]:
        """
        Check a dependency declaration for contradictions.

        Every dependency is examined so that all problems are reported at
        once. A name that is both required and optional is only a warning; a
        name that is conflicted and also required or optional is an error.

        Returns:
            Tuple of (errors, warnings) messages
        """
        errors: List[str] = []
        warnings: List[str] = []

        # Required entries cannot repeat, so only optional and conflicted need checking.
        for dependency in sorted(dependencies.optional):
            if dependency in dependencies.required:
                warnings.append(
                    f'Warning: Optional dependency with the name "{dependency}"'
                    ' was already found in required dependencies list.'
                )

        for dependency in sorted(dependencies.conflicted):
            if dependency in dependencies.required:
                errors.append(
                    f'Warning: Conflicts dependency with the name "{dependency}"'
                    ' was already found in required dependencies list.'
                )
            elif dependency in dependencies.optional:
                errors.append(
                    f'Warning: Conflicts dependency with the name "{dependency}"'
                    ' was already found in optional dependencies list.'
                )

        return errors, warnings

    @staticmethod
    def is_plugin_directory(
        file_system: FileSystem,
        path: PathLike,
        asset_directories: Sequence[str] = DEFAULT_ASSET_DIRECTORIES
    ) -> bool:
        """
        A directory holds a plugin if it contains at least one of the asset
        directories, even an empty one.
        """
        return any(file_system.exists(Path(path) / name) for name in asset_directories)
