"""
Core Domain Interfaces

Defines the collaborators the plugin registry calls into. Hosts may supply
their own implementations; the infrastructure layer provides defaults.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

PathLike = Union[str, Path]


class ErrorLog(ABC):
    """
    Sink for plugin diagnostics.

    Logging is fire-and-forget: an implementation must not raise and must
    not alter the caller's control flow.
    """

    @abstractmethod
    def log_error(self, message: str) -> None:
        """
        Record a diagnostic message.

        Args:
            message: Human-readable diagnostic text
        """
        pass


class FileSystem(ABC):
    """Read-only view of the file system used while loading plugins."""

    @abstractmethod
    def exists(self, path: PathLike) -> bool:
        """
        Check whether a file or directory exists.

        Returns:
            bool: True if something exists at ``path``
        """
        pass

    @abstractmethod
    def read(self, path: PathLike) -> str:
        """
        Read a whole text file.

        Returns:
            str: The file contents, or an empty string if the file is
            missing or cannot be read
        """
        pass
