"""
Local file system access.
"""

import logging
from pathlib import Path

from ..domain.interfaces import FileSystem, PathLike

logger = logging.getLogger(__name__)


class LocalFileSystem(FileSystem):
    """FileSystem backed by the local disk."""

    def exists(self, path: PathLike) -> bool:
        return Path(path).exists()

    def read(self, path: PathLike) -> str:
        file_path = Path(path)
        if not file_path.is_file():
            return ""
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Treating unreadable file as empty: {file_path}: {e}")
            return ""
