"""
Data File Writer

Serializes nodes in the indentation-nested data file format read by
:class:`DataFile`. Children are written one tab deeper than their parent.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional

from ...domain.interfaces import PathLike
from ..exceptions import DataFileError

logger = logging.getLogger(__name__)


def format_token(value: Any) -> str:
    """Render one value as a data file token, quoting it when needed."""
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return repr(value)

    text = str(value)
    if '"' in text:
        if '`' in text:
            # No quoting can hold both quote characters.
            logger.warning(f"Dropping backticks from data file token: {text!r}")
            text = text.replace('`', '')
        return f"`{text}`"
    if not text or text[0] in '#`' or any(char.isspace() for char in text):
        return f'"{text}"'
    return text


class DataWriter:
    """
    Buffers data file lines and writes them out on :meth:`save`.

    Usable as a context manager, in which case the file is saved when the
    block exits without an exception::

        with DataWriter(path) as out:
            out.write("state")
            out.begin_child()
            out.write("My Plugin", True)
            out.end_child()
    """

    INDENT = '\t'

    def __init__(self, path: Optional[PathLike] = None):
        self.path = Path(path) if path is not None else None
        self._lines: List[str] = []
        self._depth = 0

    def write(self, *tokens: Any) -> None:
        """Write one node made of the given tokens at the current depth."""
        line = ' '.join(format_token(token) for token in tokens)
        self._lines.append(self.INDENT * self._depth + line if line else "")

    def begin_child(self) -> None:
        self._depth += 1

    def end_child(self) -> None:
        if self._depth == 0:
            raise DataFileError(
                "end_child() called without a matching begin_child()",
                file_path=str(self.path) if self.path else None
            )
        self._depth -= 1

    def get_string(self) -> str:
        """Return everything written so far as data file text."""
        if not self._lines:
            return ""
        return '\n'.join(self._lines) + '\n'

    def save(self) -> None:
        """Write the buffered text to :attr:`path`, creating parent directories."""
        if self.path is None:
            raise DataFileError("DataWriter has no output path")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, 'w', encoding='utf-8') as f:
                f.write(self.get_string())
        except OSError as e:
            raise DataFileError(
                f"Failed to write data file: {self.path}",
                file_path=str(self.path),
                cause=e
            ) from e

        logger.debug(f"Wrote {len(self._lines)} lines to {self.path}")

    def __enter__(self) -> 'DataWriter':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if exc_type is None:
            self.save()
