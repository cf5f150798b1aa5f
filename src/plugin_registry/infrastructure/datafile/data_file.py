"""
Data File Reader

Parses the indentation-nested, whitespace-tokenized text format used by
plugin descriptors and plugin settings::

    name "My Plugin"
    dependencies
        "game version" 0.10.0
        requires
            "Other Plugin"

Tokens may be quoted with ``"`` or a backtick to include spaces. A ``#`` at
the start of a token comments out the rest of the line.
"""

import logging
from pathlib import Path
from typing import Iterator, List, Optional, Tuple

from ...domain.interfaces import PathLike
from .data_node import DataNode

logger = logging.getLogger(__name__)

_QUOTES = ('"', '`')


def tokenize(line: str) -> List[str]:
    """Split one line (without its indentation) into tokens."""
    tokens = []
    i = 0
    length = len(line)
    while i < length:
        char = line[i]
        if char.isspace():
            i += 1
            continue
        if char == '#':
            break

        if char in _QUOTES:
            end = line.find(char, i + 1)
            if end == -1:
                end = length
            tokens.append(line[i + 1:end])
            i = end + 1
        else:
            end = i
            while end < length and not line[end].isspace():
                end += 1
            tokens.append(line[i:end])
            i = end
    return tokens


class DataFile:
    """
    A parsed data file. Iterating yields its top-level nodes.

    A missing or unreadable file parses as an empty file.
    """

    def __init__(self, path: Optional[PathLike] = None):
        self.path = Path(path) if path is not None else None
        self._root = DataNode()
        if self.path is not None:
            self.load(self.path)

    @classmethod
    def from_string(cls, text: str) -> 'DataFile':
        data_file = cls()
        data_file.parse(text)
        return data_file

    def load(self, path: PathLike) -> None:
        file_path = Path(path)
        if not file_path.is_file():
            return
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Treating unreadable data file as empty: {file_path}: {e}")
            return
        self.parse(text)

    def parse(self, text: str) -> None:
        """Parse ``text`` and append its top-level nodes to this file."""
        if text.startswith('\ufeff'):
            text = text[1:]

        # (indentation, node) pairs of the open ancestors of the next line.
        stack: List[Tuple[int, DataNode]] = [(-1, self._root)]
        for line_number, line in enumerate(text.split('\n'), start=1):
            line = line.rstrip('\r')
            stripped = line.lstrip(' \t')
            tokens = tokenize(stripped)
            if not tokens:
                continue

            indent = len(line) - len(stripped)
            while stack[-1][0] >= indent:
                stack.pop()
            parent = stack[-1][1]

            node = DataNode(tokens, parent if parent is not self._root else None, line_number)
            parent.children.append(node)
            stack.append((indent, node))

    @property
    def nodes(self) -> List[DataNode]:
        return list(self._root.children)

    def __iter__(self) -> Iterator[DataNode]:
        return iter(self._root.children)

    def __len__(self) -> int:
        return len(self._root.children)
