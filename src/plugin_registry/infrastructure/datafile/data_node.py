"""
Data Node

One line of a data file: its tokens plus the more deeply indented lines
nested beneath it.
"""

import re
from typing import Iterator, List, Optional, Sequence

from .data_writer import format_token

_NUMBER_PATTERN = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?$')
_TRUE_TOKENS = ("true", "1")
_FALSE_TOKENS = ("false", "0")


class DataNode:
    """A tokenized line of a data file and its children."""

    def __init__(
        self,
        tokens: Optional[Sequence[str]] = None,
        parent: Optional['DataNode'] = None,
        line_number: int = 0
    ):
        self.tokens: List[str] = list(tokens or [])
        self.children: List['DataNode'] = []
        self.parent = parent
        self.line_number = line_number

    def size(self) -> int:
        return len(self.tokens)

    def token(self, index: int) -> str:
        """Return the token at ``index``, or an empty string if there is none."""
        if 0 <= index < len(self.tokens):
            return self.tokens[index]
        return ""

    def has_children(self) -> bool:
        return bool(self.children)

    def is_number(self, index: int) -> bool:
        return bool(_NUMBER_PATTERN.match(self.token(index)))

    def value(self, index: int) -> float:
        """Numeric value of a token; non-numeric tokens read as 0."""
        if not self.is_number(index):
            return 0.0
        return float(self.token(index))

    def is_bool(self, index: int) -> bool:
        token = self.token(index)
        return token in _TRUE_TOKENS or token in _FALSE_TOKENS or self.is_number(index)

    def bool_value(self, index: int) -> bool:
        """
        Boolean value of a token.

        ``true``/``1`` and ``false``/``0`` are recognized, any other number is
        true when non-zero, and anything else reads as false.
        """
        token = self.token(index)
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
        return self.value(index) != 0

    def trace(self, message: str = "") -> str:
        """
        Format ``message`` followed by this node and its ancestors, one line
        each, indented by depth, for use in diagnostics.
        """
        lineage = []
        node: Optional[DataNode] = self
        while node is not None and node.tokens:
            lineage.append(node)
            node = node.parent
        lineage.reverse()

        lines = [message] if message else []
        for depth, ancestor in enumerate(lineage):
            text = ' '.join(format_token(token) for token in ancestor.tokens)
            lines.append(f"L{ancestor.line_number}: {'  ' * depth}{text}")
        return '\n'.join(lines)

    def __iter__(self) -> Iterator['DataNode']:
        return iter(self.children)

    def __repr__(self) -> str:
        return f"DataNode(tokens={self.tokens!r}, children={len(self.children)})"
