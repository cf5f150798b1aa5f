"""
Data file reading and writing.
"""

from .data_node import DataNode
from .data_file import DataFile, tokenize
from .data_writer import DataWriter, format_token

__all__ = [
    'DataNode',
    'DataFile',
    'DataWriter',
    'tokenize',
    'format_token',
]
