"""
Infrastructure Layer

File access, the data file codec, structured logging and the exception
hierarchy.
"""

from .exceptions import (
    PluginRegistryException,
    ConfigurationError,
    DataFileError,
    PluginError,
    PluginSettingsError,
)
from .files import LocalFileSystem

__all__ = [
    "PluginRegistryException",
    "ConfigurationError",
    "DataFileError",
    "PluginError",
    "PluginSettingsError",
    "LocalFileSystem",
]
