"""
Domain Layer

Collaborator interfaces shared by the infrastructure and framework layers.
"""

from .interfaces import ErrorLog, FileSystem, PathLike

__all__ = [
    "ErrorLog",
    "FileSystem",
    "PathLike",
]
