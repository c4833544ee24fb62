"""Adapters providing filesystem access to the walker."""

from .filesystem import FileSystemAdapter

__all__ = [
    "FileSystemAdapter",
]
