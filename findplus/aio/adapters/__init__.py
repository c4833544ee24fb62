"""Async adapters providing filesystem access to the walker."""

from .filesystem import AsyncFileSystemAdapter

__all__ = [
    'AsyncFileSystemAdapter',
]
