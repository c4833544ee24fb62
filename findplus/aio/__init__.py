"""Asynchronous implementation of findplus.

This package contains native async/await implementations. Directory reads
run in worker threads; the walk itself stays sequential.
"""

from .core import AsyncTreeAdapter, AsyncTreeWalker
from .adapters import AsyncFileSystemAdapter
from .api import find_async, find_entries_async

__all__ = [
    # Core abstractions
    'AsyncTreeAdapter',
    'AsyncTreeWalker',
    # Adapters
    'AsyncFileSystemAdapter',
    # High-level API
    'find_async',
    'find_entries_async',
]
