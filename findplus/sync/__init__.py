"""Synchronous implementation of findplus.

All components here operate in a blocking, synchronous manner.
"""

from .core import TreeAdapter, TreeWalker
from .adapters import FileSystemAdapter
from .api import find, find_entries

__all__ = [
    # Core
    'TreeAdapter',
    'TreeWalker',
    # Adapters
    'FileSystemAdapter',
    # API
    'find',
    'find_entries',
]
