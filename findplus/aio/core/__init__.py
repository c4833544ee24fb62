"""Core abstractions for async traversal."""

from .adapter import AsyncTreeAdapter
from .walker import AsyncTreeWalker

__all__ = [
    'AsyncTreeAdapter',
    'AsyncTreeWalker',
]
