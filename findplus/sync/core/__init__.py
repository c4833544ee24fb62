"""Core abstractions for synchronous traversal."""

from .adapter import TreeAdapter
from .walker import TreeWalker

__all__ = [
    "TreeAdapter",
    "TreeWalker",
]
