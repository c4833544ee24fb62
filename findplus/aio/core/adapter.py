"""Async tree adapter abstraction.

Async counterpart of the sync TreeAdapter. get_children streams children
as an AsyncIterator so adapters can do their I/O off the event loop.
"""

import os
from abc import ABC, abstractmethod
from typing import AsyncIterator

from ..._common.entry import ChildEntry


class AsyncTreeAdapter(ABC):
    """Abstract base class for async adapters."""

    @abstractmethod
    async def stat_root(self, path: str) -> os.stat_result:
        """Stat the traversal root, following symbolic links.

        Raises:
            FileNotFoundError: If the root does not exist
            OSError: For any other failure
        """
        pass

    @abstractmethod
    async def get_children(self, path: str) -> AsyncIterator[ChildEntry]:
        """Get children of a directory as an async stream.

        Args:
            path: Absolute directory path

        Yields:
            ChildEntry records with lstat modes, in enumeration order
        """
        pass

    async def close(self):
        """Clean up adapter resources.

        Override if adapter needs cleanup.
        """
        pass

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
