"""TreeAdapter abstraction for findplus.

The adapter is the only I/O boundary of a walk. It knows how to stat the root
and how to list a directory; the walker decides everything else. Swapping the
adapter lets the same walk run against the real filesystem or an in-memory
tree.
"""

import os
from abc import ABC, abstractmethod
from typing import Iterable

from ..._common.entry import ChildEntry


class TreeAdapter(ABC):
    """Abstract adapter providing the two filesystem primitives a walk needs."""

    @abstractmethod
    def stat_root(self, path: str) -> os.stat_result:
        """Stat the traversal root, following symbolic links.

        Args:
            path: Absolute root path

        Returns:
            Stat result of the root (or its link target)

        Raises:
            FileNotFoundError: If the root does not exist
            OSError: For any other failure
        """
        pass

    @abstractmethod
    def get_children(self, path: str) -> Iterable[ChildEntry]:
        """List the immediate children of a directory.

        Children are returned in enumeration order. Each child's ``mode``
        must come from an lstat-style call so symbolic links are reported
        as links, never as their targets.

        Args:
            path: Absolute directory path

        Returns:
            Iterable of ChildEntry records

        Raises:
            OSError: If the directory or one of its children cannot be read
        """
        pass
