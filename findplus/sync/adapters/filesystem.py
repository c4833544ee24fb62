"""Filesystem adapter for findplus.

Reads directories with os.scandir so each child's lstat result comes from
the cached DirEntry rather than a second path lookup.
"""

import os
from typing import List

from ..._common.entry import ChildEntry
from ..core.adapter import TreeAdapter


class FileSystemAdapter(TreeAdapter):
    """Adapter for the local filesystem.

    Symbolic links below the root are reported as links and never followed.
    The root itself is stat-ed through links, so a link to a directory is a
    valid root.
    """

    def stat_root(self, path: str) -> os.stat_result:
        """Stat the root, following symlinks."""
        return os.stat(path)

    def get_children(self, path: str) -> List[ChildEntry]:
        """List children of a directory with their lstat modes.

        The listing is materialized before returning so the scandir handle
        is released before the walker descends.
        """
        children = []
        with os.scandir(path) as iterator:
            for entry in iterator:
                mode = entry.stat(follow_symlinks=False).st_mode
                children.append(ChildEntry(entry.name, entry.path, mode))
        return children

    def __repr__(self) -> str:
        return "FileSystemAdapter()"
