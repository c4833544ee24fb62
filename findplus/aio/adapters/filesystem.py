"""Async filesystem adapter for findplus.

Runs the blocking os.scandir / os.stat calls in a worker thread via
asyncio.to_thread so the event loop is never blocked on disk I/O.
"""

import asyncio
import os
from typing import AsyncIterator, List

from ..._common.entry import ChildEntry
from ..core.adapter import AsyncTreeAdapter


def _scan_directory_sync(path: str) -> List[ChildEntry]:
    """Synchronous scan run in a worker thread."""
    children = []
    with os.scandir(path) as iterator:
        for entry in iterator:
            mode = entry.stat(follow_symlinks=False).st_mode
            children.append(ChildEntry(entry.name, entry.path, mode))
    return children


class AsyncFileSystemAdapter(AsyncTreeAdapter):
    """Async adapter for the local filesystem.

    Symbolic links below the root are reported as links and never followed.
    """

    async def stat_root(self, path: str) -> os.stat_result:
        """Stat the root, following symlinks."""
        return await asyncio.to_thread(os.stat, path)

    async def get_children(self, path: str) -> AsyncIterator[ChildEntry]:
        """Get children of a directory using os.scandir.

        The whole directory is scanned in one worker-thread call, so any
        OSError surfaces before the first child is yielded.
        """
        children = await asyncio.to_thread(_scan_directory_sync, path)
        for child in children:
            yield child

    def __repr__(self) -> str:
        return "AsyncFileSystemAdapter()"
