"""Async tree walker for findplus.

Same decisions as the sync TreeWalker. The walk stays sequential: each
directory read is awaited before the next one starts.
"""

import asyncio
import inspect
import os
import stat
from typing import AsyncIterator, List, Optional

from ..._common.config import FindConfig
from ..._common.entry import Entry, EntryType, classify_mode
from ..._common.error_policies import ErrorPolicy, FailFastPolicy
from ..._common.errors import RootNotDirectoryError, RootNotFoundError, TraversalError
from .adapter import AsyncTreeAdapter


class AsyncTreeWalker:
    """Async depth-first pre-order walker.

    Before each directory read the walker yields control to the event loop,
    so a cancelled task stops at the next directory boundary. Cancellation
    propagates as asyncio.CancelledError and no partial result is produced.

    Entry tests may be plain functions or coroutine functions. Like the sync
    walker, the descent uses an explicit stack instead of nested generators.
    """

    def __init__(self,
                 config: FindConfig,
                 adapter: AsyncTreeAdapter,
                 error_policy: Optional[ErrorPolicy] = None):
        self.config = config
        self.adapter = adapter
        self.error_policy = error_policy or FailFastPolicy()
        self.root = os.path.abspath(config.root)

    async def walk(self) -> AsyncIterator[Entry]:
        """Walk the tree and yield every emitted entry.

        Raises:
            RootNotFoundError: Root does not exist
            RootNotDirectoryError: Root is not a directory
            TraversalError: Root cannot be stat-ed, or a mid-walk error
                            under FailFastPolicy
        """
        stack = [iter([await self._root_entry()])]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            passed = await self._passes_tests(entry)

            if self.config.should_yield(entry, passed):
                yield entry

            if not self.config.should_explore(entry, passed):
                continue

            children = await self._read_children(entry)
            if children:
                stack.append(iter(children))

    async def _root_entry(self) -> Entry:
        try:
            st = await self.adapter.stat_root(self.root)
        except (FileNotFoundError, NotADirectoryError):
            raise RootNotFoundError(self.root) from None
        except OSError as e:
            raise TraversalError(self.root, 'stat_root', e) from e

        if not stat.S_ISDIR(st.st_mode):
            raise RootNotDirectoryError(self.root)

        name = os.path.basename(self.root) or self.root
        return Entry(self.root, name, 0, EntryType.DIRECTORY, is_root=True)

    async def _passes_tests(self, entry: Entry) -> bool:
        for test in self.config.tests:
            result = test(entry)
            if inspect.isawaitable(result):
                result = await result
            if not result:
                return False
        return True

    async def _read_children(self, entry: Entry) -> List[Entry]:
        # Cancellation checkpoint at each directory descent
        await asyncio.sleep(0)

        try:
            children = [child async for child in self.adapter.get_children(entry.path)]
        except OSError as e:
            self.error_policy.handle(e, entry.path, 'get_children')
            return []

        return [
            Entry(child.path, child.name, entry.depth + 1, classify_mode(child.mode))
            for child in children
        ]
