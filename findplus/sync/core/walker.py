"""Tree walker for findplus.

Performs the depth-first pre-order descent from the root, applying the
configuration's emission and recursion decisions to every entry.
"""

import os
import stat
from typing import Iterator, List, Optional

from ..._common.config import FindConfig, is_async_test
from ..._common.entry import Entry, EntryType, classify_mode
from ..._common.error_policies import ErrorPolicy, FailFastPolicy
from ..._common.errors import (
    ConfigurationError,
    RootNotDirectoryError,
    RootNotFoundError,
    TraversalError,
)
from .adapter import TreeAdapter


class TreeWalker:
    """Depth-first pre-order walker.

    Entries are yielded in raw enumeration order; ordering is the job of
    ``order_entries``. A failure to read a directory below the root is
    passed to the error policy, which either aborts the walk (the default,
    FailFastPolicy) or lets the walker skip that directory.

    The descent keeps an explicit stack of sibling iterators, one per open
    directory, so tree depth is not bounded by the interpreter's recursion
    limit.
    """

    def __init__(self,
                 config: FindConfig,
                 adapter: TreeAdapter,
                 error_policy: Optional[ErrorPolicy] = None):
        """Initialize walker.

        Args:
            config: Validated configuration
            adapter: Adapter providing stat_root and get_children
            error_policy: Policy for mid-walk OSErrors (default FailFastPolicy)

        Raises:
            ConfigurationError: A test is a coroutine function
        """
        for test in config.tests:
            if is_async_test(test):
                raise ConfigurationError(
                    f"Entry test {test!r} is async; use find_async() for async tests"
                )
        self.config = config
        self.adapter = adapter
        self.error_policy = error_policy or FailFastPolicy()
        self.root = os.path.abspath(config.root)

    def walk(self) -> Iterator[Entry]:
        """Walk the tree and yield every emitted entry.

        Raises:
            RootNotFoundError: Root does not exist
            RootNotDirectoryError: Root is not a directory
            TraversalError: Root cannot be stat-ed, or a mid-walk error
                            under FailFastPolicy
        """
        stack = [iter([self._root_entry()])]

        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            passed = self.config.passes_tests(entry)

            # Yield parent first (pre-order)
            if self.config.should_yield(entry, passed):
                yield entry

            if not self.config.should_explore(entry, passed):
                continue

            children = self._read_children(entry)
            if children:
                stack.append(iter(children))

    def _root_entry(self) -> Entry:
        try:
            st = self.adapter.stat_root(self.root)
        except (FileNotFoundError, NotADirectoryError):
            raise RootNotFoundError(self.root) from None
        except OSError as e:
            raise TraversalError(self.root, 'stat_root', e) from e

        if not stat.S_ISDIR(st.st_mode):
            raise RootNotDirectoryError(self.root)

        name = os.path.basename(self.root) or self.root
        return Entry(self.root, name, 0, EntryType.DIRECTORY, is_root=True)

    def _read_children(self, entry: Entry) -> List[Entry]:
        """Child entries of a directory, or [] when the policy skips it."""
        try:
            children = list(self.adapter.get_children(entry.path))
        except OSError as e:
            self.error_policy.handle(e, entry.path, 'get_children')
            return []

        return [
            Entry(child.path, child.name, entry.depth + 1, classify_mode(child.mode))
            for child in children
        ]
