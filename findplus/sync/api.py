"""High-level API for findplus.

This module provides the functional entry points: build and validate the
configuration, walk, then order the result.
"""

from typing import List, Optional

from .._common.config import FindConfig, build_config
from .._common.entry import Entry
from .._common.error_policies import ErrorPolicy
from .._common.ordering import order_entries
from .adapters.filesystem import FileSystemAdapter
from .core.adapter import TreeAdapter
from .core.walker import TreeWalker


def find_entries(
    config: Optional[FindConfig] = None,
    *,
    adapter: Optional[TreeAdapter] = None,
    error_policy: Optional[ErrorPolicy] = None,
    **options
) -> List[Entry]:
    """Walk a tree and return the emitted entries in final order.

    Args:
        config: A FindConfig; mutually exclusive with keyword options
        adapter: Tree adapter (defaults to FileSystemAdapter)
        error_policy: Policy for mid-walk I/O errors (defaults to FailFastPolicy)
        **options: Keyword options understood by FindConfig.from_options

    Returns:
        List of Entry records

    Raises:
        ConfigurationError: Invalid options, raised before any I/O
        RootNotFoundError: Root does not exist
        RootNotDirectoryError: Root is not a directory
        TraversalError: A directory could not be read (FailFastPolicy)

    Example:
        >>> for entry in find_entries(root="/var/log", only_files=True, depth=1):
        ...     print(entry.name, entry.type.value)
    """
    config = build_config(config, **options)
    walker = TreeWalker(config, adapter or FileSystemAdapter(), error_policy)
    entries = list(walker.walk())
    return order_entries(entries, config.sort, walker.root)


def find(
    config: Optional[FindConfig] = None,
    *,
    adapter: Optional[TreeAdapter] = None,
    error_policy: Optional[ErrorPolicy] = None,
    **options
) -> List[str]:
    """Walk a tree and return the emitted absolute paths in final order.

    Takes the same arguments as find_entries().

    Example:
        >>> dirs = find(root="src", only_dirs=True, depth=1)
        >>> modules = find(root="src", tests=[lambda e: e.name.endswith(".py")], sort="depth")
    """
    return [
        entry.path
        for entry in find_entries(config, adapter=adapter, error_policy=error_policy, **options)
    ]
