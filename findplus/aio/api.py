"""High-level async API for findplus."""

from typing import List, Optional

from .._common.config import FindConfig, build_config
from .._common.entry import Entry
from .._common.error_policies import ErrorPolicy
from .._common.ordering import order_entries
from .adapters.filesystem import AsyncFileSystemAdapter
from .core.adapter import AsyncTreeAdapter
from .core.walker import AsyncTreeWalker


async def find_entries_async(
    config: Optional[FindConfig] = None,
    *,
    adapter: Optional[AsyncTreeAdapter] = None,
    error_policy: Optional[ErrorPolicy] = None,
    **options
) -> List[Entry]:
    """Walk a tree asynchronously and return emitted entries in final order.

    Args:
        config: A FindConfig; mutually exclusive with keyword options
        adapter: Async adapter (defaults to AsyncFileSystemAdapter)
        error_policy: Policy for mid-walk I/O errors (defaults to FailFastPolicy)
        **options: Keyword options understood by FindConfig.from_options

    Returns:
        List of Entry records

    Example:
        >>> entries = await find_entries_async(root="/srv", only_dirs=True, depth=2)
    """
    config = build_config(config, **options)
    walker = AsyncTreeWalker(config, adapter or AsyncFileSystemAdapter(), error_policy)
    entries = [entry async for entry in walker.walk()]
    return order_entries(entries, config.sort, walker.root)


async def find_async(
    config: Optional[FindConfig] = None,
    *,
    adapter: Optional[AsyncTreeAdapter] = None,
    error_policy: Optional[ErrorPolicy] = None,
    **options
) -> List[str]:
    """Walk a tree asynchronously and return absolute paths in final order.

    Takes the same arguments as find_entries_async().
    """
    entries = await find_entries_async(
        config, adapter=adapter, error_policy=error_policy, **options
    )
    return [entry.path for entry in entries]
