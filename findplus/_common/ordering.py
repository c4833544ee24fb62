"""Result ordering for findplus.

Walkers emit entries in raw enumeration order. All ordering happens here,
as pure post-processing over the materialized list.
"""

import os
from typing import Callable, Dict, List, Sequence, Tuple

from .config import SortMode
from .entry import Entry

TreeKey = Tuple[Tuple[int, str], ...]


def tree_order_key(entry: Entry, root: str) -> TreeKey:
    """Sort key placing an entry at its tree-order position.

    Each path component below the root contributes ``(rank, name)``. Every
    intermediate component is a directory; the final one ranks 0 for
    non-directories and 1 for directories, so within a directory the plain
    entries come first and each subdirectory is followed by its subtree.
    The root itself has the empty key and sorts first.

    Args:
        entry: Entry to place
        root: Absolute root path the entry was found under

    Returns:
        Tuple usable as a sort key
    """
    if entry.is_root:
        return ()
    parts = os.path.relpath(entry.path, root).split(os.sep)
    key = [(1, part) for part in parts[:-1]]
    key.append((1 if entry.is_dir else 0, parts[-1]))
    return tuple(key)


def sort_tree_order(entries: Sequence[Entry], root: str) -> List[Entry]:
    """Pre-order by name, files before subdirectories at each level."""
    return sorted(entries, key=lambda e: tree_order_key(e, root))


def sort_depth_order(entries: Sequence[Entry], root: str) -> List[Entry]:
    """Shallowest first; equal depths keep tree-order position."""
    return sorted(entries, key=lambda e: (e.depth, tree_order_key(e, root)))


def sort_none(entries: Sequence[Entry], root: str) -> List[Entry]:
    """Raw traversal order."""
    return list(entries)


_SORTERS: Dict[SortMode, Callable[[Sequence[Entry], str], List[Entry]]] = {
    SortMode.TREE: sort_tree_order,
    SortMode.DEPTH: sort_depth_order,
    SortMode.NONE: sort_none,
}


def order_entries(entries: Sequence[Entry], sort: SortMode, root: str) -> List[Entry]:
    """Reorder collected entries according to the sort mode.

    Args:
        entries: Emitted entries in raw traversal order
        sort: Requested sort mode
        root: Absolute root path of the walk

    Returns:
        New list of entries in final order
    """
    return _SORTERS[sort](entries, root)
