"""Test fixtures for findplus consumers.

Provides a builder for the reference directory tree used throughout the
test suite, and in-memory adapters for exercising walks without touching
the filesystem.
"""

import errno
import os
import stat
from pathlib import Path
from typing import AsyncIterator, Dict, Iterable, List, Optional, Union

from .._common.entry import ChildEntry, EntryType
from ..aio.core.adapter import AsyncTreeAdapter
from ..sync.core.adapter import TreeAdapter


# name -> relative path, directories end without a file suffix
REFERENCE_TREE = {
    'dirA': 'dirA',
    'fileA-1.txt': 'dirA/fileA-1.txt',
    'dirAA': 'dirA/dirAA',
    'dirAAA': 'dirA/dirAA/dirAAA',
    'dirAAAA': 'dirA/dirAA/dirAAA/dirAAAA',
    'fileAAAA-1.txt': 'dirA/dirAA/dirAAA/dirAAAA/fileAAAA-1.txt',
    'dirAAB': 'dirA/dirAA/dirAAB',
    'fileAAB-1.txt': 'dirA/dirAA/dirAAB/fileAAB-1.txt',
    'dirAB': 'dirA/dirAB',
    'fileAB-1.txt': 'dirA/dirAB/fileAB-1.txt',
    'dirABA': 'dirA/dirAB/dirABA',
    'fileABA-1.txt': 'dirA/dirAB/dirABA/fileABA-1.txt',
}


def create_reference_tree(base_dir: Union[str, Path]) -> Dict[str, str]:
    """Create the reference directory structure under base_dir.

    Structure:
    base_dir/
    └── dirA/
        ├── fileA-1.txt
        ├── dirAA/
        │   ├── dirAAA/
        │   │   └── dirAAAA/
        │   │       └── fileAAAA-1.txt
        │   └── dirAAB/
        │       └── fileAAB-1.txt
        └── dirAB/
            ├── fileAB-1.txt
            └── dirABA/
                └── fileABA-1.txt

    Args:
        base_dir: Existing directory to build the tree in

    Returns:
        Mapping of entry name to absolute path string
    """
    base = Path(base_dir).absolute()
    paths = {}
    for name, relative in REFERENCE_TREE.items():
        path = base / relative
        if name.startswith('file'):
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(f"content of {name}\n")
        else:
            path.mkdir(parents=True, exist_ok=True)
        paths[name] = str(path)
    return paths


_TYPE_MODES = {
    EntryType.FILE: stat.S_IFREG | 0o644,
    EntryType.DIRECTORY: stat.S_IFDIR | 0o755,
    EntryType.BLOCK_DEVICE: stat.S_IFBLK | 0o660,
    EntryType.CHARACTER_DEVICE: stat.S_IFCHR | 0o666,
    EntryType.FIFO: stat.S_IFIFO | 0o644,
    EntryType.SYMBOLIC_LINK: stat.S_IFLNK | 0o777,
    EntryType.OTHER: stat.S_IFSOCK | 0o755,
}


def _fake_stat(mode: int) -> os.stat_result:
    return os.stat_result((mode, 0, 0, 1, 0, 0, 0, 0, 0, 0))


class InMemoryAdapter(TreeAdapter):
    """Adapter over a nested dict instead of the filesystem.

    Keys are names. A dict value is a directory, None is a regular file and
    an EntryType value is an entry of that type. Children are enumerated in
    insertion order, which makes raw (unsorted) order predictable.

    Example:
        adapter = InMemoryAdapter({'b.txt': None, 'sub': {'pipe': EntryType.FIFO}})
        find(root=adapter.root, adapter=adapter)

    Attributes:
        root: Absolute path of the in-memory root directory
        read_paths: Directories whose children were requested, in order
        fail_paths: Directories whose listing raises PermissionError
    """

    def __init__(self,
                 tree: dict,
                 root: str = '/mem',
                 fail_paths: Optional[Iterable[str]] = None):
        self.root = os.path.abspath(root)
        self.fail_paths = set(fail_paths or ())
        self.read_paths: List[str] = []
        self._modes: Dict[str, int] = {self.root: _TYPE_MODES[EntryType.DIRECTORY]}
        self._children: Dict[str, List[ChildEntry]] = {}
        self._index(self.root, tree)

    def _index(self, path: str, tree: dict) -> None:
        children = []
        for name, value in tree.items():
            child_path = os.path.join(path, name)
            if isinstance(value, dict):
                mode = _TYPE_MODES[EntryType.DIRECTORY]
                self._index(child_path, value)
            elif value is None:
                mode = _TYPE_MODES[EntryType.FILE]
            else:
                mode = _TYPE_MODES[value]
            self._modes[child_path] = mode
            children.append(ChildEntry(name, child_path, mode))
        self._children[path] = children

    def path(self, *parts: str) -> str:
        """Absolute in-memory path for parts below the root."""
        return os.path.join(self.root, *parts)

    def stat_root(self, path: str) -> os.stat_result:
        if path not in self._modes:
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), path)
        return _fake_stat(self._modes[path])

    def get_children(self, path: str) -> List[ChildEntry]:
        self.read_paths.append(path)
        if path in self.fail_paths:
            raise PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)
        if path not in self._children:
            raise NotADirectoryError(errno.ENOTDIR, os.strerror(errno.ENOTDIR), path)
        return list(self._children[path])


class AsyncInMemoryAdapter(AsyncTreeAdapter):
    """Async wrapper around InMemoryAdapter."""

    def __init__(self, tree: dict, root: str = '/mem', fail_paths: Optional[Iterable[str]] = None):
        self.base_adapter = InMemoryAdapter(tree, root, fail_paths)
        self.root = self.base_adapter.root

    @property
    def read_paths(self) -> List[str]:
        return self.base_adapter.read_paths

    def path(self, *parts: str) -> str:
        return self.base_adapter.path(*parts)

    async def stat_root(self, path: str) -> os.stat_result:
        return self.base_adapter.stat_root(path)

    async def get_children(self, path: str) -> AsyncIterator[ChildEntry]:
        for child in self.base_adapter.get_children(path):
            yield child


def reference_tree_dict() -> dict:
    """The reference tree as an InMemoryAdapter tree dict, rooted at dirA.

    Children are deliberately listed out of name order.
    """
    return {
        'dirAB': {
            'dirABA': {'fileABA-1.txt': None},
            'fileAB-1.txt': None,
        },
        'fileA-1.txt': None,
        'dirAA': {
            'dirAAB': {'fileAAB-1.txt': None},
            'dirAAA': {'dirAAAA': {'fileAAAA-1.txt': None}},
        },
    }
