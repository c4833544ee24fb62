"""Entry model and classifier for findplus.

An Entry is intentionally kept simple - it's a data container describing one
filesystem node seen during a walk. Navigation is left to the adapters.
"""

import stat
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple


class EntryType(Enum):
    """Semantic type of a filesystem entry."""
    FILE = "file"
    DIRECTORY = "directory"
    BLOCK_DEVICE = "block-device"
    CHARACTER_DEVICE = "character-device"
    FIFO = "fifo"
    SYMBOLIC_LINK = "symbolic-link"
    OTHER = "other"


# Checked in order; symlinks come first so lstat results are never
# reported as their target's type.
_MODE_TESTS = (
    (stat.S_ISLNK, EntryType.SYMBOLIC_LINK),
    (stat.S_ISDIR, EntryType.DIRECTORY),
    (stat.S_ISREG, EntryType.FILE),
    (stat.S_ISBLK, EntryType.BLOCK_DEVICE),
    (stat.S_ISCHR, EntryType.CHARACTER_DEVICE),
    (stat.S_ISFIFO, EntryType.FIFO),
)


def classify_mode(mode: int) -> EntryType:
    """Map a raw ``st_mode`` value to an EntryType.

    The mode should come from an lstat-style call. Anything not covered
    (sockets, doors, whiteouts) is reported as ``EntryType.OTHER``.

    Args:
        mode: The ``st_mode`` field of a stat result

    Returns:
        The semantic entry type
    """
    for test, entry_type in _MODE_TESTS:
        if test(mode):
            return entry_type
    return EntryType.OTHER


class ChildEntry(NamedTuple):
    """Raw directory listing item returned by adapters."""
    name: str
    path: str
    mode: int


@dataclass(frozen=True)
class Entry:
    """One filesystem node visited during traversal.

    Attributes:
        path: Absolute path of the entry
        name: Base name of the entry
        depth: Distance from the root (root = 0)
        type: Semantic entry type
        is_root: True only for the traversal root
    """
    path: str
    name: str
    depth: int
    type: EntryType
    is_root: bool = False

    @property
    def is_dir(self) -> bool:
        return self.type is EntryType.DIRECTORY

    def __str__(self) -> str:
        return self.path
