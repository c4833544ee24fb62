"""Configuration system for findplus.

This module defines how users specify their traversal requirements: where to
start, how deep to go, which entry types and predicates gate emission, whether
failing predicates block recursion, and how results are ordered.
"""

import inspect
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Protocol, Tuple, Union

from .entry import Entry, EntryType
from .errors import (
    ConfigurationError,
    ConflictingOnlyFiltersError,
    ConflictingSortModesError,
    InvalidDepthError,
    MissingDepthForAtDepthError,
    MissingRootError,
    OnlyFilterWithNoRecurseFailedError,
    UnknownOptionError,
)


class EntryTest(Protocol):
    """Predicate over entry metadata.

    Any callable taking an Entry and returning a truthy value qualifies:
    plain functions, lambdas, bound methods or objects with ``__call__``.
    """

    def __call__(self, entry: Entry) -> bool:
        ...


class OnlyFilter(Enum):
    """Restricts emission to exactly one entry type.

    Modelled as a single selector so two 'only' filters can never be
    active at the same time.
    """
    NONE = "none"
    FILES = "files"
    DIRS = "dirs"
    BLOCK_DEVICES = "block_devices"
    CHARACTER_DEVICES = "character_devices"
    FIFOS = "fifos"
    SYMBOLIC_LINKS = "symbolic_links"

    @property
    def entry_type(self) -> Optional[EntryType]:
        """The single EntryType this filter admits (None for NONE)."""
        return _ONLY_ENTRY_TYPES.get(self)


_ONLY_ENTRY_TYPES = {
    OnlyFilter.FILES: EntryType.FILE,
    OnlyFilter.DIRS: EntryType.DIRECTORY,
    OnlyFilter.BLOCK_DEVICES: EntryType.BLOCK_DEVICE,
    OnlyFilter.CHARACTER_DEVICES: EntryType.CHARACTER_DEVICE,
    OnlyFilter.FIFOS: EntryType.FIFO,
    OnlyFilter.SYMBOLIC_LINKS: EntryType.SYMBOLIC_LINK,
}


class SortMode(Enum):
    """How to order the collected entries."""
    TREE = "tree"      # Pre-order, files before subdirectories, by name
    DEPTH = "depth"    # Shallowest first, tree order within a level
    NONE = "none"      # Raw enumeration order


# Keyword flags accepted by FindConfig.from_options
ONLY_FLAGS = {
    'only_files': OnlyFilter.FILES,
    'only_dirs': OnlyFilter.DIRS,
    'only_block_devices': OnlyFilter.BLOCK_DEVICES,
    'only_character_devices': OnlyFilter.CHARACTER_DEVICES,
    'only_fifos': OnlyFilter.FIFOS,
    'only_symbolic_links': OnlyFilter.SYMBOLIC_LINKS,
}

NO_FLAGS = {
    'no_block_devices': EntryType.BLOCK_DEVICE,
    'no_character_devices': EntryType.CHARACTER_DEVICE,
    'no_fifos': EntryType.FIFO,
    'no_symbolic_links': EntryType.SYMBOLIC_LINK,
}

_PLAIN_OPTIONS = {
    'root', 'depth', 'at_depth', 'exclude_root', 'tests', 'no_recurse_failed',
}

_SORT_OPTIONS = {'sort', 'sort_depth_first', 'no_sort', 'sort_none'}


def parse_sort_mode(sort: Union[SortMode, str]) -> SortMode:
    """Parse a sort mode from string or enum.

    Args:
        sort: Sort mode as enum or string

    Returns:
        SortMode enum value

    Raises:
        ConfigurationError: If the name is not recognized
    """
    if isinstance(sort, SortMode):
        return sort

    sort_map = {
        'tree': SortMode.TREE,
        'tree_order': SortMode.TREE,
        'tree-order': SortMode.TREE,
        'depth': SortMode.DEPTH,
        'depth_order': SortMode.DEPTH,
        'depth-order': SortMode.DEPTH,
        'depth_first': SortMode.DEPTH,
        'none': SortMode.NONE,
        'unordered': SortMode.NONE,
    }

    sort_lower = sort.lower() if isinstance(sort, str) else str(sort)
    if sort_lower in sort_map:
        return sort_map[sort_lower]

    raise ConfigurationError(
        f"Unknown sort mode: {sort}. "
        f"Choose from: {', '.join(sort_map.keys())}"
    )


def parse_only_filter(only: Union[OnlyFilter, str, None]) -> OnlyFilter:
    """Parse an 'only' selector from string or enum.

    Accepts the enum, its value (``"files"``) or its name (``"FILES"``).
    None means no filter.

    Raises:
        ConfigurationError: If the selector is not recognized
    """
    if only is None:
        return OnlyFilter.NONE
    if isinstance(only, OnlyFilter):
        return only
    if isinstance(only, str):
        for member in OnlyFilter:
            if only.lower() == member.value:
                return member
    raise ConfigurationError(
        f"Unknown 'only' filter: {only!r}. "
        f"Choose from: {', '.join(member.value for member in OnlyFilter)}"
    )


@dataclass(frozen=True)
class FindConfig:
    """Complete configuration for a find call.

    Built once per call and never mutated. ``validate()`` checks the options
    for consistency before any filesystem access; the ``should_*`` helpers
    are the per-entry decisions the walkers apply.
    """

    root: Optional[str] = None
    depth: Optional[int] = None
    at_depth: bool = False
    exclude_root: bool = False
    only: OnlyFilter = OnlyFilter.NONE
    exclude_types: FrozenSet[EntryType] = frozenset()
    tests: Tuple[EntryTest, ...] = ()
    no_recurse_failed: bool = False
    sort: SortMode = SortMode.TREE

    def __post_init__(self):
        # Normalize container, enum and path types; the dataclass is frozen
        if self.root is not None and not isinstance(self.root, str):
            object.__setattr__(self, 'root', os.fspath(self.root))
        object.__setattr__(self, 'only', parse_only_filter(self.only))
        try:
            exclude_types = frozenset(EntryType(t) for t in self.exclude_types or ())
        except ValueError as e:
            raise ConfigurationError(f"Unknown entry type in exclude_types: {e}") from None
        object.__setattr__(self, 'exclude_types', exclude_types)
        object.__setattr__(self, 'tests', _coerce_tests(self.tests))
        object.__setattr__(self, 'sort', parse_sort_mode(self.sort))

    @classmethod
    def from_options(cls, **options) -> 'FindConfig':
        """Build and validate a FindConfig from keyword flags.

        Accepts ``root``, ``depth``, ``at_depth``, ``exclude_root``, ``tests``,
        ``no_recurse_failed``, the ``only_*`` and ``no_*`` boolean flags, and
        a sort mode given as ``sort=`` or through the ``sort_depth_first``,
        ``no_sort`` and ``sort_none`` flags.

        Returns:
            Validated FindConfig

        Raises:
            ConfigurationError: On any inconsistent or unknown option
        """
        unknown = set(options) - _PLAIN_OPTIONS - _SORT_OPTIONS - set(ONLY_FLAGS) - set(NO_FLAGS)
        if unknown:
            raise UnknownOptionError(unknown)

        # Checked here in the same order as validate(), since conflicting
        # 'only' flags cannot be represented once built
        if not _has_root(options.get('root')):
            raise MissingRootError()
        _check_depth(options.get('depth'))
        if options.get('at_depth') and options.get('depth') is None:
            raise MissingDepthForAtDepthError()

        only_set = [name for name in ONLY_FLAGS if options.get(name)]
        if len(only_set) > 1:
            raise ConflictingOnlyFiltersError(only_set)

        config = cls(
            root=options['root'],
            depth=options.get('depth'),
            at_depth=bool(options.get('at_depth', False)),
            exclude_root=bool(options.get('exclude_root', False)),
            only=ONLY_FLAGS[only_set[0]] if only_set else OnlyFilter.NONE,
            exclude_types=frozenset(t for name, t in NO_FLAGS.items() if options.get(name)),
            tests=options.get('tests') or (),
            no_recurse_failed=bool(options.get('no_recurse_failed', False)),
            sort=_resolve_sort(options),
        )
        return config.validate()

    def validate(self) -> 'FindConfig':
        """Check configuration for consistency.

        Returns:
            This configuration, unchanged

        Raises:
            MissingRootError: No root given
            InvalidDepthError: depth is not a non-negative int
            MissingDepthForAtDepthError: at_depth without depth
            OnlyFilterWithNoRecurseFailedError: only filter with no_recurse_failed
            ConfigurationError: A test is not callable
        """
        if not _has_root(self.root):
            raise MissingRootError()

        _check_depth(self.depth)

        if self.at_depth and self.depth is None:
            raise MissingDepthForAtDepthError()

        if self.no_recurse_failed and self.only is not OnlyFilter.NONE:
            raise OnlyFilterWithNoRecurseFailedError()

        for test in self.tests:
            if not callable(test):
                raise ConfigurationError(f"Entry tests must be callable, got {test!r}")

        return self

    # Per-entry decisions

    def accepts_type(self, entry_type: EntryType) -> bool:
        """Check the entry type against the only/exclude filters."""
        if entry_type in self.exclude_types:
            return False
        if self.only is OnlyFilter.NONE:
            return True
        return entry_type is self.only.entry_type

    def passes_tests(self, entry: Entry) -> bool:
        """True if every test accepts the entry (empty tests always pass).

        Tests are evaluated synchronously. A test returning an awaitable
        belongs to the async API and is rejected here.

        Raises:
            ConfigurationError: A test returned an awaitable
        """
        for test in self.tests:
            result = test(entry)
            if inspect.isawaitable(result):
                if inspect.iscoroutine(result):
                    result.close()
                raise ConfigurationError(
                    f"Entry test {test!r} returned an awaitable; use find_async() for async tests"
                )
            if not result:
                return False
        return True

    def should_yield_depth(self, depth: int) -> bool:
        """Check if entries at this depth may be emitted."""
        if self.depth is None:
            return True
        if self.at_depth:
            return depth == self.depth
        return depth <= self.depth

    def should_explore_depth(self, depth: int) -> bool:
        """Check if children of a directory at this depth are within bounds."""
        if self.depth is None:
            return True
        return depth < self.depth

    def should_yield(self, entry: Entry, passed_tests: bool) -> bool:
        """Decide whether an entry belongs in the result.

        Args:
            entry: The visited entry
            passed_tests: Result of passes_tests() for this entry

        Returns:
            True if the entry should be emitted
        """
        if entry.is_root and self.exclude_root:
            return False
        return (self.should_yield_depth(entry.depth)
                and self.accepts_type(entry.type)
                and passed_tests)

    def should_explore(self, entry: Entry, passed_tests: bool) -> bool:
        """Decide whether to descend into an entry.

        Only directories are explored. Type filters never block recursion;
        failing tests do only when no_recurse_failed is set.
        """
        if not entry.is_dir:
            return False
        if not self.should_explore_depth(entry.depth):
            return False
        if self.no_recurse_failed and not passed_tests:
            return False
        return True


def _check_depth(depth: Any) -> None:
    if depth is None:
        return
    if isinstance(depth, bool) or not isinstance(depth, int) or depth < 0:
        raise InvalidDepthError(depth)


def _has_root(root: Any) -> bool:
    # An empty string would resolve to the current directory
    return root is not None and root not in ('', b'')


def _coerce_tests(tests: Any) -> Tuple[EntryTest, ...]:
    if not tests:
        return ()
    if callable(tests) or isinstance(tests, (str, bytes)):
        raise ConfigurationError(
            f"'tests' must be a sequence of callables, got {tests!r}"
        )
    try:
        return tuple(tests)
    except TypeError:
        raise ConfigurationError(
            f"'tests' must be a sequence of callables, got {tests!r}"
        ) from None


def is_async_test(test: Any) -> bool:
    """True for coroutine functions and objects with an async ``__call__``."""
    if inspect.iscoroutinefunction(test):
        return True
    return inspect.iscoroutinefunction(getattr(test, '__call__', None))


def _resolve_sort(options: Dict[str, Any]) -> SortMode:
    """Resolve the sort mode from sort= and the legacy sort flags."""
    requested: List[SortMode] = []
    if options.get('sort') is not None:
        requested.append(parse_sort_mode(options['sort']))
    if options.get('sort_depth_first'):
        requested.append(SortMode.DEPTH)
    if options.get('no_sort') or options.get('sort_none'):
        requested.append(SortMode.NONE)

    distinct = list(dict.fromkeys(requested))
    if len(distinct) > 1:
        raise ConflictingSortModesError([mode.value for mode in distinct])
    return distinct[0] if distinct else SortMode.TREE


def build_config(config: Optional[FindConfig] = None, **options) -> FindConfig:
    """Return a validated config from either a FindConfig or keyword options.

    Raises:
        ConfigurationError: If both or neither are given, or options are invalid
    """
    if config is not None:
        if options:
            raise ConfigurationError(
                "Pass either a FindConfig or keyword options, not both"
            )
        return config.validate()
    return FindConfig.from_options(**options)
