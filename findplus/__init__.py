"""findplus - find-like recursive filesystem traversal.

findplus walks a directory tree from a root and returns the paths that pass
its depth limits, entry-type filters and caller-supplied predicate tests, in
tree order, depth order or raw enumeration order.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from findplus import find

Asynchronous:
    from findplus.aio import find_async
━━━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

from . import sync
from . import aio

from .sync import find, find_entries
from ._common import (
    FindConfig,
    OnlyFilter,
    SortMode,
    EntryTest,
    Entry,
    EntryType,
    classify_mode,
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
    FindError,
    ConfigurationError,
    MissingRootError,
    MissingDepthForAtDepthError,
    ConflictingOnlyFiltersError,
    OnlyFilterWithNoRecurseFailedError,
    ConflictingSortModesError,
    InvalidDepthError,
    UnknownOptionError,
    RootNotFoundError,
    RootNotDirectoryError,
    TraversalError,
)

__all__ = [
    "__version__",
    "sync",
    "aio",
    # API
    "find",
    "find_entries",
    # Config
    "FindConfig",
    "OnlyFilter",
    "SortMode",
    "EntryTest",
    # Entries
    "Entry",
    "EntryType",
    "classify_mode",
    # Error policies
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
    "CollectErrorsPolicy",
    "ThresholdPolicy",
    # Errors
    "FindError",
    "ConfigurationError",
    "MissingRootError",
    "MissingDepthForAtDepthError",
    "ConflictingOnlyFiltersError",
    "OnlyFilterWithNoRecurseFailedError",
    "ConflictingSortModesError",
    "InvalidDepthError",
    "UnknownOptionError",
    "RootNotFoundError",
    "RootNotDirectoryError",
    "TraversalError",
]
