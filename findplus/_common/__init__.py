"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration and validation (FindConfig)
- The Entry model and mode classifier
- Result ordering
- The error hierarchy and error policies

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import (
    FindConfig,
    OnlyFilter,
    SortMode,
    EntryTest,
    build_config,
    parse_sort_mode,
    parse_only_filter,
    is_async_test,
)
from .entry import Entry, EntryType, ChildEntry, classify_mode
from .ordering import order_entries, tree_order_key
from .error_policies import (
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
    CollectErrorsPolicy,
    ThresholdPolicy,
)
from .errors import (
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
    # Config
    'FindConfig',
    'OnlyFilter',
    'SortMode',
    'EntryTest',
    'build_config',
    'parse_sort_mode',
    'parse_only_filter',
    'is_async_test',
    # Entries
    'Entry',
    'EntryType',
    'ChildEntry',
    'classify_mode',
    # Ordering
    'order_entries',
    'tree_order_key',
    # Error policies
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'CollectErrorsPolicy',
    'ThresholdPolicy',
    # Errors
    'FindError',
    'ConfigurationError',
    'MissingRootError',
    'MissingDepthForAtDepthError',
    'ConflictingOnlyFiltersError',
    'OnlyFilterWithNoRecurseFailedError',
    'ConflictingSortModesError',
    'InvalidDepthError',
    'UnknownOptionError',
    'RootNotFoundError',
    'RootNotDirectoryError',
    'TraversalError',
]
