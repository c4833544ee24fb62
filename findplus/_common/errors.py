"""Exception hierarchy for findplus.

Every failure the library raises derives from FindError. Configuration
problems are detected before any filesystem access and derive from
ConfigurationError; root and traversal problems carry the offending path.
"""

from typing import Optional


class FindError(Exception):
    """Base exception for all findplus errors."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        return self.message


class ConfigurationError(FindError, ValueError):
    """The traversal options are inconsistent or incomplete."""
    pass


class MissingRootError(ConfigurationError):
    """No 'root' was given."""

    def __init__(self):
        super().__init__("Must provide 'root' option.")


class MissingDepthForAtDepthError(ConfigurationError):
    """'at_depth' was set without an explicit 'depth'."""

    def __init__(self):
        super().__init__("Must provide an explicit 'depth' when 'atDepth' is set.")


class ConflictingOnlyFiltersError(ConfigurationError):
    """More than one 'only' flag was set."""

    def __init__(self, flags=()):
        message = "Cannot specify multiple 'only' flags."
        if flags:
            message += f" Got: {', '.join(flags)}"
        super().__init__(message)
        self.flags = tuple(flags)


class OnlyFilterWithNoRecurseFailedError(ConfigurationError):
    """An 'only' flag was combined with 'no_recurse_failed'."""

    def __init__(self):
        super().__init__("Cannot specify any 'only' flag with 'noRecurseFailed'.")


class ConflictingSortModesError(ConfigurationError):
    """More than one sort mode was requested."""

    def __init__(self, modes=()):
        super().__init__(f"Cannot specify multiple sort modes: {', '.join(modes)}")
        self.modes = tuple(modes)


class InvalidDepthError(ConfigurationError):
    """'depth' is not a non-negative integer."""

    def __init__(self, depth):
        super().__init__(f"'depth' must be a non-negative integer, got {depth!r}")
        self.depth = depth


class UnknownOptionError(ConfigurationError, TypeError):
    """An unrecognized option name was passed."""

    def __init__(self, names):
        names = sorted(names)
        super().__init__(f"Unknown option(s): {', '.join(names)}")
        self.names = tuple(names)


class RootNotFoundError(FindError):
    """The root path does not exist."""

    def __init__(self, path: str):
        super().__init__(f"Did not find root directory at: {path}", path)


class RootNotDirectoryError(FindError):
    """The root path exists but is not a directory."""

    def __init__(self, path: str):
        super().__init__(f"'{path}' is not a directory as required", path)


class TraversalError(FindError):
    """A directory read or stat failed part way through the walk."""

    def __init__(self, path: str, operation: str, error: Optional[object] = None):
        detail = f": {error}" if error is not None else ""
        super().__init__(f"Error in {operation} for '{path}'{detail}", path)
        self.operation = operation
