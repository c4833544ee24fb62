"""
Error handling policies for findplus.

Configuration and root errors always abort a call. An OSError raised while a
walk is already under way (an unreadable subdirectory, an entry that vanished
between listing and stat) is handed to an error policy, which decides whether
the call aborts or the offending path is skipped.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
import sys

from .errors import TraversalError


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling errors
    that occur during directory reads and stats.
    """

    @abstractmethod
    def handle(self, error: Exception, path: str, operation: str) -> None:
        """
        Handle an error that occurred during a filesystem operation.

        Args:
            error: The exception that was raised
            path: The path being read or stat-ed when the error occurred
            operation: Name of the failed operation (e.g., 'get_children')

        Returns:
            None to skip the path and let traversal continue.

        Raises:
            TraversalError: To stop traversal.
        """
        pass

    def _record(self, error: Exception, path: str, operation: str) -> Dict[str, Any]:
        return {
            'path': path,
            'operation': operation,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }


class FailFastPolicy(ErrorPolicy):
    """
    Policy that aborts on the first error.

    This is the default behavior - any error halts the entire call and no
    partial result is returned.
    """

    def handle(self, error: Exception, path: str, operation: str) -> None:
        """Raise TraversalError chained from the original error."""
        raise TraversalError(path, operation, error) from error


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that reports errors and continues traversal.

    Errors are collected for later inspection and the offending path is
    skipped. The result is partial: nothing under an unreadable directory
    is reported.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []
        self.verbose = verbose

    def handle(self, error: Exception, path: str, operation: str) -> None:
        """Record the error and skip the path."""
        self.errors.append(self._record(error, path, operation))
        self.skipped_paths.append(path)

        if self.verbose:
            if isinstance(error, PermissionError):
                print(f"\nWARNING: Skipping inaccessible path '{path}': {error}", file=sys.stderr)
            else:
                print(f"\nWARNING: Error in {operation} for '{path}': {error}", file=sys.stderr)

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'permission_errors': sum(1 for e in self.errors if e['error_type'] == 'PermissionError'),
            'not_found_errors': sum(1 for e in self.errors if e['error_type'] == 'FileNotFoundError'),
            'skipped_paths': len(self.skipped_paths),
            'errors': self.errors,
        }


class CollectErrorsPolicy(ContinueOnErrorsPolicy):
    """
    Policy that collects all errors without printing, for batch processing.

    Useful for collecting all errors and presenting them at the end.
    """

    def __init__(self):
        super().__init__(verbose=False)


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when some errors are expected but too many indicate
    a systemic problem that should halt processing.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.verbose = verbose
        self.errors: List[Dict[str, Any]] = []
        self.skipped_paths: List[str] = []

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def handle(self, error: Exception, path: str, operation: str) -> None:
        """Skip the path if under threshold, otherwise raise."""
        self.errors.append(self._record(error, path, operation))

        if self.error_count > self.max_errors:
            raise TraversalError(
                path, operation, f"error threshold exceeded ({self.max_errors} errors)"
            ) from error

        self.skipped_paths.append(path)
        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: Error in {operation} for '{path}': {error}",
                  file=sys.stderr)
