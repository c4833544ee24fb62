"""Shared fixtures for the findplus test suite."""

import os

import pytest

from findplus.testing import create_reference_tree, InMemoryAdapter, reference_tree_dict


@pytest.fixture
def tree(tmp_path):
    """The reference tree on disk; maps entry names to absolute paths."""
    return create_reference_tree(tmp_path / "data")


@pytest.fixture
def mem_adapter():
    """The reference tree in memory, rooted at /mem (playing dirA)."""
    return InMemoryAdapter(reference_tree_dict())


DEEP_CHAIN_LENGTH = 1200


@pytest.fixture
def deep_chain(tmp_path):
    """A single chain of nested 'd' directories, deeper than the recursion limit.

    Returns the directory paths from the chain root down to the deepest one.
    """
    path = str(tmp_path / "deep")
    os.mkdir(path)
    levels = [path]
    for _ in range(DEEP_CHAIN_LENGTH):
        path = os.path.join(path, 'd')
        os.mkdir(path)
        levels.append(path)
    yield levels
    # Remove bottom-up so tmp_path cleanup never recurses through the chain
    for level in reversed(levels):
        os.rmdir(level)
