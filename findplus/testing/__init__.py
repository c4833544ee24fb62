"""Testing utilities for findplus consumers."""

from .fixtures import (
    REFERENCE_TREE,
    create_reference_tree,
    reference_tree_dict,
    InMemoryAdapter,
    AsyncInMemoryAdapter,
)

__all__ = [
    'REFERENCE_TREE',
    'create_reference_tree',
    'reference_tree_dict',
    'InMemoryAdapter',
    'AsyncInMemoryAdapter',
]
