"""
Fractional cascading search over many sorted catalogs.

Typical use:
    index = build([[1, 3, 6, 10], [2, 4, 5, 7, 8, 9]])
    query(index, 6)   # [2, 2]
"""

from .config import CascadeConfig, DEFAULT_CONFIG
from .core import (
    CascadeException,
    UnsortedCatalogError,
    InvalidCatalogIndexError,
    StructuralInvariantError,
)
from .index import SearchIndex, BinarySearchIndex, FractionalCascadingIndex
from .index.cascade import IndexStats, build, query

__all__ = [
    "CascadeConfig",
    "DEFAULT_CONFIG",
    "CascadeException",
    "UnsortedCatalogError",
    "InvalidCatalogIndexError",
    "StructuralInvariantError",
    "SearchIndex",
    "BinarySearchIndex",
    "FractionalCascadingIndex",
    "IndexStats",
    "build",
    "query",
]
