"""
MULTI-CATALOG SEARCH INDEXES

Key Design Principles:
1. **Build Once**: Indexes are constructed from ascending catalogs and never mutated
2. **Predecessor Convention**: Every index answers "last element <= key", None if absent
3. **Borrowed Catalogs**: Catalogs are referenced, not copied, unless configured
4. **Interchangeable**: All indexes share the SearchIndex interface

INDEX TYPE HIERARCHY:
┌─────────────┐
│ SearchIndex │ (Abstract base)
└─────────────┘
       │
    ┌──┴──────────────────────┐
    │                         │
┌───────────────────┐   ┌──────────────────────────┐
│BinarySearchIndex  │   │ FractionalCascadingIndex │
└───────────────────┘   └──────────────────────────┘

AUGMENTED LEVEL LAYOUT (one per catalog):
┌────┬──────┬──────┬──────┬──────┬─────┬────┐
│ -∞ │ Real │ Syn  │ Real │ Real │ Syn │ +∞ │
└────┴──────┴──────┴──────┴──────┴─────┴────┘
          prev ◄──┘        │      bridge
                           ▼
               every second node of the next level

QUERY COST:
- BinarySearchIndex: O(k log n)
- FractionalCascadingIndex: O(log n + k)
"""

from .search_index import SearchIndex
from .binary_search_index import BinarySearchIndex
from .cascade import FractionalCascadingIndex

__all__ = ["SearchIndex", "BinarySearchIndex", "FractionalCascadingIndex"]
