import bisect
from typing import Any, List, Optional, Sequence

from .search_index import SearchIndex


class BinarySearchIndex(SearchIndex):
    """Baseline index running one binary search per catalog, O(k log n) per query."""

    def __init__(self, catalogs: Sequence[Sequence[Any]]):
        self._catalogs = list(catalogs)

    def search(self, key: Any) -> List[Optional[int]]:
        results = []
        for catalog in self._catalogs:
            index = bisect.bisect_right(catalog, key) - 1
            results.append(index if index >= 0 else None)
        return results

    def num_catalogs(self) -> int:
        return len(self._catalogs)

    def _catalog(self, catalog_number: int) -> Sequence[Any]:
        return self._catalogs[catalog_number]
