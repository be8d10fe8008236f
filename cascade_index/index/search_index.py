from abc import ABC, abstractmethod
from typing import Any, List, Optional, Sequence

from ..core.exceptions import InvalidCatalogIndexError


class SearchIndex(ABC):
    """
    Abstract base class for multi-catalog predecessor search.

    A SearchIndex is built once over an ordered collection of ascending
    catalogs and answers, for a key, the position of the largest element
    at or below that key in every catalog.

    Different implementations:
    - FractionalCascadingIndex: one binary search plus O(1) work per catalog
    - BinarySearchIndex: one independent binary search per catalog
    """

    @abstractmethod
    def search(self, key: Any) -> List[Optional[int]]:
        """
        Find the predecessor of ``key`` in every catalog.

        Args:
            key: Value comparable with the catalog elements

        Returns:
            One entry per catalog, in build order: the index of the last
            element ``<= key``, or None when every element is greater
        """
        pass

    @abstractmethod
    def num_catalogs(self) -> int:
        """Return the number of catalogs this index was built over."""
        pass

    @abstractmethod
    def _catalog(self, catalog_number: int) -> Sequence[Any]:
        pass

    def get_catalog(self, catalog_number: int) -> Sequence[Any]:
        """
        Return one of the indexed catalogs.

        Raises:
            InvalidCatalogIndexError: If ``catalog_number`` is out of range
        """
        if not 0 <= catalog_number < self.num_catalogs():
            raise InvalidCatalogIndexError(
                f"Catalog number {catalog_number} out of range [0, {self.num_catalogs()})")
        return self._catalog(catalog_number)

    def search_values(self, key: Any) -> List[Optional[Any]]:
        """Like search(), but return the predecessor elements themselves."""
        return [None if index is None else self._catalog(catalog_number)[index]
                for catalog_number, index in enumerate(self.search(key))]

    def __len__(self) -> int:
        return self.num_catalogs()
