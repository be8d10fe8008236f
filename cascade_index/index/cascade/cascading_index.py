import logging
import time
from typing import Any, List, Optional, Sequence, Tuple

from cascade_index.config import CascadeConfig, DEFAULT_CONFIG

from ..search_index import SearchIndex
from .augmented_level import AugmentedLevel
from .builder import build_levels
from .stats import IndexStats
from .validator import StructureValidator

logger = logging.getLogger(__name__)


class FractionalCascadingIndex(SearchIndex):
    """
    Predecessor search over many sorted catalogs at once.

    Construction merges the catalogs bottom-up into augmented levels, each
    carrying every second node of the level below it as bridges. A query
    then costs one binary search in the first level plus at most one extra
    comparison per remaining catalog, O(log n + k) instead of O(k log n).

    The index is immutable once built and can be queried from any number
    of threads without locking. Catalogs are borrowed unless the config
    asks for copies, so callers must not mutate them afterwards.
    """

    def __init__(self, catalogs: Sequence[Sequence[Any]],
                 config: Optional[CascadeConfig] = None):
        """
        Build the index.

        Args:
            catalogs: Ascending catalogs, searched in this order
            config: Build options (defaults to DEFAULT_CONFIG)

        Raises:
            UnsortedCatalogError: If ``config.check_sorted`` is set and a
                catalog is not ascending
            StructuralInvariantError: If ``config.validate_structure`` is
                set and the built levels are inconsistent
        """
        self.config = config or DEFAULT_CONFIG

        start = time.perf_counter()
        self._levels: Tuple[AugmentedLevel, ...] = tuple(build_levels(catalogs, self.config))
        self._build_time = time.perf_counter() - start

        logger.info("Built cascading index over %d catalogs: %d nodes in %.6fs",
                    len(self._levels), sum(len(level) for level in self._levels),
                    self._build_time)

        if self.config.validate_structure:
            StructureValidator().assert_valid(self._levels)

    @classmethod
    def build(cls, catalogs: Sequence[Sequence[Any]],
              config: Optional[CascadeConfig] = None) -> 'FractionalCascadingIndex':
        return cls(catalogs, config)

    @property
    def levels(self) -> Tuple[AugmentedLevel, ...]:
        return self._levels

    def num_catalogs(self) -> int:
        return len(self._levels)

    def _catalog(self, catalog_number: int) -> Sequence[Any]:
        return self._levels[catalog_number].catalog

    def search(self, key: Any) -> List[Optional[int]]:
        """
        Find the predecessor of ``key`` in every catalog.

        Args:
            key: Value comparable with the catalog elements

        Returns:
            Per catalog, the index of the last element ``<= key`` or None
        """
        if not self._levels:
            return []

        level = self._levels[0]
        position = level.find_predecessor_position(key)
        results = [level.closest_real_predecessor(position)]
        position = level.bridge_position(position)

        for level_number in range(1, len(self._levels)):
            position = level.node_at(position).bridge
            level = self._levels[level_number]

            # The next promoted node already orders after key, so the
            # answer is the bridge target or its right neighbour.
            if level.is_at_most(position + 1, key):
                position += 1

            results.append(level.closest_real_predecessor(position))
            position = level.bridge_position(position)

        return results

    def get_stats(self) -> IndexStats:
        return IndexStats.from_levels(self._levels, self._build_time)

    def validate(self) -> bool:
        """Re-run the structure checks on the built levels."""
        return StructureValidator().validate(self._levels)

    def __str__(self) -> str:
        return f"FractionalCascadingIndex(catalogs={len(self._levels)})"


# Convenience functions for easy access

def build(catalogs: Sequence[Sequence[Any]],
          config: Optional[CascadeConfig] = None) -> FractionalCascadingIndex:
    """Build a cascading index over ``catalogs``."""
    return FractionalCascadingIndex(catalogs, config)


def query(index: FractionalCascadingIndex, key: Any) -> List[Optional[int]]:
    """Return the predecessor index of ``key`` in every catalog of ``index``."""
    return index.search(key)
