from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from .augmented_level import AugmentedLevel


@dataclass
class IndexStats:
    """Size statistics of a built cascading index."""
    # Per catalog, in catalog order
    catalog_sizes: List[int] = field(default_factory=list)
    level_sizes: List[int] = field(default_factory=list)
    synthetic_counts: List[int] = field(default_factory=list)

    # Seconds spent in construction
    build_time: float = 0.0

    @classmethod
    def from_levels(cls, levels: Sequence[AugmentedLevel], build_time: float = 0.0) -> 'IndexStats':
        return cls(
            catalog_sizes=[len(level.catalog) for level in levels],
            level_sizes=[len(level) for level in levels],
            synthetic_counts=[sum(1 for node in level if node.is_synthetic())
                              for level in levels],
            build_time=build_time,
        )

    @property
    def num_levels(self) -> int:
        return len(self.level_sizes)

    @property
    def total_catalog_elements(self) -> int:
        return sum(self.catalog_sizes)

    @property
    def total_nodes(self) -> int:
        return sum(self.level_sizes)

    @property
    def total_synthetic_nodes(self) -> int:
        return sum(self.synthetic_counts)

    @property
    def overhead_ratio(self) -> float:
        """Nodes stored per catalog element (sentinels included)."""
        return self.total_nodes / max(1, self.total_catalog_elements)

    def satisfies_size_bound(self) -> bool:
        """
        Check the geometric decay of promoted nodes.

        Each level may hold at most its own catalog, half (rounded up) of
        the next level's interior, and two sentinels.
        """
        for level_number in range(self.num_levels):
            promoted = 0
            if level_number + 1 < self.num_levels:
                next_interior = self.level_sizes[level_number + 1] - 2
                promoted = (next_interior + 1) // 2
            if self.level_sizes[level_number] > self.catalog_sizes[level_number] + promoted + 2:
                return False
        return True

    def to_dict(self) -> Dict[str, Any]:
        return {
            'num_levels': self.num_levels,
            'catalog_sizes': list(self.catalog_sizes),
            'level_sizes': list(self.level_sizes),
            'total_catalog_elements': self.total_catalog_elements,
            'total_nodes': self.total_nodes,
            'total_synthetic_nodes': self.total_synthetic_nodes,
            'overhead_ratio': self.overhead_ratio,
            'build_time': self.build_time,
        }
