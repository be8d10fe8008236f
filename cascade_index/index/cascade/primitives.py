from enum import Enum
from dataclasses import dataclass
from typing import Any, Optional, Sequence


class NodeKind(Enum):
    REAL = "real"
    SYNTHETIC = "synthetic"
    LOW_SENTINEL = "low"
    HIGH_SENTINEL = "high"


@dataclass(frozen=True)
class Node:
    """
    One slot of an augmented level.

    The meaning of ``data`` depends on the kind:
    - REAL: index of the element in this level's own catalog
    - SYNTHETIC: the value promoted from the next level
    - sentinels: unused (None)

    ``prev`` is a position in the same level. A REAL node points at the
    nearest preceding SYNTHETIC node (the closest node with a usable
    bridge), a SYNTHETIC node points at the nearest preceding REAL node.
    Either falls back to the low sentinel at position 0.

    ``bridge`` is a position in the next level and is only meaningful for
    SYNTHETIC nodes and the high sentinel.
    """
    kind: NodeKind
    data: Any = None
    prev: int = 0
    bridge: int = 0

    @classmethod
    def real(cls, catalog_index: int, prev: int) -> 'Node':
        return cls(NodeKind.REAL, catalog_index, prev, 0)

    @classmethod
    def synthetic(cls, value: Any, prev: int, bridge: int) -> 'Node':
        return cls(NodeKind.SYNTHETIC, value, prev, bridge)

    @classmethod
    def low_sentinel(cls) -> 'Node':
        return cls(NodeKind.LOW_SENTINEL)

    @classmethod
    def high_sentinel(cls, prev: int, bridge: int) -> 'Node':
        return cls(NodeKind.HIGH_SENTINEL, None, prev, bridge)

    def is_real(self) -> bool:
        return self.kind is NodeKind.REAL

    def is_synthetic(self) -> bool:
        return self.kind is NodeKind.SYNTHETIC

    def is_sentinel(self) -> bool:
        return self.kind is NodeKind.LOW_SENTINEL or self.kind is NodeKind.HIGH_SENTINEL

    def value(self, catalog: Sequence[Any]) -> Optional[Any]:
        """
        Return the value this node stands for.

        Args:
            catalog: The catalog of the level that owns this node

        Returns:
            The represented value, or None for sentinels
        """
        if self.kind is NodeKind.REAL:
            return catalog[self.data]
        if self.kind is NodeKind.SYNTHETIC:
            return self.data
        return None

    def __str__(self) -> str:
        if self.is_sentinel():
            return f"Node({self.kind.value}, prev={self.prev}, bridge={self.bridge})"
        return f"Node({self.kind.value}, {self.data!r}, prev={self.prev}, bridge={self.bridge})"
