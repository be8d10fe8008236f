from typing import Any, Generic, Iterable, Iterator, Optional, Sequence, Tuple, TypeVar

from cascade_index.core.exceptions import StructuralInvariantError

from .primitives import Node, NodeKind

T = TypeVar('T')


class AugmentedLevel(Generic[T]):
    """
    A catalog enriched with nodes promoted from the next level.

    The level owns an immutable tuple of nodes (the arena) and keeps a reference
    to the catalog its REAL nodes index into. Position 0 always holds the
    low sentinel and the last position the high sentinel, so every key has
    a well-defined predecessor and successor inside the level.
    """

    def __init__(self, catalog: Sequence[T], nodes: Iterable[Node]):
        self.catalog = catalog
        self.nodes: Tuple[Node, ...] = tuple(nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    @property
    def interior_size(self) -> int:
        """Number of REAL and SYNTHETIC nodes between the sentinels."""
        return len(self.nodes) - 2

    @property
    def high_sentinel_position(self) -> int:
        return len(self.nodes) - 1

    def node_at(self, position: int) -> Node:
        """Return the node at a position, refusing anything out of range."""
        if not 0 <= position < len(self.nodes):
            raise StructuralInvariantError(
                f"Position {position} outside augmented level of size {len(self.nodes)}")
        return self.nodes[position]

    def _checked(self, position: int, node: Node) -> Node:
        if node.kind is NodeKind.REAL and not 0 <= node.data < len(self.catalog):
            raise StructuralInvariantError(
                f"Real node at {position} indexes {node.data!r} outside catalog of size "
                f"{len(self.catalog)}")
        return node

    def value_at(self, position: int) -> Optional[T]:
        return self._checked(position, self.node_at(position)).value(self.catalog)

    def is_at_most(self, position: int, key: Any) -> bool:
        """Check whether the node at ``position`` orders at or before ``key``."""
        node = self.node_at(position)
        if node.kind is NodeKind.LOW_SENTINEL:
            return True
        if node.kind is NodeKind.HIGH_SENTINEL:
            return False
        return self._checked(position, node).value(self.catalog) <= key

    def promoted_positions(self) -> range:
        """Positions copied up into the previous level: every second interior node."""
        return range(1, self.high_sentinel_position, 2)

    def find_predecessor_position(self, key: Any) -> int:
        """
        Binary search for the last node ordering at or before ``key``.

        The low sentinel always qualifies and the high sentinel never does,
        so the answer lies in ``[0, len - 2]``.
        """
        lo, hi = 0, self.high_sentinel_position
        # invariant: is_at_most(lo) and not is_at_most(hi)
        while hi - lo > 1:
            mid = (lo + hi) // 2
            if self.is_at_most(mid, key):
                lo = mid
            else:
                hi = mid
        return lo

    def closest_real_predecessor(self, position: int) -> Optional[int]:
        """
        Resolve a node to the catalog index of the nearest REAL node at or before it.

        Args:
            position: Position of the starting node in this level

        Returns:
            Catalog index, or None when only the low sentinel precedes it

        Raises:
            StructuralInvariantError: If the prev chain leaves the level, fails
                to move strictly backwards, or ends on a REAL node indexing
                outside the catalog
        """
        node = self.node_at(position)
        while node.kind is NodeKind.SYNTHETIC:
            if not 0 <= node.prev < position:
                raise StructuralInvariantError(
                    f"Synthetic node at {position} has non-decreasing prev {node.prev}")
            position = node.prev
            node = self.node_at(position)

        if node.kind is NodeKind.REAL:
            return self._checked(position, node).data
        return None

    def bridge_position(self, position: int) -> int:
        """
        Step from a REAL node back to the nearest node carrying a bridge.

        SYNTHETIC nodes and sentinels are returned unchanged.
        """
        node = self.node_at(position)
        if node.is_real():
            if not 0 <= node.prev < position:
                raise StructuralInvariantError(
                    f"Real node at {position} has non-decreasing prev {node.prev}")
            return node.prev
        return position

    def __str__(self) -> str:
        return f"AugmentedLevel(catalog_size={len(self.catalog)}, nodes={len(self.nodes)})"
