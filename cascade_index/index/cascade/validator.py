from typing import Optional, Sequence

from cascade_index.core.exceptions import StructuralInvariantError

from .augmented_level import AugmentedLevel
from .primitives import NodeKind


class StructureValidator:
    """Validates the links and ordering of a built set of augmented levels.

    Checks, for every level:
    - sentinels sit at both ends and nowhere else
    - nodes are ordered by value
    - REAL nodes cover the catalog exactly once, in order
    - prev links stay inside the level and point strictly backwards
    - SYNTHETIC nodes mirror every second interior node of the next level
    - bridges land on the nodes they were promoted from
    """

    def __init__(self):
        self.validation_errors: list[str] = []

    def validate(self, levels: Sequence[AugmentedLevel]) -> bool:
        """
        Validate a full stack of levels, first catalog first.

        Returns:
            True if no violation was found
        """
        self.validation_errors.clear()

        for level_number, level in enumerate(levels):
            next_level = levels[level_number + 1] if level_number + 1 < len(levels) else None
            self._validate_level(level_number, level, next_level)

        return len(self.validation_errors) == 0

    def assert_valid(self, levels: Sequence[AugmentedLevel]) -> None:
        """Raise StructuralInvariantError listing every violation found."""
        if not self.validate(levels):
            raise StructuralInvariantError(
                "Augmented levels are corrupted:\n  " + "\n  ".join(self.validation_errors))

    def _validate_level(self, level_number: int, level: AugmentedLevel,
                        next_level: Optional[AugmentedLevel]) -> None:
        nodes = level.nodes
        if len(nodes) < 2:
            self._error(level_number, f"has {len(nodes)} nodes, expected at least two sentinels")
            return

        if nodes[0].kind is not NodeKind.LOW_SENTINEL:
            self._error(level_number, "does not start with the low sentinel")
        if nodes[-1].kind is not NodeKind.HIGH_SENTINEL:
            self._error(level_number, "does not end with the high sentinel")

        interior = range(1, len(nodes) - 1)
        if any(nodes[p].is_sentinel() for p in interior):
            self._error(level_number, "has a sentinel between its boundaries")
            return

        self._validate_prev_links(level_number, level)
        if not self._validate_real_coverage(level_number, level):
            return
        self._validate_ordering(level_number, level)

        if next_level is None:
            if any(nodes[p].is_synthetic() for p in interior):
                self._error(level_number, "is the last level but holds synthetic nodes")
        else:
            self._validate_bridges(level_number, level, next_level)

    def _validate_prev_links(self, level_number: int, level: AugmentedLevel) -> None:
        nodes = level.nodes
        if nodes[0].prev != 0:
            self._error(level_number, f"low sentinel has prev {nodes[0].prev}")

        for position in range(1, len(nodes)):
            node = nodes[position]
            if not 0 <= node.prev < position:
                self._error(level_number, f"node at {position} has prev {node.prev} "
                                          f"outside [0, {position})")
                continue

            target = nodes[node.prev].kind
            if node.is_real() and target not in (NodeKind.SYNTHETIC, NodeKind.LOW_SENTINEL):
                self._error(level_number, f"real node at {position} has prev on a {target.value} node")
            elif not node.is_real() and target not in (NodeKind.REAL, NodeKind.LOW_SENTINEL):
                self._error(level_number, f"node at {position} has prev on a {target.value} node")

    def _validate_real_coverage(self, level_number: int, level: AugmentedLevel) -> bool:
        """Check REAL indices; False if any lies outside the catalog and values cannot be read."""
        indices = [node.data for node in level.nodes if node.is_real()]
        out_of_range = [index for index in indices if not _in_catalog(index, level)]
        if out_of_range:
            self._error(level_number, f"real nodes index outside the catalog: {out_of_range}")
            return False

        if indices != list(range(len(level.catalog))):
            self._error(level_number, "real nodes do not cover the catalog exactly once in order")
        return True

    def _validate_ordering(self, level_number: int, level: AugmentedLevel) -> None:
        for position in range(2, level.high_sentinel_position):
            if level.value_at(position) < level.value_at(position - 1):
                self._error(level_number, f"node at {position} orders before its predecessor")
                return

    def _validate_bridges(self, level_number: int, level: AugmentedLevel,
                          next_level: AugmentedLevel) -> None:
        synthetic = [node for node in level.nodes if node.is_synthetic()]
        bridges = [node.bridge for node in synthetic]
        if bridges != list(next_level.promoted_positions()):
            self._error(level_number, "synthetic nodes do not mirror every second node "
                                      "of the next level")
            return

        # out-of-range REAL indices below are reported with the next level itself
        readable = all(_in_catalog(node.data, next_level) for node in next_level if node.is_real())
        for node in synthetic if readable else ():
            if node.data != next_level.value_at(node.bridge):
                self._error(level_number, f"synthetic value {node.data!r} differs from "
                                          f"its bridge target at {node.bridge}")

        high = level.nodes[-1]
        if high.bridge != next_level.high_sentinel_position:
            self._error(level_number, f"high sentinel bridges to {high.bridge}, expected "
                                      f"{next_level.high_sentinel_position}")

        expected_size = len(level.catalog) + len(next_level.promoted_positions()) + 2
        if len(level) != expected_size:
            self._error(level_number, f"has {len(level)} nodes, expected {expected_size}")

    def _error(self, level_number: int, message: str) -> None:
        self.validation_errors.append(f"Level {level_number} {message}")


def _in_catalog(index, level: AugmentedLevel) -> bool:
    return isinstance(index, int) and 0 <= index < len(level.catalog)
