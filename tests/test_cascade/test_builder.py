import logging

import pytest

from cascade_index.config import CascadeConfig
from cascade_index.core.exceptions import UnsortedCatalogError
from cascade_index.index.cascade.builder import (
    build_last_level,
    build_levels,
    check_sorted,
    merge_catalog_with_level,
)
from cascade_index.index.cascade.primitives import Node, NodeKind


class TestBuildLastLevel:
    """Tests for the bottom level construction."""

    def test_real_nodes_between_sentinels(self):
        """Test every element becomes a real node framed by sentinels."""
        level = build_last_level([5, 6, 7])

        assert list(level.nodes) == [
            Node.low_sentinel(),
            Node.real(0, 0),
            Node.real(1, 0),
            Node.real(2, 0),
            Node.high_sentinel(3, 0),
        ]

    def test_empty_catalog(self):
        """Test an empty catalog yields only the two sentinels."""
        level = build_last_level([])

        assert [node.kind for node in level] == [NodeKind.LOW_SENTINEL, NodeKind.HIGH_SENTINEL]
        assert level.nodes[-1].prev == 0

    def test_catalog_is_borrowed(self):
        """Test the level references the caller's catalog."""
        catalog = [1, 2]
        assert build_last_level(catalog).catalog is catalog


class TestMergeCatalogWithLevel:
    """Tests for the two-pointer merge with promoted nodes."""

    def test_merge_links(self):
        """Test prev and bridge links of a merged level."""
        bottom = build_last_level([2, 4, 5, 7, 8, 9])
        level = merge_catalog_with_level([1, 3, 6, 10], bottom)

        assert list(level.nodes) == [
            Node.low_sentinel(),
            Node.real(0, 0),
            Node.synthetic(2, 1, 1),
            Node.real(1, 2),
            Node.synthetic(5, 3, 3),
            Node.real(2, 4),
            Node.synthetic(8, 5, 5),
            Node.real(3, 6),
            Node.high_sentinel(7, 7),
        ]

    def test_equal_elements_follow_promoted_value(self):
        """Test elements equal to a promoted value are placed after it."""
        bottom = build_last_level([0, 2, 4, 6])
        level = merge_catalog_with_level([1, 2, 4, 8], bottom)

        kinds = [node.kind for node in level]
        values = [level.value_at(p) for p in range(len(level))]

        assert values == [None, 0, 1, 2, 4, 4, 8, None]
        assert kinds[4] is NodeKind.SYNTHETIC
        assert kinds[5] is NodeKind.REAL

    def test_empty_catalog_over_level(self):
        """Test an empty catalog still carries the promoted nodes."""
        bottom = build_last_level([1, 2, 3])
        level = merge_catalog_with_level([], bottom)

        assert list(level.nodes) == [
            Node.low_sentinel(),
            Node.synthetic(1, 0, 1),
            Node.synthetic(3, 0, 3),
            Node.high_sentinel(0, 4),
        ]

    def test_catalog_over_empty_level(self):
        """Test merging over a sentinel-only level promotes nothing."""
        level = merge_catalog_with_level([7, 8], build_last_level([]))

        assert list(level.nodes) == [
            Node.low_sentinel(),
            Node.real(0, 0),
            Node.real(1, 0),
            Node.high_sentinel(2, 1),
        ]

    def test_synthetic_values_promote_again(self):
        """Test synthetic nodes are promoted like real ones."""
        bottom = build_last_level([10, 20, 30, 40, 50])
        middle = merge_catalog_with_level([], bottom)
        top = merge_catalog_with_level([], middle)

        assert [middle.value_at(p) for p in middle.promoted_positions()] == [10, 50]
        assert [top.value_at(p) for p in range(1, top.high_sentinel_position)] == [10, 50]


class TestCheckSorted:
    """Tests for the optional order check."""

    def test_sorted_catalog_passes(self):
        """Test ascending catalogs, with duplicates, pass."""
        check_sorted(0, [1, 1, 2, 5])
        check_sorted(0, [])

    def test_unsorted_catalog_raises(self):
        """Test the first descent is reported."""
        with pytest.raises(UnsortedCatalogError) as exc_info:
            check_sorted(3, [1, 4, 2, 5])

        assert exc_info.value.catalog_number == 3
        assert exc_info.value.position == 2
        assert isinstance(exc_info.value, ValueError)


class TestBuildLevels:
    """Tests for the full bottom-up construction."""

    def test_no_catalogs(self):
        """Test zero catalogs build zero levels."""
        assert build_levels([]) == []

    def test_levels_in_catalog_order(self):
        """Test levels are returned first catalog first."""
        catalogs = [[1, 3], [2], [4, 5, 6]]
        levels = build_levels(catalogs)

        assert [level.catalog for level in levels] == catalogs
        assert levels[0].catalog is catalogs[0]

    def test_last_level_has_no_synthetics(self):
        """Test the bottom level only holds real nodes."""
        levels = build_levels([[1], [2, 3, 4]])
        assert not any(node.is_synthetic() for node in levels[-1])

    def test_copy_catalogs(self):
        """Test copy_catalogs stores tuples instead of the caller's lists."""
        catalogs = [[1, 2], [3]]
        levels = build_levels(catalogs, CascadeConfig(copy_catalogs=True))

        assert levels[0].catalog == (1, 2)
        assert levels[0].catalog is not catalogs[0]

    def test_check_sorted_enabled(self):
        """Test unsorted catalogs are rejected when checking is on."""
        with pytest.raises(UnsortedCatalogError):
            build_levels([[1, 2], [3, 1]], CascadeConfig(check_sorted=True))

    def test_check_sorted_disabled_by_default(self):
        """Test unsorted catalogs are not inspected by default."""
        levels = build_levels([[2, 1]])
        assert len(levels) == 1

    def test_logs_each_level(self, caplog):
        """Test construction logs one debug line per level."""
        with caplog.at_level(logging.DEBUG, logger="cascade_index.index.cascade.builder"):
            build_levels([[1], [2], [3]])

        messages = [r.getMessage() for r in caplog.records]
        assert len(messages) == 3
        assert messages[0].startswith("Built bottom level 2")
