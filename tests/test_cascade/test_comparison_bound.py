import functools
import random

import pytest

from cascade_index.index import BinarySearchIndex, FractionalCascadingIndex


@functools.total_ordering
class CountingValue:
    """Integer wrapper that counts every comparison made against it."""

    comparisons = 0

    def __init__(self, value):
        self.value = value

    def __eq__(self, other):
        CountingValue.comparisons += 1
        return self.value == other.value

    def __lt__(self, other):
        CountingValue.comparisons += 1
        return self.value < other.value

    def __le__(self, other):
        CountingValue.comparisons += 1
        return self.value <= other.value

    __hash__ = None

    def __repr__(self):
        return f"CountingValue({self.value})"


@pytest.fixture
def deep_stack():
    rng = random.Random(7)
    raw = [sorted(rng.randint(0, 1000) for _ in range(rng.randint(15, 25)))
           for _ in range(400)]
    wrapped = [[CountingValue(v) for v in catalog] for catalog in raw]
    return raw, FractionalCascadingIndex(wrapped)


class TestComparisonBound:
    """A query pays one binary search plus at most one comparison per extra catalog."""

    @pytest.mark.parametrize("key", [-5, 0, 1, 250, 499, 500, 777, 1000, 1005])
    def test_comparisons_per_query(self, deep_stack, key):
        """Test a 400-catalog query stays within (k - 1) + log2 of the first level."""
        raw, index = deep_stack
        k = index.num_catalogs()
        first_level_bound = len(index.levels[0]).bit_length()

        CountingValue.comparisons = 0
        result = index.search(CountingValue(key))
        used = CountingValue.comparisons

        assert used <= (k - 1) + first_level_bound
        assert used <= 2 * k + 64
        assert result == BinarySearchIndex(raw).search(key)

    def test_comparisons_do_not_grow_with_catalog_size(self, deep_stack):
        """Test the worst query over many keys keeps the same linear bound."""
        _, index = deep_stack
        k = index.num_catalogs()

        worst = 0
        for key in range(-10, 1011, 37):
            CountingValue.comparisons = 0
            index.search(CountingValue(key))
            worst = max(worst, CountingValue.comparisons)

        assert worst <= (k - 1) + len(index.levels[0]).bit_length()
