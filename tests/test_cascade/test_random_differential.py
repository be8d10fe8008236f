import random

import pytest

from cascade_index.config import CascadeConfig
from cascade_index.index import BinarySearchIndex, FractionalCascadingIndex


def random_catalogs(rng: random.Random, count: int, min_size: int, max_size: int,
                    low: int = -100, high: int = 100) -> list[list[int]]:
    """Generate ``count`` sorted catalogs of random integers (duplicates allowed)."""
    return [sorted(rng.randint(low, high) for _ in range(rng.randint(min_size, max_size)))
            for _ in range(count)]


class TestRandomDifferential:
    """Compare cascading search with independent binary searches."""

    @pytest.mark.parametrize("seed", range(20))
    def test_matches_binary_search(self, seed):
        """Test every answer matches a per-catalog binary search."""
        rng = random.Random(seed)
        catalogs = random_catalogs(rng, count=rng.randint(1, 30), min_size=0, max_size=60)

        cascading = FractionalCascadingIndex(catalogs, CascadeConfig(validate_structure=True))
        baseline = BinarySearchIndex(catalogs)

        for key in range(-110, 111):
            assert cascading.search(key) == baseline.search(key), \
                f"seed={seed} key={key}"

    @pytest.mark.parametrize("seed", range(5))
    def test_many_large_catalogs(self, seed):
        """Test deep stacks of larger catalogs, the case the structure exists for."""
        rng = random.Random(1000 + seed)
        catalogs = random_catalogs(rng, count=100, min_size=10, max_size=300)

        cascading = FractionalCascadingIndex(catalogs)
        baseline = BinarySearchIndex(catalogs)

        for key in range(-200, 200, 3):
            assert cascading.search_values(key) == baseline.search_values(key), \
                f"seed={seed} key={key}"

        assert cascading.validate()
        assert cascading.get_stats().satisfies_size_bound()

    @pytest.mark.parametrize("seed", range(5))
    def test_fractional_keys(self, seed):
        """Test keys falling strictly between catalog elements."""
        rng = random.Random(2000 + seed)
        catalogs = random_catalogs(rng, count=12, min_size=0, max_size=40, low=0, high=50)

        cascading = FractionalCascadingIndex(catalogs)
        baseline = BinarySearchIndex(catalogs)

        for step in range(-20, 1040):
            key = step / 20
            assert cascading.search(key) == baseline.search(key), \
                f"seed={seed} key={key}"

    def test_linear_total_size(self):
        """Test the levels stay within a constant factor of the input size."""
        rng = random.Random(7)
        catalogs = random_catalogs(rng, count=200, min_size=50, max_size=50,
                                   low=-10**6, high=10**6)

        stats = FractionalCascadingIndex(catalogs).get_stats()

        # Promotions form a geometric series bounded by the input size.
        assert stats.total_synthetic_nodes <= stats.total_catalog_elements
        assert stats.overhead_ratio < 2.1
