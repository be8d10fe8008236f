"""
Bottom-up construction of the augmented levels.

The last catalog becomes a level of REAL nodes only. Every earlier catalog
is merged, in one linear two-pointer pass, with every second interior node
of the level built just before it. Each level therefore holds its own
catalog plus half of the next level, and the total size of all levels
stays linear in the total number of catalog elements.
"""

import logging
from typing import Any, List, Sequence

from cascade_index.config import CascadeConfig, DEFAULT_CONFIG
from cascade_index.core.exceptions import UnsortedCatalogError

from .augmented_level import AugmentedLevel
from .primitives import Node

logger = logging.getLogger(__name__)


def build_last_level(catalog: Sequence[Any]) -> AugmentedLevel:
    """Build the bottom level: one REAL node per element between two sentinels."""
    nodes = [Node.low_sentinel()]
    nodes.extend(Node.real(index, 0) for index in range(len(catalog)))
    nodes.append(Node.high_sentinel(len(nodes) - 1, 0))
    return AugmentedLevel(catalog, nodes)


def merge_catalog_with_level(catalog: Sequence[Any],
                             next_level: AugmentedLevel) -> AugmentedLevel:
    """
    Merge a catalog with the promoted nodes of the level below it.

    Catalog elements strictly smaller than a promoted value are emitted
    before its SYNTHETIC node, equal elements after it.

    Args:
        catalog: Ascending catalog owning the new level
        next_level: Already-built level for the following catalog

    Returns:
        The augmented level for ``catalog``
    """
    catalog_len = len(catalog)
    nodes = [Node.low_sentinel()]

    last_real = 0
    last_synthetic = 0
    catalog_index = 0

    for bridge in next_level.promoted_positions():
        promoted = next_level.value_at(bridge)

        while catalog_index < catalog_len and catalog[catalog_index] < promoted:
            nodes.append(Node.real(catalog_index, last_synthetic))
            last_real = len(nodes) - 1
            catalog_index += 1

        nodes.append(Node.synthetic(promoted, last_real, bridge))
        last_synthetic = len(nodes) - 1

    while catalog_index < catalog_len:
        nodes.append(Node.real(catalog_index, last_synthetic))
        last_real = len(nodes) - 1
        catalog_index += 1

    nodes.append(Node.high_sentinel(last_real, next_level.high_sentinel_position))
    return AugmentedLevel(catalog, nodes)


def check_sorted(catalog_number: int, catalog: Sequence[Any]) -> None:
    """Raise UnsortedCatalogError at the first descent in ``catalog``."""
    for position in range(1, len(catalog)):
        if catalog[position] < catalog[position - 1]:
            raise UnsortedCatalogError(catalog_number, position)


def build_levels(catalogs: Sequence[Sequence[Any]],
                 config: CascadeConfig = DEFAULT_CONFIG) -> List[AugmentedLevel]:
    """
    Build one augmented level per catalog, in catalog order.

    Catalogs are consumed from last to first since each merge needs the
    level of the catalog after it.
    """
    catalogs = [tuple(catalog) if config.copy_catalogs else catalog
                for catalog in catalogs]

    if config.check_sorted:
        for catalog_number, catalog in enumerate(catalogs):
            check_sorted(catalog_number, catalog)

    if not catalogs:
        return []

    levels = [build_last_level(catalogs[-1])]
    logger.debug("Built bottom level %d with %d nodes",
                 len(catalogs) - 1, len(levels[0]))

    for catalog_number in range(len(catalogs) - 2, -1, -1):
        level = merge_catalog_with_level(catalogs[catalog_number], levels[-1])
        logger.debug("Merged catalog %d (%d elements) into level of %d nodes",
                     catalog_number, len(catalogs[catalog_number]), len(level))
        levels.append(level)

    levels.reverse()
    return levels
