from .primitives import Node, NodeKind
from .augmented_level import AugmentedLevel
from .builder import build_levels, build_last_level, merge_catalog_with_level
from .cascading_index import FractionalCascadingIndex, build, query
from .stats import IndexStats
from .validator import StructureValidator

__all__ = [
    "Node",
    "NodeKind",
    "AugmentedLevel",
    "build_levels",
    "build_last_level",
    "merge_catalog_with_level",
    "FractionalCascadingIndex",
    "build",
    "query",
    "IndexStats",
    "StructureValidator",
]
