from .exceptions import (
    CascadeException,
    UnsortedCatalogError,
    InvalidCatalogIndexError,
    StructuralInvariantError,
)

__all__ = [
    "CascadeException",
    "UnsortedCatalogError",
    "InvalidCatalogIndexError",
    "StructuralInvariantError",
]
