"""Custom exceptions for the cascading search index."""


class CascadeException(Exception):
    """Base exception for index-related errors."""
    pass


class UnsortedCatalogError(CascadeException, ValueError):
    """Raised when a catalog handed to the builder is not ascending."""

    def __init__(self, catalog_number: int, position: int):
        super().__init__(
            f"Catalog {catalog_number} is not sorted: element at position "
            f"{position} is smaller than its predecessor")
        self.catalog_number = catalog_number
        self.position = position


class InvalidCatalogIndexError(CascadeException, IndexError):
    """Raised when a catalog number is outside the indexed collection."""
    pass


class StructuralInvariantError(AssertionError):
    """
    Raised when an augmented level is internally inconsistent.

    This always points at a construction bug, never at bad user input,
    and is not meant to be caught.
    """
    pass
