"""
Build-time configuration for cascading search indexes.

Every flag defaults to the cheapest behavior: catalogs are borrowed, not
checked for order, and the finished structure is not re-validated.
"""

import os
from dataclasses import dataclass

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid {name} environment variable: '{raw}'. "
        f"Supported values: {list(_TRUE_VALUES + _FALSE_VALUES[:-1])}"
    )


@dataclass(frozen=True)
class CascadeConfig:
    """Options controlling how an index is built."""

    check_sorted: bool = False
    """Verify that every catalog is ascending before merging it."""

    validate_structure: bool = False
    """Run the structure validator once construction finishes."""

    copy_catalogs: bool = False
    """Store tuple copies of the catalogs instead of borrowing them."""

    @classmethod
    def from_env(cls) -> 'CascadeConfig':
        """
        Build a configuration from ``CASCADE_*`` environment variables.

        Raises:
            ValueError: If a variable holds something other than a boolean word
        """
        return cls(
            check_sorted=_env_flag("CASCADE_CHECK_SORTED", False),
            validate_structure=_env_flag("CASCADE_VALIDATE_STRUCTURE", False),
            copy_catalogs=_env_flag("CASCADE_COPY_CATALOGS", False),
        )


DEFAULT_CONFIG = CascadeConfig()
