"""Sprockets - small utilities for arrays and collections."""

from .util import (
    ElementIndexError,
    ElementsError,
    IntWidth,
    NumberFormatError,
    add_all,
    get,
    slice,
    sum,
    to_ints,
    to_longs,
    to_strings,
)
from .config import (
    ElementsConfig,
    configure_logging,
    get_config,
    reset_config,
    set_config,
)

__all__ = [
    # Operations
    "add_all",
    "get",
    "slice",
    "sum",
    "to_ints",
    "to_longs",
    "to_strings",
    # Widths
    "IntWidth",
    # Errors
    "ElementsError",
    "ElementIndexError",
    "NumberFormatError",
    # Config
    "ElementsConfig",
    "configure_logging",
    "get_config",
    "reset_config",
    "set_config",
]
