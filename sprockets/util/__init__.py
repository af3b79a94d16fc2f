"""Array and collection element utilities."""

from .elements import (
    add_all,
    get,
    slice,
    sum,
    to_ints,
    to_longs,
    to_strings,
)
from .errors import ElementIndexError, ElementsError, NumberFormatError
from .widths import IntWidth

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
]
