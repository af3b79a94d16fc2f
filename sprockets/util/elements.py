"""
Utility functions for working with array and collection elements.

Every function is a single pass over its input with no retained state:

- add_all: insert values into a caller-owned collection
- get: bounds-safe single element lookup
- slice: select elements by an explicit index list
- sum: fixed-width integer sum that wraps like native arithmetic
- to_ints / to_longs / to_strings: decimal string conversions

Numeric results use numpy arrays so the 32 and 64 bit widths stay explicit.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Iterable, Optional, Sequence, TypeVar

import numpy as np

from .errors import ElementIndexError, NumberFormatError
from .widths import IntWidth

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Width for plain Python sequences when no width is given
DEFAULT_WIDTH = IntWidth.INT64

# Optional sign followed by ASCII digits only
DECIMAL_LITERAL = re.compile(r"[+-]?[0-9]+")


def _reject_text(values: Any) -> None:
    # A bare str or bytes would otherwise iterate as characters
    if isinstance(values, (str, bytes, bytearray)):
        raise TypeError(f"Expected a sequence of values, got {type(values).__name__}")


def add_all(collection: Any, values: Iterable[int]) -> bool:
    """
    Add all values to the collection, in order.

    The collection must support add() (set-like) or append() (list-like).

    Returns:
        True if at least one insertion changed the collection's size
    """
    add = getattr(collection, "add", None) or getattr(collection, "append", None)
    if add is None:
        raise TypeError(f"{type(collection).__name__} supports neither add() nor append()")
    _reject_text(values)

    changed = False
    for value in values:
        before = len(collection)
        add(int(value))
        changed |= len(collection) != before
    return changed


def get(sequence: Optional[Sequence[T]], index: int) -> Optional[T]:
    """
    Get the element at the index in the sequence.

    Returns None if the sequence is None or the index is out of bounds.
    Negative indexes are out of bounds.
    """
    if sequence is not None and 0 <= index < len(sequence):
        return sequence[index]
    return None


def slice(sequence: Sequence[T], indexes: Iterable[int]) -> Sequence[T]:
    """
    Get the elements in the sequence that are at the indexes.

    The result follows the order of indexes and may repeat elements. Lists
    give lists, tuples give tuples, numpy arrays give arrays of the same
    dtype, and anything else gives a list.

    Raises:
        ElementIndexError: if any index is negative or >= len(sequence)
    """
    length = len(sequence)
    positions = list(indexes)
    for position, index in enumerate(positions):
        if not 0 <= index < length:
            logger.debug(f"slice rejected index {index} at position {position} (length {length})")
            raise ElementIndexError(index, position, length)

    if isinstance(sequence, np.ndarray):
        return sequence[np.asarray(positions, dtype=np.intp)]
    selected = [sequence[i] for i in positions]
    if isinstance(sequence, tuple):
        return tuple(selected)
    return selected


def _resolve_width(values: Any, width: Any) -> IntWidth:
    if isinstance(values, np.ndarray):
        own = IntWidth.of(values.dtype)
        if width is None:
            return own
        resolved = IntWidth.of(width)
        if not np.can_cast(own.dtype, resolved.dtype, "safe"):
            raise ValueError(f"Cannot sum {own.value} values as {resolved.value}")
        return resolved
    return DEFAULT_WIDTH if width is None else IntWidth.of(width)


def sum(values: Iterable[int], width: Any = None) -> int:
    """
    Get the sum of the values using fixed-width arithmetic.

    Overflow wraps silently in two's complement. The width comes from the
    width argument, else the dtype of a numpy array, else int64. Every
    value must fit the chosen width: a narrower width than an array's
    dtype, or a Python int out of range, raises ValueError.
    """
    _reject_text(values)
    resolved = _resolve_width(values, width)
    if not isinstance(values, np.ndarray):
        values = [int(value) for value in values]
        for position, value in enumerate(values):
            if not resolved.contains(value):
                raise ValueError(f"{value} at position {position} does not fit {resolved.value}")
    array = np.asarray(values, dtype=resolved.dtype)
    return int(array.sum(dtype=resolved.dtype))


def _parse(values: Iterable[str], width: IntWidth) -> np.ndarray:
    _reject_text(values)
    tokens = list(values)
    parsed = np.empty(len(tokens), dtype=width.dtype)
    for position, token in enumerate(tokens):
        if not isinstance(token, str) or DECIMAL_LITERAL.fullmatch(token) is None:
            logger.debug(f"Cannot parse {token!r} at position {position} as {width.value}")
            raise NumberFormatError(token, position, width.value)
        n = int(token)
        if not width.contains(n):
            logger.debug(f"{token!r} at position {position} is out of range for {width.value}")
            raise NumberFormatError(token, position, width.value, "out of range")
        parsed[position] = n
    return parsed


def to_ints(values: Iterable[str]) -> np.ndarray:
    """Convert the strings to an int32 array."""
    return _parse(values, IntWidth.INT32)


def to_longs(values: Iterable[str]) -> np.ndarray:
    """Convert the strings to an int64 array."""
    return _parse(values, IntWidth.INT64)


def to_strings(values: Iterable[int]) -> list[str]:
    """Convert the ints or longs to a list of decimal strings."""
    _reject_text(values)
    return [str(int(value)) for value in values]
