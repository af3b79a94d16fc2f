"""Fixed-width integer types backed by numpy dtypes."""

from __future__ import annotations

from enum import Enum

import numpy as np


class IntWidth(Enum):
    """Two's-complement integer widths. Value is the numpy dtype name."""
    INT32 = "int32"
    INT64 = "int64"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype(self.value)

    @property
    def bits(self) -> int:
        return np.iinfo(self.dtype).bits

    @property
    def min(self) -> int:
        return int(np.iinfo(self.dtype).min)

    @property
    def max(self) -> int:
        return int(np.iinfo(self.dtype).max)

    def contains(self, n: int) -> bool:
        """Whether n is representable without wrapping."""
        return self.min <= n <= self.max

    def wrap(self, n: int) -> int:
        """Reduce n into this width's range, as native fixed-width arithmetic would."""
        span = 1 << self.bits
        n &= span - 1
        return n - span if n > self.max else n

    @classmethod
    def of(cls, spec) -> "IntWidth":
        """
        Resolve a width from an IntWidth, a name, or a numpy dtype.

        Names are case-insensitive; "int" and "long" are accepted as
        aliases for the 32 and 64 bit widths.
        """
        if isinstance(spec, cls):
            return spec
        if isinstance(spec, str):
            name = _ALIASES.get(spec.strip().lower())
            if name is None:
                raise ValueError(f"Unknown integer width: {spec!r}")
            return cls(name)
        try:
            dtype = np.dtype(spec)
        except TypeError as e:
            raise ValueError(f"Unknown integer width: {spec!r}") from e
        for width in cls:
            if width.dtype == dtype:
                return width
        raise ValueError(f"Unsupported dtype for integer width: {dtype}")


_ALIASES: dict[str, str] = {
    "int32": "int32",
    "int": "int32",
    "i4": "int32",
    "int64": "int64",
    "long": "int64",
    "i8": "int64",
}
