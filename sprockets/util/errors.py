"""Errors raised by the element operations."""

from typing import Optional


class ElementsError(Exception):
    """Base class for element operation failures."""


class ElementIndexError(ElementsError, IndexError):
    """An index in a slice selector falls outside the target sequence."""

    def __init__(self, index: int, position: int, length: int):
        self.index = index
        self.position = position
        self.length = length
        super().__init__(
            f"index {index} at position {position} out of range for length {length}"
        )


class NumberFormatError(ElementsError, ValueError):
    """A token could not be parsed as an integer of the requested width."""

    def __init__(self, token: object, position: int, width: str, reason: Optional[str] = None):
        self.token = token
        self.position = position
        self.width = width
        message = f"For input {token!r} at position {position}: not a valid {width}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
