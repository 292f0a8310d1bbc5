"""Exception classes for utf8_slice.

Provides standardized exceptions for caller-contract violations. Every
exception also subclasses the matching builtin, so ``except ValueError``
and ``except TypeError`` keep working.
"""

from __future__ import annotations


class Utf8SliceError(Exception):
    """Base exception for all utf8_slice errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidRangeError(Utf8SliceError, ValueError):
    """Range slice requested with ``begin > end``.

    Raised only while ``SliceConfig.strict_ranges`` is enabled (the default).
    """

    def __init__(self, begin: int, end: int) -> None:
        """Initialize invalid range error.

        Args:
            begin: Requested start, in characters
            end: Requested end, in characters
        """
        self.begin = begin
        self.end = end
        super().__init__(f"invalid range: begin ({begin}) > end ({end})")


class OffsetError(Utf8SliceError, ValueError):
    """A character or byte offset is negative."""

    def __init__(self, name: str, value: int) -> None:
        """Initialize offset error.

        Args:
            name: Parameter name (e.g., "begin", "end", "byte_offset")
            value: The rejected value
        """
        self.name = name
        self.value = value
        super().__init__(f"'{name}' must be a non-negative offset, got {value}")


class UnsupportedBufferError(Utf8SliceError, TypeError):
    """Object cannot be viewed as a flat run of bytes."""

    def __init__(self, type_name: str, message: str = "") -> None:
        """Initialize unsupported buffer error.

        Args:
            type_name: Name of the rejected type
            message: Optional detail about why it was rejected
        """
        self.type_name = type_name
        detail = f": {message}" if message else ""
        super().__init__(f"Cannot create a text view over '{type_name}'{detail}")
