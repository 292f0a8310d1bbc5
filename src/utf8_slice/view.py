"""Read-only, non-owning views over UTF-8 encoded bytes.

A TextView wraps a read-only memoryview into the caller's storage. Slicing a
view produces another view over the same exporting object: no bytes are
copied, the underlying ``obj`` is shared.

Architecture:
- TextView: immutable handle around a flat, read-only ``memoryview``
- as_view(): accept any supported buffer, pass TextViews through untouched
- Character-indexed slicing delegates to utf8_slice.core

Lifetime:
A view keeps its exporter alive (memoryview holds a reference), but for a
``bytearray`` source the caller must not resize or mutate it while views are
in use. The view itself never writes.

Thread Safety:
TextView has no mutable state after construction. Safe to share across
threads.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from utf8_slice.errors import UnsupportedBufferError

# memoryview formats that are one byte wide and can be recast to "B"
_BYTE_FORMATS: frozenset[str] = frozenset("Bbc")


def _readonly_bytes(buffer: Any) -> memoryview:
    """Return a flat, read-only, unsigned-byte memoryview over ``buffer``."""
    if isinstance(buffer, TextView):
        return buffer.buffer
    if isinstance(buffer, str):
        raise UnsupportedBufferError(
            "str", "encode it first or use TextView.from_str()"
        )
    try:
        mv = memoryview(buffer)
    except TypeError:
        raise UnsupportedBufferError(type(buffer).__name__) from None

    if mv.ndim != 1 or not mv.c_contiguous:
        raise UnsupportedBufferError(
            type(buffer).__name__, "buffer must be one-dimensional and contiguous"
        )
    if mv.format not in _BYTE_FORMATS:
        raise UnsupportedBufferError(
            type(buffer).__name__, f"unsupported item format {mv.format!r}"
        )
    if mv.format != "B":
        mv = mv.cast("B")
    return mv.toreadonly()


class TextView:
    """Read-only view of a contiguous run of UTF-8 bytes.

    ``len(view)`` is the byte length, as for ``memoryview``. Use
    ``view.char_len()`` for the number of characters (Unicode scalar values).

    Indexing is by character:

        >>> view = TextView.from_str("aé日🎉")
        >>> view[1:3]
        TextView('é日')
        >>> view[3]
        TextView('🎉')
        >>> view.char_len(), len(view)
        (4, 10)

    Equality behaves like ``bytes``: a view equals another view or a
    bytes-like object with the same bytes, and never equals a ``str``
    (compare ``str(view)`` instead). Views over immutable storage hash like
    ``bytes(view)``; views over mutable storage such as ``bytearray`` are
    unhashable, as ``bytearray`` itself is.
    """

    __slots__ = ("_buf",)

    def __init__(self, buffer: Buffer) -> None:
        """Wrap ``buffer`` without copying.

        Args:
            buffer: bytes, bytearray, a one-byte-format memoryview, or another
                TextView

        Raises:
            UnsupportedBufferError: If ``buffer`` is a str, not a buffer, or
                not a flat sequence of bytes.
        """
        self._buf: memoryview = _readonly_bytes(buffer)

    @classmethod
    def _wrap(cls, mv: memoryview) -> TextView:
        """Build a view around an already normalized memoryview."""
        view = cls.__new__(cls)
        view._buf = mv
        return view

    @classmethod
    def from_str(cls, text: str) -> TextView:
        """Encode ``text`` to UTF-8 once and view the result.

        This is the only constructor that allocates: a Python ``str`` is not
        stored as UTF-8.
        """
        return cls(text.encode("utf-8"))

    # ------------------------------------------------------------------
    # Buffer access
    # ------------------------------------------------------------------

    @property
    def buffer(self) -> memoryview:
        """The underlying read-only memoryview (format ``B``)."""
        return self._buf

    @property
    def obj(self) -> Any:
        """The object that owns the storage this view borrows from."""
        return self._buf.obj

    @property
    def nbytes(self) -> int:
        """Length in bytes."""
        return self._buf.nbytes

    def tobytes(self) -> bytes:
        """Copy the viewed bytes into a new ``bytes`` object."""
        return self._buf.tobytes()

    def decode(self, errors: str = "strict") -> str:
        """Decode the viewed bytes as UTF-8."""
        return str(self._buf, "utf-8", errors)

    # ------------------------------------------------------------------
    # Character-indexed operations
    # ------------------------------------------------------------------

    def resolve(self, char_count: int) -> int:
        """Byte offset after the first ``char_count`` characters."""
        from utf8_slice.core import resolve

        return resolve(self, char_count)

    def slice(self, begin: int, end: int) -> TextView:
        """Characters ``[begin, end)`` of this view."""
        from utf8_slice.core import slice as slice_chars

        return slice_chars(self, begin, end)

    def from_(self, begin: int) -> TextView:
        """Characters from ``begin`` to the end of this view."""
        from utf8_slice.core import from_

        return from_(self, begin)

    def till(self, end: int) -> TextView:
        """The first ``end`` characters of this view."""
        from utf8_slice.core import till

        return till(self, end)

    def char_len(self) -> int:
        """Number of characters (Unicode scalar values) in this view."""
        from utf8_slice.core import char_len

        return char_len(self)

    def chars(self) -> Iterator[TextView]:
        """Iterate over single-character views."""
        from utf8_slice.core import chars

        return chars(self)

    def __getitem__(self, key: int | slice) -> TextView:
        from utf8_slice.core import from_, slice as slice_chars

        if isinstance(key, slice):
            if key.step is not None:
                raise TypeError("TextView slicing does not support a step")
            begin = 0 if key.start is None else key.start
            if key.stop is None:
                return from_(self, begin)
            return slice_chars(self, begin, key.stop)

        char = slice_chars(self, key, key + 1)
        if not char.nbytes:
            raise IndexError("TextView character index out of range")
        return char

    # ------------------------------------------------------------------
    # Dunder protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return self._buf.nbytes

    def __bytes__(self) -> bytes:
        return self._buf.tobytes()

    def __str__(self) -> str:
        return self.decode()

    def __repr__(self) -> str:
        return f"TextView({self.decode(errors='replace')!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TextView):
            return self._buf == other._buf
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self._buf == other
        return NotImplemented

    def __hash__(self) -> int:
        if not memoryview(self._buf.obj).readonly:
            raise TypeError(
                f"unhashable TextView over mutable '{type(self._buf.obj).__name__}'"
            )
        return hash(self._buf)


def as_view(buffer: Buffer) -> TextView:
    """Return ``buffer`` if it is already a TextView, otherwise wrap it."""
    if isinstance(buffer, TextView):
        return buffer
    return TextView(buffer)


type Buffer = bytes | bytearray | memoryview | TextView


__all__ = ["Buffer", "TextView", "as_view"]
