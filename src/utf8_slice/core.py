"""Character-offset resolution and zero-copy slicing over UTF-8 bytes.

Every operation is built on one primitive: the offset resolver, which walks
the bytes left to right counting lead bytes until it has consumed the
requested number of characters.

A byte starts a character unless it matches the continuation pattern
``10xxxxxx``. That test depends only on the byte's role in the encoding, so
no code point is ever decoded and no table is consulted.

Example:
    >>> from utf8_slice import slice, from_, till, len
    >>> s = "The 🚀 goes to the 🌑!".encode()
    >>> slice(s, 4, 5)
    TextView('🚀')
    >>> from_(s, 4)
    TextView('🚀 goes to the 🌑!')
    >>> till(s, 5)
    TextView('The 🚀')
    >>> len(s)
    20

Complexity:
    resolve, from_, till and char_len are O(n) in the bytes scanned. slice
    resolves ``end`` first and then ``begin`` within the prefix that scan
    produced, so the second scan never looks past the end of the result.

Thread Safety:
    All functions are pure over read-only input. The strict/lenient range
    policy and scan profiling are read from ContextVars.
"""

from __future__ import annotations

import operator
from collections.abc import Iterator

from utf8_slice.config import get_slice_config
from utf8_slice.errors import InvalidRangeError, OffsetError
from utf8_slice.profiling import get_scan_accumulator
from utf8_slice.utils.logger import get_logger
from utf8_slice.view import Buffer, TextView, as_view

logger = get_logger(__name__)

# Continuation bytes are 0b10xxxxxx
_ROLE_MASK = 0xC0
_CONTINUATION = 0x80


def is_lead_byte(byte: int) -> bool:
    """True if ``byte`` starts a character (it is not a continuation byte)."""
    return byte & _ROLE_MASK != _CONTINUATION


def _check_offset(name: str, value: int) -> int:
    if isinstance(value, bool):
        raise TypeError(f"'{name}' must be an int, not bool")
    value = operator.index(value)
    if value < 0:
        raise OffsetError(name, value)
    return value


def _resolve(buf: memoryview, char_count: int) -> int:
    """Byte offset of the (char_count + 1)-th lead byte, or ``buf.nbytes``."""
    if char_count == 0:
        return 0

    seen = 0
    position = buf.nbytes
    for offset, byte in enumerate(buf):
        if byte & _ROLE_MASK != _CONTINUATION:
            if seen == char_count:
                position = offset
                break
            seen += 1

    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_resolve(min(position + 1, buf.nbytes))
    return position


def _byte_range(buf: memoryview, begin: int, end: int) -> tuple[int, int]:
    if begin > end:
        if get_slice_config().strict_ranges:
            raise InvalidRangeError(begin, end)
        stop = _resolve(buf, end)
        logger.debug(
            "Reversed range begin=%d end=%d; returning empty view at byte %d",
            begin,
            end,
            stop,
        )
        return stop, stop

    stop = _resolve(buf, end)
    # begin <= end, so the begin-th boundary lies inside [0, stop)
    start = _resolve(buf[:stop], begin)
    return start, stop


def resolve(buffer: Buffer, char_count: int) -> int:
    """Translate a character offset into a byte offset.

    Scans left to right and returns the byte offset immediately after the
    ``char_count``-th character. Saturates at the byte length of the buffer
    when ``char_count`` is at or beyond the character length.

    Args:
        buffer: UTF-8 encoded bytes (assumed valid)
        char_count: Number of characters to consume

    Returns:
        Byte offset in ``[0, nbytes]``, always on a character boundary

    Raises:
        OffsetError: If ``char_count`` is negative

    Example:
        >>> resolve("aé日🎉".encode(), 2)
        3
        >>> resolve(b"abc", 10)
        3
    """
    char_count = _check_offset("char_count", char_count)
    return _resolve(as_view(buffer).buffer, char_count)


def byte_range(buffer: Buffer, begin: int, end: int) -> tuple[int, int]:
    """Byte offsets ``(start, stop)`` of characters ``[begin, end)``.

    Same resolution order and range policy as :func:`slice`.
    """
    begin = _check_offset("begin", begin)
    end = _check_offset("end", end)
    return _byte_range(as_view(buffer).buffer, begin, end)


def slice(buffer: Buffer, begin: int, end: int) -> TextView:
    """View of characters ``[begin, end)``.

    Resolves ``end`` over the whole buffer, then ``begin`` over the prefix
    ending there. Offsets past the end saturate.

    Args:
        buffer: UTF-8 encoded bytes (assumed valid)
        begin: First character to include
        end: First character to exclude; must be ``>= begin``

    Returns:
        TextView sharing storage with ``buffer``

    Raises:
        InvalidRangeError: If ``begin > end`` and strict ranges are enabled
            (the default). With ``SliceConfig(strict_ranges=False)`` an empty
            view is returned instead.
        OffsetError: If either offset is negative

    Example:
        >>> slice(b"Hello, World!", 7, 12)
        TextView('World')
    """
    begin = _check_offset("begin", begin)
    end = _check_offset("end", end)
    buf = as_view(buffer).buffer
    start, stop = _byte_range(buf, begin, end)
    return TextView._wrap(buf[start:stop])


def from_(buffer: Buffer, begin: int) -> TextView:
    """View of every character from ``begin`` onward.

    Named ``from_`` because ``from`` is a keyword. Empty when ``begin`` is at
    or beyond the character length.
    """
    begin = _check_offset("begin", begin)
    buf = as_view(buffer).buffer
    return TextView._wrap(buf[_resolve(buf, begin) :])


def till(buffer: Buffer, end: int) -> TextView:
    """View of the first ``end`` characters (the whole buffer if fewer)."""
    end = _check_offset("end", end)
    buf = as_view(buffer).buffer
    return TextView._wrap(buf[: _resolve(buf, end)])


def char_len(buffer: Buffer) -> int:
    """Number of characters (Unicode scalar values) in ``buffer``.

    Counts lead bytes. This is neither the byte length nor the number of
    user-perceived characters: "👨‍🚀" is three scalar values.
    """
    buf = as_view(buffer).buffer
    acc = get_scan_accumulator()
    if acc is not None:
        acc.record_length(buf.nbytes)
    return sum(1 for byte in buf if byte & _ROLE_MASK != _CONTINUATION)


def char_index(buffer: Buffer, byte_offset: int) -> int:
    """Number of characters that start before ``byte_offset``.

    The reverse of :func:`resolve`, by re-scanning the prefix. Saturates at
    the character length.
    """
    byte_offset = _check_offset("byte_offset", byte_offset)
    return char_len(as_view(buffer).buffer[:byte_offset])


def chars(buffer: Buffer) -> Iterator[TextView]:
    """Yield one single-character view per character, in a single pass.

    The k-th item equals ``slice(buffer, k, k + 1)``.
    """
    buf = as_view(buffer).buffer
    start = 0
    started = False
    for offset, byte in enumerate(buf):
        if byte & _ROLE_MASK != _CONTINUATION:
            if started:
                yield TextView._wrap(buf[start:offset])
                start = offset
            started = True
    if started:
        yield TextView._wrap(buf[start:])


__all__ = [
    "byte_range",
    "char_index",
    "char_len",
    "chars",
    "from_",
    "is_lead_byte",
    "resolve",
    "slice",
    "till",
]
