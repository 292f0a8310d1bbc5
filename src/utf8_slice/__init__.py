"""
utf8_slice: character-indexed, zero-copy slicing of UTF-8 bytes

Python's ``bytes`` index by byte, which splits multi-byte characters.
utf8_slice translates character offsets into byte offsets by scanning for
lead bytes, then returns read-only views into the original storage.

Quick Start:
    >>> import utf8_slice
    >>> s = "The 🚀 goes to the 🌑!".encode()
    >>> utf8_slice.slice(s, 4, 5)
    TextView('🚀')
    >>> utf8_slice.from_(s, 4)
    TextView('🚀 goes to the 🌑!')
    >>> utf8_slice.till(s, 4)
    TextView('The ')
    >>> utf8_slice.len(s)
    20

    >>> # Or work with views directly
    >>> from utf8_slice import TextView
    >>> view = TextView.from_str("日本語")
    >>> view[1:]
    TextView('本語')
    >>> view[1:].obj is view.obj
    True

Reversed Ranges:
    >>> utf8_slice.slice(s, 5, 4)
    Traceback (most recent call last):
    ...
    utf8_slice.errors.InvalidRangeError: invalid range: begin (5) > end (4)

    >>> from utf8_slice import SliceConfig, slice_config_context
    >>> with slice_config_context(SliceConfig(strict_ranges=False)):
    ...     utf8_slice.slice(s, 5, 4)
    TextView('')

Note:
    ``slice`` and ``len`` shadow builtins under ``from utf8_slice import *``.
    Prefer ``import utf8_slice``.
"""

from utf8_slice.config import (
    SliceConfig,
    get_slice_config,
    reset_slice_config,
    set_slice_config,
    slice_config_context,
)
from utf8_slice.core import (
    byte_range,
    char_index,
    char_len,
    chars,
    from_,
    is_lead_byte,
    resolve,
    slice,
    till,
)
from utf8_slice.core import char_len as len
from utf8_slice.errors import (
    InvalidRangeError,
    OffsetError,
    UnsupportedBufferError,
    Utf8SliceError,
)
from utf8_slice.profiling import ScanAccumulator, get_scan_accumulator, profiled_scan
from utf8_slice.view import Buffer, TextView, as_view

__version__ = "0.1.0"


__all__ = [  # noqa: RUF022 grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "slice",
    "from_",
    "till",
    "len",
    "char_len",
    "resolve",
    "byte_range",
    "char_index",
    "chars",
    "is_lead_byte",
    # Views
    "Buffer",
    "TextView",
    "as_view",
    # Errors
    "Utf8SliceError",
    "InvalidRangeError",
    "OffsetError",
    "UnsupportedBufferError",
    # Configuration (ContextVar-based)
    "SliceConfig",
    "get_slice_config",
    "set_slice_config",
    "reset_slice_config",
    "slice_config_context",
    # Profiling
    "ScanAccumulator",
    "get_scan_accumulator",
    "profiled_scan",
]
