"""utf8_slice ScanAccumulator: opt-in profiling for offset resolution.

This module provides accumulated metrics while slicing:
- Number of resolver scans and bytes they covered
- Number of character-length scans and bytes they covered
- Wall time of the profiled block

Zero overhead when disabled (get_scan_accumulator() returns None).

Example:
    from utf8_slice import slice
    from utf8_slice.profiling import profiled_scan

    with profiled_scan() as metrics:
        slice("日本語".encode(), 1, 2)

    print(metrics.summary())
    # {"total_ms": 0.01, "resolve_calls": 2, "bytes_scanned": 11, ...}

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, field
from time import perf_counter
from typing import Any


@dataclass
class ScanAccumulator:
    """Accumulated metrics for byte scans.

    Attributes:
        start_time: Profiling start timestamp.
        resolve_calls: Number of resolver scans (zero-offset shortcuts excluded).
        bytes_scanned: Bytes examined by resolver scans, up to and including
            the byte where each scan stopped.
        length_calls: Number of character-length scans.
        bytes_counted: Total size of the buffers handed to char_len().

    """

    start_time: float = field(default_factory=perf_counter)
    resolve_calls: int = 0
    bytes_scanned: int = 0
    length_calls: int = 0
    bytes_counted: int = 0

    def record_resolve(self, nbytes: int) -> None:
        """Record one resolver scan that examined ``nbytes`` bytes."""
        self.resolve_calls += 1
        self.bytes_scanned += nbytes

    def record_length(self, nbytes: int) -> None:
        """Record one character-length scan over ``nbytes`` bytes."""
        self.length_calls += 1
        self.bytes_counted += nbytes

    @property
    def total_duration_ms(self) -> float:
        """Total profiling duration in milliseconds."""
        return (perf_counter() - self.start_time) * 1000

    def summary(self) -> dict[str, Any]:
        """Get summary of scan metrics.

        Returns:
            Dict with total_ms, resolve_calls, bytes_scanned, length_calls,
            bytes_counted.

        """
        return {
            "total_ms": round(self.total_duration_ms, 2),
            "resolve_calls": self.resolve_calls,
            "bytes_scanned": self.bytes_scanned,
            "length_calls": self.length_calls,
            "bytes_counted": self.bytes_counted,
        }


_accumulator: ContextVar[ScanAccumulator | None] = ContextVar(
    "scan_accumulator",
    default=None,
)


def get_scan_accumulator() -> ScanAccumulator | None:
    """Get current accumulator (None if profiling disabled)."""
    return _accumulator.get()


@contextmanager
def profiled_scan() -> Iterator[ScanAccumulator]:
    """Context manager for profiled slicing.

    Creates a ScanAccumulator and makes it available via
    get_scan_accumulator() for the duration of the with block.

    Yields:
        ScanAccumulator that will be populated by resolver and length scans.

    """
    acc = ScanAccumulator()
    token: Token[ScanAccumulator | None] = _accumulator.set(acc)
    try:
        yield acc
    finally:
        _accumulator.reset(token)
