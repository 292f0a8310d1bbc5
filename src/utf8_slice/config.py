"""ContextVar-based slicing configuration for utf8_slice.

Provides thread-local configuration using Python's ContextVars (PEP 567).
The only knob today is how a reversed range (``begin > end``) is handled.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and one thread's policy never leaks into another.

Usage:
    from utf8_slice import slice
    from utf8_slice.config import SliceConfig, slice_config_context

    slice(b"abc", 2, 1)  # raises InvalidRangeError

    with slice_config_context(SliceConfig(strict_ranges=False)):
        slice(b"abc", 2, 1)  # empty view

"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True, slots=True)
class SliceConfig:
    """Immutable slicing configuration.

    Attributes:
        strict_ranges: Raise InvalidRangeError when a range slice gets
            ``begin > end``. When False, an empty view positioned at the
            resolved end is returned instead.

    """

    strict_ranges: bool = True

    @classmethod
    def from_dict(cls, config_dict: dict) -> "SliceConfig":
        """Create SliceConfig from dictionary.

        Only includes keys that are valid SliceConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> SliceConfig.from_dict({"strict_ranges": False, "other": 1})
            SliceConfig(strict_ranges=False)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: SliceConfig = SliceConfig()

_slice_config: ContextVar[SliceConfig] = ContextVar(
    "slice_config",
    default=_DEFAULT_CONFIG,
)


def get_slice_config() -> SliceConfig:
    """Get current slicing configuration (thread-local)."""
    return _slice_config.get()


def set_slice_config(config: SliceConfig) -> None:
    """Set slicing configuration for current context.

    Args:
        config: SliceConfig instance to use for this context.

    """
    _slice_config.set(config)


def reset_slice_config() -> None:
    """Reset to default configuration.

    Reuses the module-level _DEFAULT_CONFIG singleton, avoiding allocation.
    """
    _slice_config.set(_DEFAULT_CONFIG)


@contextmanager
def slice_config_context(config: SliceConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with slice_config_context(SliceConfig(strict_ranges=False)):
        ...     get_slice_config().strict_ranges
        False

    """
    previous = _slice_config.get()
    _slice_config.set(config)
    try:
        yield
    finally:
        _slice_config.set(previous)


__all__ = [
    "SliceConfig",
    "get_slice_config",
    "set_slice_config",
    "reset_slice_config",
    "slice_config_context",
]
