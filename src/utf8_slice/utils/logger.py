"""Minimal logging utilities for utf8_slice.

Every utf8_slice logger lives under the "utf8_slice" namespace, so an
application can enable the DEBUG record for reversed ranges in lenient mode
with a single ``logging.getLogger("utf8_slice").setLevel(logging.DEBUG)``.
The library never installs handlers.

Example:
    >>> from utf8_slice.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Resolving offsets")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given name.

    Returns a standard library logger with the "utf8_slice." prefix.

    Args:
        name: Logger name (typically __name__)

    Returns:
        logging.Logger instance

    Example:
        >>> logger = get_logger("mymodule")
        >>> logger.name
        'utf8_slice.mymodule'
    """
    if not (name == "utf8_slice" or name.startswith("utf8_slice.")):
        name = f"utf8_slice.{name}"
    return logging.getLogger(name)
