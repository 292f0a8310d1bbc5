"""Shared utilities for utf8_slice."""

from utf8_slice.utils.logger import get_logger

__all__ = ["get_logger"]
