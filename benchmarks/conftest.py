"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def ascii_document() -> bytes:
    """~100KB of single-byte text."""
    return ("The quick brown fox jumps over the lazy dog. " * 2300).encode()


@pytest.fixture
def mixed_document() -> bytes:
    """~100KB mixing 1-, 2-, 3- and 4-byte characters."""
    return ("Café au lait, 日本語のテキスト, emoji 🚀🌑🎉 and ASCII. " * 1200).encode()


@pytest.fixture
def cjk_document() -> bytes:
    """~100KB of 3-byte characters."""
    return ("春眠不覺曉處處聞啼鳥夜來風雨聲花落知多少" * 1700).encode()
