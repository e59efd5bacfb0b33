"""Shared fixtures for buffer tests."""

from pathlib import Path

import pytest

from termgrid.core.buffer import TerminalBuffer
from termgrid.core.style import Style


@pytest.fixture
def buffer() -> TerminalBuffer:
    """A 10x5 buffer with room for 10 scrollback lines."""
    return TerminalBuffer(10, 5, 10)


@pytest.fixture
def red_bold() -> Style:
    return Style(fg=1, bold=True)


@pytest.fixture
def text_file(tmp_path: Path) -> Path:
    """A small text file with Windows line endings."""
    path = tmp_path / "sample.txt"
    path.write_bytes(b"aaaa\r\nbbbb\r\ncccc\r\n")
    return path
