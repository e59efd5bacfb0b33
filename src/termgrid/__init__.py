"""
termgrid: the screen buffer of a text terminal

A fixed-size grid of styled character cells with a cursor and a
bounded scrollback history.

Quick Start:
    >>> import termgrid
    >>> buf = termgrid.create(10, 3)
    >>> buf.write("hello\\nworld")
    >>> buf.get_line_text(1)
    'world     '

Features:
    - Overwrite and insert-mode writing with auto-wrap
    - Scrollback with oldest-first eviction
    - Clamped cursor movement
    - Live resizing that recalls history and keeps content left-anchored
    - Per-cell style access for attribute-aware renderers
"""

__version__ = "0.1.0"

# Core types
from termgrid.core.style import DEFAULT_STYLE, Style
from termgrid.core.cell import Cell
from termgrid.core.line import Line
from termgrid.core.buffer import TerminalBuffer
from termgrid.core.constants import DEFAULT_HEIGHT, DEFAULT_SCROLLBACK, DEFAULT_WIDTH

# Convenience functions
from termgrid.io.reader import feed, load


def create(
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    max_scrollback: int = DEFAULT_SCROLLBACK,
) -> TerminalBuffer:
    """Create an empty buffer."""
    return TerminalBuffer(width, height, max_scrollback)


__all__ = [
    # Version
    "__version__",
    # Core types
    "Style",
    "DEFAULT_STYLE",
    "Cell",
    "Line",
    "TerminalBuffer",
    # I/O
    "feed",
    "load",
    # Creation
    "create",
]
