"""Core data structures for the terminal screen buffer."""

from termgrid.core.style import DEFAULT_STYLE, Style
from termgrid.core.cell import Cell
from termgrid.core.line import Line
from termgrid.core.buffer import TerminalBuffer

__all__ = ["DEFAULT_STYLE", "Style", "Cell", "Line", "TerminalBuffer"]
