"""Line - a fixed-width row of cells."""

from typing import Iterator

from termgrid.core.cell import Cell
from termgrid.core.constants import BLANK
from termgrid.core.style import DEFAULT_STYLE, Style


class Line:
    """
    A row of Cells whose width never changes.
    
    Changing the width means building a new Line with ``resized()``.
    Out-of-range writes, and content that is not exactly one character,
    are ignored so malformed input cannot break the row; only
    ``get_cell()`` raises.
    """
    
    __slots__ = ("_cells",)
    
    def __init__(self, width: int):
        if width <= 0:
            raise ValueError(f"Line width must be > 0, got {width}")
        self._cells: list[Cell] = [Cell() for _ in range(width)]
    
    @property
    def width(self) -> int:
        return len(self._cells)
    
    def __len__(self) -> int:
        return len(self._cells)
    
    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)
    
    def __str__(self) -> str:
        return ''.join(cell.char for cell in self._cells)
    
    def __repr__(self) -> str:
        return f"Line({str(self)!r})"
    
    def set_cell(self, x: int, char: str, style: Style = DEFAULT_STYLE) -> None:
        """Set the cell at column x; ignored when x is outside the line or char is not one character."""
        if 0 <= x < len(self._cells) and len(char) == 1:
            self._cells[x].update(char, style)
    
    def get_cell(self, x: int) -> Cell:
        """Get the cell at column x."""
        if x < 0 or x >= len(self._cells):
            raise IndexError(f"x={x} out of bounds (width={len(self._cells)})")
        return self._cells[x]
    
    def insert_at(self, x: int, char: str, style: Style = DEFAULT_STYLE) -> Cell | None:
        """
        Insert a character at column x, shifting the rest of the row right.
        
        The cell pushed off the right edge is returned so the caller can
        carry it onto the next row. Returns None (and changes nothing)
        when x is outside the line or char is not a single character.
        """
        if x < 0 or x >= len(self._cells) or len(char) != 1:
            return None
        pushed = self._cells.pop()
        self._cells.insert(x, Cell(char, style))
        return pushed
    
    def fill(self, char: str, style: Style = DEFAULT_STYLE) -> None:
        """Set every cell to the same character and style."""
        if len(char) != 1:
            return
        for cell in self._cells:
            cell.update(char, style)
    
    def clear(self, style: Style = DEFAULT_STYLE) -> None:
        """Blank the row with the given style."""
        self.fill(BLANK, style)
    
    def is_blank(self) -> bool:
        """Check if every cell holds a space."""
        return all(cell.is_blank() for cell in self._cells)
    
    def copy(self) -> "Line":
        """Create a deep copy of this line."""
        return self.resized(len(self._cells))
    
    def resized(self, new_width: int) -> "Line":
        """
        Return a copy of this line at a new width.
        
        Content stays anchored at column 0: extra columns are blank,
        columns past the new width are dropped. The original is untouched.
        """
        line = Line(new_width)
        for x, cell in enumerate(self._cells[:new_width]):
            line._cells[x] = cell.copy()
        return line
