"""Cell - one character position of the grid."""

from dataclasses import dataclass

from termgrid.core.constants import BLANK
from termgrid.core.style import DEFAULT_STYLE, Style


@dataclass(slots=True)
class Cell:
    """
    A single character with its style.
    
    Cells are mutated in place by the Line that owns them.
    """
    char: str = BLANK
    style: Style = DEFAULT_STYLE
    
    def update(self, char: str, style: Style) -> None:
        """Replace both the character and the style."""
        self.char = char
        self.style = style
    
    def copy(self) -> "Cell":
        """Create a copy of this cell."""
        return Cell(char=self.char, style=self.style)
    
    def is_blank(self) -> bool:
        """Check if the cell holds a space, whatever its style."""
        return self.char == BLANK
    
    def is_default(self) -> bool:
        """Check if this cell has default values (space, default style)."""
        return self.char == BLANK and self.style == DEFAULT_STYLE
    
    def __str__(self) -> str:
        return self.char
