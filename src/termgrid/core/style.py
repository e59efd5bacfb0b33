"""Style - immutable text appearance shared between cells."""

from dataclasses import dataclass, replace

from termgrid.core.constants import DEFAULT_COLOR


@dataclass(frozen=True, slots=True)
class Style:
    """
    Appearance of a character cell.
    
    Colors are raw integers; ``-1`` leaves the choice to the terminal.
    Instances are frozen, so one Style can back any number of cells.
    """
    fg: int = DEFAULT_COLOR
    bg: int = DEFAULT_COLOR
    bold: bool = False
    italic: bool = False
    underline: bool = False
    
    @classmethod
    def default(cls) -> "Style":
        """Return the shared default style."""
        return DEFAULT_STYLE
    
    def is_default(self) -> bool:
        """Check if every field has its default value."""
        return self == DEFAULT_STYLE
    
    def replace(self, **changes) -> "Style":
        """Return a new Style with some fields changed."""
        return replace(self, **changes)


DEFAULT_STYLE = Style()
