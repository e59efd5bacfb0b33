"""TerminalBuffer - screen grid, cursor and scrollback history."""

import logging
from collections import deque
from typing import Callable, Iterator

from termgrid.core.cell import Cell
from termgrid.core.constants import NEWLINE
from termgrid.core.line import Line
from termgrid.core.style import DEFAULT_STYLE, Style

logger = logging.getLogger(__name__)


class TerminalBuffer:
    """
    The display state of a text terminal.
    
    Holds ``height`` visible Lines (the screen), a bounded history of
    Lines that scrolled off the top (the scrollback, oldest first), the
    cursor position and the style applied to new characters.
    
    Row addressing for ``get_line()`` runs through the scrollback first
    and then the screen, so index 0 is the oldest line still remembered.
    
    Not thread-safe; serialize access when sharing a buffer.
    """
    
    def __init__(self, width: int, height: int, max_scrollback: int):
        if width <= 0 or height <= 0 or max_scrollback < 0:
            raise ValueError(
                f"Invalid dimensions: width={width}, height={height}, "
                f"max_scrollback={max_scrollback}"
            )
        self._width = width
        self._height = height
        self._max_scrollback = max_scrollback
        
        self._screen: deque[Line] = deque(Line(width) for _ in range(height))
        self._scrollback: deque[Line] = deque()
        
        self._cursor_x = 0
        self._cursor_y = 0
        self._style = DEFAULT_STYLE
    
    def __repr__(self) -> str:
        return (
            f"TerminalBuffer(width={self._width}, height={self._height}, "
            f"max_scrollback={self._max_scrollback}, "
            f"scrollback={len(self._scrollback)}, cursor={self.cursor})"
        )
    
    # Dimensions and state
    
    @property
    def width(self) -> int:
        return self._width
    
    @property
    def height(self) -> int:
        return self._height
    
    @property
    def max_scrollback(self) -> int:
        return self._max_scrollback
    
    @property
    def scrollback_size(self) -> int:
        return len(self._scrollback)
    
    @property
    def line_count(self) -> int:
        """Number of addressable lines (scrollback plus screen)."""
        return len(self._scrollback) + self._height
    
    @property
    def cursor_x(self) -> int:
        return self._cursor_x
    
    @property
    def cursor_y(self) -> int:
        return self._cursor_y
    
    @property
    def cursor(self) -> tuple[int, int]:
        return self._cursor_x, self._cursor_y
    
    @property
    def current_style(self) -> Style:
        return self._style
    
    # Cursor
    
    def set_cursor(self, x: int, y: int) -> None:
        """Move the cursor, clamping to the screen edges."""
        self._cursor_x = max(0, min(x, self._width - 1))
        self._cursor_y = max(0, min(y, self._height - 1))
    
    def move_cursor(self, dx: int, dy: int) -> None:
        """Move the cursor relative to its position; stops at the edges."""
        self.set_cursor(self._cursor_x + dx, self._cursor_y + dy)
    
    def move_up(self, n: int = 1) -> None:
        self.move_cursor(0, -n)
    
    def move_down(self, n: int = 1) -> None:
        self.move_cursor(0, n)
    
    def move_left(self, n: int = 1) -> None:
        self.move_cursor(-n, 0)
    
    def move_right(self, n: int = 1) -> None:
        self.move_cursor(n, 0)
    
    def set_style(self, style: Style | None) -> None:
        """Set the style for subsequent writes; None restores the default."""
        self._style = style if style is not None else DEFAULT_STYLE
    
    # Scrolling
    
    def add_empty_line(self) -> None:
        """
        Scroll the screen up by one line.
        
        The top line moves into the scrollback (dropping the oldest
        history line when full) and a blank line is added at the bottom.
        """
        self._push_scrollback(self._screen.popleft())
        self._screen.append(Line(self._width))
    
    def _push_scrollback(self, line: Line) -> None:
        self._scrollback.append(line)
        if len(self._scrollback) > self._max_scrollback:
            self._scrollback.popleft()
            logger.debug("Scrollback full (%d), evicted oldest line", self._max_scrollback)
    
    def _new_line(self) -> None:
        self._cursor_x = 0
        if self._cursor_y < self._height - 1:
            self._cursor_y += 1
        else:
            self.add_empty_line()
    
    # Text
    
    def write(self, text: str | None) -> None:
        """
        Write text at the cursor, overwriting existing cells.
        
        ``\\n`` starts a new row. Reaching the right edge wraps to the
        next row, and moving past the bottom row scrolls the screen.
        """
        self._process_text(text, self._put_char)
    
    def insert(self, text: str | None) -> None:
        """
        Insert text at the cursor, shifting the row to the right.
        
        A non-blank character pushed off the right edge is inserted at the
        start of the next row, which may push another one further down;
        whatever is pushed off the bottom row is dropped. Only when the
        cursor is on the bottom row does the screen scroll to make room,
        and the cursor row then moves up with its content.
        """
        self._process_text(text, self._insert_char)
    
    def _process_text(self, text: str | None, put: Callable[[str], None]) -> None:
        if not text:
            return
        for char in text:
            if char == NEWLINE:
                self._new_line()
                continue
            put(char)
            self._cursor_x += 1
            if self._cursor_x >= self._width:
                self._new_line()
    
    def _put_char(self, char: str) -> None:
        self._screen[self._cursor_y].set_cell(self._cursor_x, char, self._style)
    
    def _insert_char(self, char: str) -> None:
        pushed = self._screen[self._cursor_y].insert_at(self._cursor_x, char, self._style)
        if pushed is None or pushed.is_blank():
            return
        
        if self._cursor_y == self._height - 1:
            self.add_empty_line()
            # A one-row screen scrolls the edited row away entirely
            self._cursor_y = max(0, self._cursor_y - 1)
            self._screen[-1].insert_at(0, pushed.char, pushed.style)
            return
        
        for y in range(self._cursor_y + 1, self._height):
            pushed = self._screen[y].insert_at(0, pushed.char, pushed.style)
            if pushed is None or pushed.is_blank():
                return
    
    # Clearing
    
    def clear(self) -> None:
        """Blank the screen with the current style and home the cursor."""
        for line in self._screen:
            line.clear(self._style)
        self.set_cursor(0, 0)
    
    def clear_all(self) -> None:
        """Clear the screen and forget the scrollback."""
        self.clear()
        self._scrollback.clear()
        logger.debug("Scrollback discarded")
    
    def fill_line(self, y: int, char: str) -> None:
        """Fill screen row y with one character; ignored when y is off-screen or char is not one character."""
        if 0 <= y < self._height:
            self._screen[y].fill(char, self._style)
    
    # Resize
    
    def resize(self, new_width: int, new_height: int) -> None:
        """
        Change the screen size.
        
        Shrinking pushes top rows into the scrollback; growing pulls the
        most recent scrollback lines back onto the top of the screen, then
        pads with blank rows at the bottom. Lines are then rebuilt at the
        new width, keeping content anchored at column 0.
        """
        if new_width <= 0 or new_height <= 0:
            raise ValueError(f"Invalid dimensions: width={new_width}, height={new_height}")
        
        logger.debug(
            "Resizing %dx%d -> %dx%d",
            self._width, self._height, new_width, new_height,
        )
        
        while len(self._screen) > new_height:
            self._push_scrollback(self._screen.popleft())
        
        while len(self._screen) < new_height:
            if self._scrollback:
                self._screen.appendleft(self._scrollback.pop())
            else:
                self._screen.append(Line(new_width))
        
        if new_width != self._width:
            self._screen = deque(_fit(line, new_width) for line in self._screen)
            self._scrollback = deque(_fit(line, new_width) for line in self._scrollback)
        
        self._width = new_width
        self._height = new_height
        self.set_cursor(self._cursor_x, self._cursor_y)
    
    # Queries
    
    def get_line_text(self, y: int) -> str:
        """Text of screen row y, or an empty string when y is off-screen."""
        if 0 <= y < self._height:
            return str(self._screen[y])
        return ""
    
    def get_line(self, y: int) -> Line:
        """
        Get a line by absolute index.
        
        Indices ``0..scrollback_size-1`` address the scrollback (oldest
        first); the following ``height`` indices address the screen.
        """
        scrollback_size = len(self._scrollback)
        if y < 0 or y >= scrollback_size + self._height:
            raise IndexError(f"row {y} out of bounds (lines={scrollback_size + self._height})")
        if y < scrollback_size:
            return self._scrollback[y]
        return self._screen[y - scrollback_size]
    
    def get_cell(self, x: int, y: int) -> Cell:
        """Get the cell at screen position (x, y)."""
        if y < 0 or y >= self._height:
            raise IndexError(f"y={y} out of bounds (height={self._height})")
        return self._screen[y].get_cell(x)
    
    def screen_lines(self) -> Iterator[Line]:
        """Iterate over the visible rows, top to bottom."""
        yield from self._screen
    
    def lines(self) -> Iterator[Line]:
        """Iterate over scrollback then screen, oldest first."""
        yield from self._scrollback
        yield from self._screen
    
    def get_screen_as_string(self) -> str:
        """The visible rows joined by newlines."""
        return NEWLINE.join(str(line) for line in self._screen)
    
    def get_full_content(self) -> str:
        """Scrollback and screen rows joined by newlines."""
        return NEWLINE.join(str(line) for line in self.lines())


def _fit(line: Line, width: int) -> Line:
    return line if line.width == width else line.resized(width)
