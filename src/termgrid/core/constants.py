"""Defaults shared by the buffer and the CLI."""

# Buffer geometry
DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24
DEFAULT_SCROLLBACK = 1000

# -1 means "use the terminal's own default color"
DEFAULT_COLOR = -1

BLANK = ' '
NEWLINE = '\n'
