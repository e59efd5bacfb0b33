"""Feed text files into a TerminalBuffer."""

import logging
from pathlib import Path

from termgrid.core.buffer import TerminalBuffer
from termgrid.core.constants import DEFAULT_HEIGHT, DEFAULT_SCROLLBACK, DEFAULT_WIDTH

logger = logging.getLogger(__name__)


def normalize_newlines(text: str) -> str:
    """Convert CRLF and lone CR line endings to LF."""
    return text.replace('\r\n', '\n').replace('\r', '\n')


def feed(buffer: TerminalBuffer, text: str, insert: bool = False) -> None:
    """Stream text into the buffer by overwriting or by inserting."""
    text = normalize_newlines(text)
    if insert:
        buffer.insert(text)
    else:
        buffer.write(text)


def load(
    path: str | Path,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    max_scrollback: int = DEFAULT_SCROLLBACK,
    insert: bool = False,
    encoding: str = "utf-8",
) -> TerminalBuffer:
    """
    Build a buffer from a text file.
    
    The file is decoded with ``encoding`` (undecodable bytes are replaced)
    and fed through ``write()``, or ``insert()`` when ``insert`` is set.
    A single trailing newline is dropped so the last line does not scroll
    the screen.
    """
    path = Path(path)
    buffer = TerminalBuffer(width, height, max_scrollback)
    
    text = path.read_text(encoding=encoding, errors="replace")
    text = normalize_newlines(text)
    if text.endswith('\n'):
        text = text[:-1]
    
    logger.debug("Feeding %s (%d chars) into %dx%d buffer", path, len(text), width, height)
    feed(buffer, text, insert=insert)
    return buffer
