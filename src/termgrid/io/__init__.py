"""Text file input for terminal buffers."""

from termgrid.io.reader import feed, load

__all__ = ["feed", "load"]
