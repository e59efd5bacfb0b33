"""Typer CLI application."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from termgrid.core.buffer import TerminalBuffer
from termgrid.core.constants import DEFAULT_HEIGHT, DEFAULT_SCROLLBACK, DEFAULT_WIDTH

WidthOption = Annotated[
    int, typer.Option("--width", "-w", envvar="TERMGRID_WIDTH", help="Screen width in columns")
]
HeightOption = Annotated[
    int, typer.Option("--height", "-H", envvar="TERMGRID_HEIGHT", help="Screen height in rows")
]
ScrollbackOption = Annotated[
    int, typer.Option("--scrollback", "-s", envvar="TERMGRID_SCROLLBACK", help="Maximum scrollback lines")
]
InsertOption = Annotated[
    bool, typer.Option("--insert", help="Insert text instead of overwriting")
]


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="termgrid",
        help="Feed text through a terminal screen buffer and inspect the result.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()
    err_console = Console(stderr=True)
    
    def _load(path: Path, width: int, height: int, scrollback: int, insert: bool) -> TerminalBuffer:
        from termgrid.io.reader import load
        
        try:
            return load(path, width, height, scrollback, insert=insert)
        except (ValueError, OSError) as e:
            err_console.print(f"[red]Cannot load {path}: {e}[/]")
            raise typer.Exit(1)
    
    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Feed text through a terminal screen buffer and inspect the result."""
        logging.basicConfig(
            level=logging.DEBUG if verbose else logging.WARNING,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
            force=True,
        )
    
    @app.command()
    def show(
        path: Annotated[Path, typer.Argument(help="Text file to feed")],
        width: WidthOption = DEFAULT_WIDTH,
        height: HeightOption = DEFAULT_HEIGHT,
        scrollback: ScrollbackOption = DEFAULT_SCROLLBACK,
        insert: InsertOption = False,
        screen_only: Annotated[bool, typer.Option("--screen-only", help="Print only the visible screen")] = False,
    ) -> None:
        """Print the buffer contents after feeding a file."""
        buffer = _load(path, width, height, scrollback, insert)
        if screen_only:
            print(buffer.get_screen_as_string())
        else:
            print(buffer.get_full_content())
    
    @app.command()
    def info(
        path: Annotated[Path, typer.Argument(help="Text file to feed")],
        width: WidthOption = DEFAULT_WIDTH,
        height: HeightOption = DEFAULT_HEIGHT,
        scrollback: ScrollbackOption = DEFAULT_SCROLLBACK,
        insert: InsertOption = False,
        json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
    ) -> None:
        """Show buffer geometry, cursor and scrollback usage."""
        buffer = _load(path, width, height, scrollback, insert)
        data = {
            "width": buffer.width,
            "height": buffer.height,
            "cursor_x": buffer.cursor_x,
            "cursor_y": buffer.cursor_y,
            "scrollback": buffer.scrollback_size,
            "max_scrollback": buffer.max_scrollback,
        }
        
        if json_output:
            print(json.dumps(data, indent=2))
            return
        
        table = Table(title=f"Buffer for {path.name}", show_header=False)
        table.add_column(style="bold")
        table.add_column()
        table.add_row("Size", f"{buffer.width}x{buffer.height}")
        table.add_row("Cursor", f"({buffer.cursor_x}, {buffer.cursor_y})")
        table.add_row("Scrollback", f"{buffer.scrollback_size}/{buffer.max_scrollback}")
        console.print(table)
    
    return app
