"""Typer CLI application for trying out the terminal library."""

import logging
import sys
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from ansi_console.core.color import COLOR_NAMES, CYAN, color_from_name
from ansi_console.core.grid import Grid, Point
from ansi_console.core.style import Style
from ansi_console.display.grid import GridRenderer
from ansi_console.display.output import StyledOutput
from ansi_console.display.styled import (
    BLINK,
    BOLD,
    INVERSE,
    RESET,
    UNDERLINED,
    Background,
    Foreground,
    Text,
)
from ansi_console.input.keys import Key
from ansi_console.input.reader import KeyReader
from ansi_console.terminal.mode import NotATty, get_manager
from ansi_console.terminal.size import get_terminal_size

QUIT_KEYS = (Key.char("q"), Key.control("c"), Key.control("d"))


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-console",
        help="Inspect keyboard input and styled output of the terminal.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console(stderr=True)

    @app.callback()
    def main(
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log terminal mode changes")] = False,
    ) -> None:
        if verbose:
            logging.basicConfig(
                level=logging.DEBUG,
                format="%(message)s",
                handlers=[RichHandler(console=console, show_path=False)],
            )

    @app.command()
    def keys(
        count: Annotated[Optional[int], typer.Option("--count", "-n", help="Stop after this many keys")] = None,
    ) -> None:
        """Print the name of each key pressed. Quit with q or Ctrl-C."""
        manager = get_manager()
        out = StyledOutput(sys.stdout, manager)
        reader = KeyReader(manager)

        if count is None:
            console.print("[dim]Press keys, q or Ctrl-C to quit[/]")
        seen = 0
        try:
            for key in reader:
                out.println([Foreground(CYAN), Text(str(key)), RESET, Text(f"  {key!r}")])
                out.flush()
                seen += 1
                if key in QUIT_KEYS or (count is not None and seen >= count):
                    break
        except NotATty as err:
            console.print(f"[red]{err}[/]")
            raise typer.Exit(1)

    @app.command()
    def styles(
        plain: Annotated[bool, typer.Option("--plain", "-p", help="Strip styles even on a terminal")] = False,
    ) -> None:
        """Show text attributes and the 16 standard colors."""
        manager = get_manager()
        out = StyledOutput(sys.stdout, manager)
        if plain:
            out.is_atty = False

        for name, attribute in (("bold", BOLD), ("underlined", UNDERLINED), ("blink", BLINK), ("inverse", INVERSE)):
            out.println([attribute, Text(name)])
        for name, color in COLOR_NAMES.items():
            out.println([Foreground(color), Text(f"{name:<10}"), RESET, Text(" "), Background(color), Text("    ")])

    @app.command()
    def palette() -> None:
        """Show the 256-color palette as a rendered grid."""
        manager = get_manager()
        out = StyledOutput(sys.stdout, manager)
        if not out.is_atty:
            console.print("[yellow]Output is not a terminal, nothing to show[/]")
            raise typer.Exit(1)

        grid = Grid(columns=16 * 3, rows=16)
        for index in range(256):
            x, y = (index % 16) * 3, index // 16
            grid.put_text(x, y, f"{index:>3}", Style(inverse=True, foreground=index))
        renderer = GridRenderer(home=False)
        for row in grid:
            out.stream.write(renderer.render([row]) + "\n")
        out.flush()

    @app.command()
    def size() -> None:
        """Print the terminal size as rows x columns."""
        current = get_terminal_size()
        print(f"{current.rows}x{current.columns}")

    @app.command()
    def fill(
        char: Annotated[str, typer.Argument(help="Character to fill the screen with")] = "#",
        color: Annotated[str, typer.Option("--color", "-c", help="Color name or 0-255 index")] = "green",
    ) -> None:
        """Fill the whole screen with one character, then wait for a key."""
        manager = get_manager()
        current = get_terminal_size()
        try:
            style = Style(foreground=color_from_name(color))
        except ValueError as err:
            console.print(f"[red]{err}[/]")
            raise typer.Exit(1)

        grid = Grid(columns=current.columns, rows=current.rows)
        grid.fill(Point(char[:1] or " ", style))
        manager.hide_cursor()
        try:
            manager.stdout.write(GridRenderer().render(grid))
            manager.stdout.flush()
            KeyReader(manager).read_key()
        except NotATty as err:
            console.print(f"[red]{err}[/]")
            raise typer.Exit(1)
        finally:
            manager.show_cursor()

    return app
