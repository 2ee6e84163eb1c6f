"""Print styled text, keeping escape sequences away from pipes and files."""

from __future__ import annotations

import sys
from functools import cached_property
from typing import Mapping, Optional, TextIO

from ansi_console.core.constants import CLEAR_SCREEN, OSC, RESET, ST
from ansi_console.display.styled import StyledText, apply_styles, strip_styles
from ansi_console.terminal.mode import TerminalModeManager, get_manager

RGB = tuple[int, int, int]


class StyledOutput:
    """
    A text stream that renders styled text when it is a terminal.

    Whether the stream is interactive is checked once, on first use.
    """

    def __init__(self, stream: TextIO, manager: Optional[TerminalModeManager] = None) -> None:
        self.stream = stream
        self._manager = manager

    @property
    def manager(self) -> TerminalModeManager:
        if self._manager is None:
            self._manager = get_manager()
        return self._manager

    @cached_property
    def is_atty(self) -> bool:
        try:
            return self.stream.isatty()
        except (AttributeError, ValueError):
            return False

    def render(self, styled: StyledText) -> str:
        """The string that ``print`` would write for this styled text."""
        return apply_styles(styled) if self.is_atty else strip_styles(styled)

    def print(self, styled: StyledText) -> None:
        self.stream.write(self.render(styled))

    def println(self, styled: StyledText) -> None:
        """Print styled text followed by a line ending, in one write."""
        if self.is_atty:
            # Output post-processing is off in raw mode, so \n alone would
            # not return the cursor to the first column.
            newline = "\r\n" if self.manager.raw_mode() else "\n"
            self.stream.write(apply_styles(styled) + RESET + newline)
        else:
            self.stream.write(strip_styles(styled) + "\n")

    def flush(self) -> None:
        self.stream.flush()


def color_sequence(index: int, rgb: RGB) -> str:
    """OSC 4 sequence redefining one palette entry."""
    if not 0 <= index <= 255:
        raise ValueError(f"Palette index must be 0-255, got {index}")
    if not all(0 <= c <= 255 for c in rgb):
        raise ValueError(f"RGB values must be 0-255, got {rgb}")
    r, g, b = rgb
    return f"{OSC}4;{index};rgb:{r:02x}/{g:02x}/{b:02x};{ST}"


_stdout: Optional[StyledOutput] = None
_stderr: Optional[StyledOutput] = None


def stdout() -> StyledOutput:
    global _stdout
    if _stdout is None:
        _stdout = StyledOutput(sys.stdout)
    return _stdout


def stderr() -> StyledOutput:
    global _stderr
    if _stderr is None:
        _stderr = StyledOutput(sys.stderr)
    return _stderr


def printc(styled: StyledText) -> None:
    """Print styled text to standard output."""
    stdout().print(styled)


def eprintc(styled: StyledText) -> None:
    """Print styled text to standard error."""
    stderr().print(styled)


def printlc(styled: StyledText) -> None:
    """Print a line of styled text to standard output."""
    stdout().println(styled)


def eprintlc(styled: StyledText) -> None:
    """Print a line of styled text to standard error."""
    stderr().println(styled)


def clear_screen() -> None:
    """Clear screen and move cursor to home."""
    out = stdout().stream
    out.write(CLEAR_SCREEN)
    out.flush()


def set_color(index: int, rgb: RGB) -> None:
    """Redefine one entry of the terminal's color palette."""
    out = stdout().stream
    out.write(color_sequence(index, rgb))
    out.flush()


def set_colors(colors: Mapping[int, RGB]) -> None:
    """Redefine several palette entries with a single write."""
    out = stdout().stream
    out.write("".join(color_sequence(index, rgb) for index, rgb in colors.items()))
    out.flush()
