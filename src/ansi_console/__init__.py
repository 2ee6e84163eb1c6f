"""
ansi-console: terminal control for Python

Raw-mode keyboard input, styled text and full-screen rendering using
plain ANSI/VT100 escape sequences.

Quick Start:
    >>> import ansi_console as term
    >>> key = term.read_key()
    >>> term.printlc([term.BOLD, term.Foreground(term.RED), term.Text("Hello")])

Features:
    - Reference-counted raw mode that nests safely across callers
    - Escape-sequence decoding for arrows, function and navigation keys
    - Styled text compiled to minimal SGR sequences (16 + 240 colors)
    - Grid rendering that only emits SGR codes when the style changes
    - Plain-text output when writing to pipes and files
"""

import logging

__version__ = "0.1.0"

# Core types
from ansi_console.core.color import (
    DEFAULT,
    BLACK,
    RED,
    GREEN,
    YELLOW,
    BLUE,
    MAGENTA,
    CYAN,
    WHITE,
    LBLACK,
    LRED,
    LGREEN,
    LYELLOW,
    LBLUE,
    LMAGENTA,
    LCYAN,
    LWHITE,
)
from ansi_console.core.grid import Grid, Point
from ansi_console.core.style import Style

# Terminal mode
from ansi_console.terminal.mode import NotATty, TerminalModeManager, get_manager
from ansi_console.terminal.size import TerminalSize, get_terminal_size

# Input
from ansi_console.input.keys import Key, KeyCode, decode_key
from ansi_console.input.reader import KeyReader, read_key

# Output
from ansi_console.display.grid import render
from ansi_console.display.output import (
    clear_screen,
    eprintc,
    eprintlc,
    printc,
    printlc,
    set_color,
    set_colors,
)
from ansi_console.display.styled import (
    BLINK,
    BOLD,
    HIDDEN,
    INVERSE,
    RESET,
    UNDERLINED,
    Background,
    Foreground,
    Text,
    apply_styles,
    strip_styles,
    styled_length,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())


def raw_mode() -> bool:
    """Check if the terminal is in raw mode."""
    return get_manager().raw_mode()


def show_cursor() -> None:
    get_manager().show_cursor()


def hide_cursor() -> None:
    get_manager().hide_cursor()


__all__ = [
    # Version
    "__version__",
    # Colors
    "DEFAULT",
    "BLACK",
    "RED",
    "GREEN",
    "YELLOW",
    "BLUE",
    "MAGENTA",
    "CYAN",
    "WHITE",
    "LBLACK",
    "LRED",
    "LGREEN",
    "LYELLOW",
    "LBLUE",
    "LMAGENTA",
    "LCYAN",
    "LWHITE",
    # Core types
    "Style",
    "Point",
    "Grid",
    # Terminal
    "NotATty",
    "TerminalModeManager",
    "get_manager",
    "raw_mode",
    "show_cursor",
    "hide_cursor",
    "TerminalSize",
    "get_terminal_size",
    # Input
    "Key",
    "KeyCode",
    "decode_key",
    "KeyReader",
    "read_key",
    # Output
    "render",
    "printc",
    "eprintc",
    "printlc",
    "eprintlc",
    "clear_screen",
    "set_color",
    "set_colors",
    "Text",
    "Foreground",
    "Background",
    "RESET",
    "BOLD",
    "UNDERLINED",
    "BLINK",
    "INVERSE",
    "HIDDEN",
    "apply_styles",
    "strip_styles",
    "styled_length",
]
