"""Terminal state: raw mode, cursor visibility and size."""

from ansi_console.terminal.mode import (
    NotATty,
    RawModeGuard,
    TerminalModeManager,
    TerminalState,
    get_manager,
    make_raw,
)
from ansi_console.terminal.size import TerminalSize, columns, get_terminal_size, lines

__all__ = [
    "NotATty",
    "RawModeGuard",
    "TerminalModeManager",
    "TerminalState",
    "get_manager",
    "make_raw",
    "TerminalSize",
    "get_terminal_size",
    "columns",
    "lines",
]
