"""Terminal size query."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    columns: int


FALLBACK = TerminalSize(24, 80)


def get_terminal_size(fd: Optional[int] = None) -> TerminalSize:
    """Get current terminal dimensions, or 24x80 if they cannot be queried."""
    try:
        size = os.get_terminal_size() if fd is None else os.get_terminal_size(fd)
    except (OSError, ValueError):
        return FALLBACK
    return TerminalSize(size.lines, size.columns)


def columns() -> int:
    return get_terminal_size().columns


def lines() -> int:
    return get_terminal_size().rows
