"""Render a grid of styled points to terminal escape sequences."""

from __future__ import annotations

from typing import Iterable, Sequence

from ansi_console.core.color import DEFAULT
from ansi_console.core.constants import (
    CSI,
    CURSOR_HOME,
    RESET,
    SGR_BACKGROUND,
    SGR_BLINK,
    SGR_BOLD,
    SGR_EXTENDED,
    SGR_FOREGROUND,
    SGR_HIDDEN,
    SGR_INVERSE,
    SGR_UNDERLINED,
)
from ansi_console.core.grid import Point
from ansi_console.core.style import Style


def _color_part(base: int, color: int) -> str:
    if color == DEFAULT:
        return ""
    elif color < 8:
        return f";{base + color}"
    return f";{base + SGR_EXTENDED};5;{color}"


def style_sequence(style: Style) -> str:
    """
    Full SGR sequence selecting a style from scratch.

    It always starts with a reset (0), so it does not depend on the
    attributes that were active before it.
    """
    parts = [f"{CSI}0"]
    if style.bold:
        parts.append(f";{SGR_BOLD}")
    if style.underlined:
        parts.append(f";{SGR_UNDERLINED}")
    if style.blink:
        parts.append(f";{SGR_BLINK}")
    if style.inverse:
        parts.append(f";{SGR_INVERSE}")
    if style.hidden:
        parts.append(f";{SGR_HIDDEN}")
    parts.append(_color_part(SGR_FOREGROUND, style.foreground))
    parts.append(_color_part(SGR_BACKGROUND, style.background))
    parts.append("m")
    return "".join(parts)


class GridRenderer:
    """
    Render a grid as one full-screen frame.

    Optimizes output by only emitting SGR codes when the style changes
    from one point to the next.
    """

    def __init__(self, home: bool = True):
        self.home = home

    def render(self, grid: Iterable[Sequence[Point]]) -> str:
        """Render grid rows, top to bottom, to a single string."""
        # Go to the top-left corner and reset attributes
        parts: list[str] = [CURSOR_HOME + RESET if self.home else RESET]
        last_style = Style.BLANK

        for row in grid:
            for point in row:
                if point.style != last_style:
                    parts.append(style_sequence(point.style))
                    last_style = point.style
                parts.append(point.char)

        parts.append(RESET)
        return "".join(parts)


def render(grid: Iterable[Sequence[Point]]) -> str:
    """Render a grid as a frame starting at the top-left corner."""
    return GridRenderer().render(grid)
