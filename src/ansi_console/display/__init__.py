"""Output: styled text, grid frames and terminal-aware printing."""

from ansi_console.display.grid import GridRenderer, render, style_sequence
from ansi_console.display.output import (
    StyledOutput,
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
    Attribute,
    Background,
    Foreground,
    Text,
    apply_styles,
    strip_styles,
    styled_length,
)

__all__ = [
    "GridRenderer",
    "render",
    "style_sequence",
    "StyledOutput",
    "printc",
    "eprintc",
    "printlc",
    "eprintlc",
    "clear_screen",
    "set_color",
    "set_colors",
    "Attribute",
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
