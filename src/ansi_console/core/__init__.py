"""Core value types: colors, styles and the point grid."""

from ansi_console.core.color import Color, validate_color
from ansi_console.core.grid import BLANK, Grid, Point
from ansi_console.core.style import Style

__all__ = ["Color", "validate_color", "Style", "Point", "Grid", "BLANK"]
