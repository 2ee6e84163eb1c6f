"""Color values for terminal output.

A color is a plain integer:

    -1        terminal default
    0 - 7     standard colors
    8 - 15    bright colors
    16 - 255  extended palette index
"""

from ansi_console.core.constants import (
    SGR_BACKGROUND,
    SGR_DEFAULT,
    SGR_EXTENDED,
    SGR_FOREGROUND,
    SGR_PALETTE,
)

Color = int

DEFAULT: Color = -1
BLACK: Color = 0
RED: Color = 1
GREEN: Color = 2
YELLOW: Color = 3
BLUE: Color = 4
MAGENTA: Color = 5
CYAN: Color = 6
WHITE: Color = 7
LBLACK: Color = BLACK + 8
LRED: Color = RED + 8
LGREEN: Color = GREEN + 8
LYELLOW: Color = YELLOW + 8
LBLUE: Color = BLUE + 8
LMAGENTA: Color = MAGENTA + 8
LCYAN: Color = CYAN + 8
LWHITE: Color = WHITE + 8

COLOR_NAMES: dict[str, Color] = {
    "default": DEFAULT,
    "black": BLACK,
    "red": RED,
    "green": GREEN,
    "yellow": YELLOW,
    "blue": BLUE,
    "magenta": MAGENTA,
    "cyan": CYAN,
    "white": WHITE,
    "lblack": LBLACK,
    "lred": LRED,
    "lgreen": LGREEN,
    "lyellow": LYELLOW,
    "lblue": LBLUE,
    "lmagenta": LMAGENTA,
    "lcyan": LCYAN,
    "lwhite": LWHITE,
}


def validate_color(color: Color) -> Color:
    """Return color unchanged, or raise ValueError if it is out of range."""
    if isinstance(color, bool) or not isinstance(color, int):
        raise TypeError(f"Color must be an int, got {type(color).__name__}")
    if not DEFAULT <= color <= 255:
        raise ValueError(f"Color must be -1 (default) or 0-255, got {color}")
    return color


def _codes(base: int, color: Color) -> tuple[int, ...]:
    if color == DEFAULT:
        return (base + SGR_DEFAULT,)
    elif color < 8:
        return (base + color,)
    else:
        return (base + SGR_EXTENDED, SGR_PALETTE, color)


def foreground_codes(color: Color) -> tuple[int, ...]:
    """SGR codes selecting color as foreground (39, 30-37 or 38;5;n)."""
    return _codes(SGR_FOREGROUND, validate_color(color))


def background_codes(color: Color) -> tuple[int, ...]:
    """SGR codes selecting color as background (49, 40-47 or 48;5;n)."""
    return _codes(SGR_BACKGROUND, validate_color(color))


def color_from_name(name: str) -> Color:
    """Look up a color by name (``red``, ``lcyan``) or numeric string."""
    key = name.strip().lower()
    if key in COLOR_NAMES:
        return COLOR_NAMES[key]
    try:
        return validate_color(int(key))
    except ValueError:
        raise ValueError(f"Unknown color: {name!r}") from None
