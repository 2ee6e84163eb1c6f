"""Shared escape sequences for terminal control."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
SS3 = f"{ESC}O"
OSC = f"{ESC}]"
ST = f"{ESC}\\"

RESET = f"{CSI}0m"
CURSOR_HOME = f"{CSI}H"
CLEAR_SCREEN = f"{CSI}2J{CURSOR_HOME}"
SHOW_CURSOR = f"{CSI}?25h"
HIDE_CURSOR = f"{CSI}?25l"

# SGR attribute codes
SGR_RESET = 0
SGR_BOLD = 1
SGR_UNDERLINED = 4
SGR_BLINK = 5
SGR_INVERSE = 7
SGR_HIDDEN = 8

# Base codes; 30 + n / 40 + n for the 8 standard colors,
# 38 / 48 introduce the 256-color form and 39 / 49 select the default.
SGR_FOREGROUND = 30
SGR_BACKGROUND = 40
SGR_EXTENDED = 8
SGR_DEFAULT = 9
SGR_PALETTE = 5
