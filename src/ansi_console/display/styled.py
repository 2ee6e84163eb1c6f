"""Styled text - instruction lists compiled to SGR escape sequences.

    >>> apply_styles([BOLD, Foreground(RED), Text("hi"), RESET])
    '\\x1b[1;31mhi\\x1b[0m'

Attribute instructions accumulate until the next piece of text, so any run
of text is preceded by at most one escape sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Union

from ansi_console.core.color import Color, background_codes, foreground_codes, validate_color
from ansi_console.core.constants import (
    CSI,
    SGR_BLINK,
    SGR_BOLD,
    SGR_HIDDEN,
    SGR_INVERSE,
    SGR_RESET,
    SGR_UNDERLINED,
)


class Attribute(IntEnum):
    """Attribute-setting instructions, valued by their SGR code."""
    RESET = SGR_RESET
    BOLD = SGR_BOLD
    UNDERLINED = SGR_UNDERLINED
    BLINK = SGR_BLINK
    INVERSE = SGR_INVERSE
    HIDDEN = SGR_HIDDEN


RESET = Attribute.RESET
BOLD = Attribute.BOLD
UNDERLINED = Attribute.UNDERLINED
BLINK = Attribute.BLINK
INVERSE = Attribute.INVERSE
HIDDEN = Attribute.HIDDEN


@dataclass(frozen=True)
class Text:
    """Literal text, written with the attributes set before it."""
    text: str


@dataclass(frozen=True)
class Foreground:
    color: Color

    def __post_init__(self) -> None:
        validate_color(self.color)


@dataclass(frozen=True)
class Background:
    color: Color

    def __post_init__(self) -> None:
        validate_color(self.color)


Instruction = Union[Text, Attribute, Foreground, Background]
StyledText = Iterable[Instruction]


def sgr(codes: Iterable[int]) -> str:
    """Format SGR codes as one escape sequence, or '' if there are none."""
    joined = ';'.join(str(code) for code in codes)
    return f"{CSI}{joined}m" if joined else ""


def instruction_codes(instruction: Instruction) -> tuple[int, ...]:
    """SGR codes for one attribute-setting instruction."""
    if isinstance(instruction, Attribute):
        return (int(instruction),)
    elif isinstance(instruction, Foreground):
        return foreground_codes(instruction.color)
    elif isinstance(instruction, Background):
        return background_codes(instruction.color)
    raise TypeError(f"Not a styling instruction: {instruction!r}")


def apply_styles(styled: StyledText) -> str:
    """Compile styled text to a string with escape sequences."""
    parts: list[str] = []
    pending: list[int] = []

    for instruction in styled:
        if isinstance(instruction, Text):
            if pending:
                parts.append(sgr(pending))
                pending.clear()
            parts.append(instruction.text)
        else:
            pending.extend(instruction_codes(instruction))

    if pending:
        parts.append(sgr(pending))
    return ''.join(parts)


def strip_styles(styled: StyledText) -> str:
    """Concatenate the text of styled text, dropping all styling."""
    return ''.join(i.text for i in styled if isinstance(i, Text))


def styled_length(styled: StyledText) -> int:
    """Number of characters the text of styled text occupies."""
    return sum(len(i.text) for i in styled if isinstance(i, Text))
