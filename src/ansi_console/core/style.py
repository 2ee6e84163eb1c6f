"""Style - text attributes and colors for one run of output."""

from dataclasses import dataclass, replace
from typing import ClassVar

from ansi_console.core.color import DEFAULT, Color, validate_color


@dataclass(frozen=True, slots=True)
class Style:
    """
    Boolean text attributes plus a foreground and background color.

    Colors default to the terminal default (-1). Instances are immutable
    and compare by value, so a renderer can detect style changes with ``!=``.
    """
    bold: bool = False
    underlined: bool = False
    blink: bool = False
    inverse: bool = False
    hidden: bool = False
    foreground: Color = DEFAULT
    background: Color = DEFAULT

    BLANK: ClassVar["Style"]

    def __post_init__(self) -> None:
        validate_color(self.foreground)
        validate_color(self.background)

    def with_changes(self, **changes: object) -> "Style":
        """Return a copy of this style with some fields replaced."""
        return replace(self, **changes)

    def is_blank(self) -> bool:
        """Check if this style has no attributes and default colors."""
        return self == Style.BLANK


Style.BLANK = Style()
