"""Key values and the mapping from resolved input tokens to keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Optional, Union


class KeyCode(Enum):
    """Kinds of logical keypress."""
    CHAR = auto()
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ESCAPE = auto()
    FUNCTION = auto()
    ENTER = auto()
    TAB = auto()
    BACKSPACE = auto()
    DELETE = auto()
    INSERT = auto()
    HOME = auto()
    END = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    CONTROL = auto()


ARROWS = frozenset({KeyCode.UP, KeyCode.DOWN, KeyCode.LEFT, KeyCode.RIGHT})

_NAMES = {
    KeyCode.UP: "up",
    KeyCode.DOWN: "down",
    KeyCode.LEFT: "left",
    KeyCode.RIGHT: "right",
    KeyCode.ESCAPE: "escape",
    KeyCode.ENTER: "enter",
    KeyCode.TAB: "tab",
    KeyCode.BACKSPACE: "backspace",
    KeyCode.DELETE: "delete",
    KeyCode.INSERT: "insert",
    KeyCode.HOME: "home",
    KeyCode.END: "end",
    KeyCode.PAGE_UP: "pageup",
    KeyCode.PAGE_DOWN: "pagedown",
}


@dataclass(frozen=True)
class Key:
    """
    One logical keypress.

    ``value`` carries the payload of the parameterised kinds: the text of a
    CHAR key (a character or an unrecognised escape sequence), the number of
    a FUNCTION key, or the base letter of a CONTROL key.
    """
    code: KeyCode
    value: Union[str, int, None] = None

    UP: ClassVar["Key"]
    DOWN: ClassVar["Key"]
    LEFT: ClassVar["Key"]
    RIGHT: ClassVar["Key"]
    ESCAPE: ClassVar["Key"]
    ENTER: ClassVar["Key"]
    TAB: ClassVar["Key"]
    BACKSPACE: ClassVar["Key"]
    DELETE: ClassVar["Key"]
    INSERT: ClassVar["Key"]
    HOME: ClassVar["Key"]
    END: ClassVar["Key"]
    PAGE_UP: ClassVar["Key"]
    PAGE_DOWN: ClassVar["Key"]

    @classmethod
    def char(cls, text: str) -> Key:
        return cls(KeyCode.CHAR, text)

    @classmethod
    def function(cls, number: int) -> Key:
        if not 1 <= number <= 12:
            raise ValueError(f"Function key number must be 1-12, got {number}")
        return cls(KeyCode.FUNCTION, number)

    @classmethod
    def control(cls, letter: str) -> Key:
        return cls(KeyCode.CONTROL, letter)

    @property
    def is_char(self) -> bool:
        return self.code is KeyCode.CHAR

    @property
    def is_arrow(self) -> bool:
        return self.code in ARROWS

    def __str__(self) -> str:
        if self.code is KeyCode.CHAR:
            return str(self.value)
        elif self.code is KeyCode.FUNCTION:
            return f"f{self.value}"
        elif self.code is KeyCode.CONTROL:
            return f"ctrl+{self.value}"
        return _NAMES[self.code]


Key.UP = Key(KeyCode.UP)
Key.DOWN = Key(KeyCode.DOWN)
Key.LEFT = Key(KeyCode.LEFT)
Key.RIGHT = Key(KeyCode.RIGHT)
Key.ESCAPE = Key(KeyCode.ESCAPE)
Key.ENTER = Key(KeyCode.ENTER)
Key.TAB = Key(KeyCode.TAB)
Key.BACKSPACE = Key(KeyCode.BACKSPACE)
Key.DELETE = Key(KeyCode.DELETE)
Key.INSERT = Key(KeyCode.INSERT)
Key.HOME = Key(KeyCode.HOME)
Key.END = Key(KeyCode.END)
Key.PAGE_UP = Key(KeyCode.PAGE_UP)
Key.PAGE_DOWN = Key(KeyCode.PAGE_DOWN)


# Escape sequences recognised as structured keys. Several encodings of
# the same key are intentional aliases (CSI, SS3 and bare-ESC forms).
SEQUENCES: dict[str, Key] = {
    # Arrow keys (CSI)
    '\x1b[A': Key.UP,
    '\x1b[B': Key.DOWN,
    '\x1b[C': Key.RIGHT,
    '\x1b[D': Key.LEFT,
    # Arrow keys (VT52)
    '\x1bA': Key.UP,
    '\x1bB': Key.DOWN,
    '\x1bC': Key.RIGHT,
    '\x1bD': Key.LEFT,
    # Arrow keys (SS3 - application mode)
    '\x1bOA': Key.UP,
    '\x1bOB': Key.DOWN,
    '\x1bOC': Key.RIGHT,
    '\x1bOD': Key.LEFT,
    # Navigation
    '\x1b[2~': Key.INSERT,
    '\x1b[3~': Key.DELETE,
    '\x1b[5~': Key.PAGE_UP,
    '\x1b[6~': Key.PAGE_DOWN,
    '\x1b[7~': Key.HOME,  # rxvt
    '\x1b[8~': Key.END,  # rxvt
    # Function keys
    '\x1b[11~': Key.function(1),
    '\x1b[12~': Key.function(2),
    '\x1b[13~': Key.function(3),
    '\x1b[14~': Key.function(4),
    '\x1b[15~': Key.function(5),
    '\x1b[17~': Key.function(6),
    '\x1b[18~': Key.function(7),
    '\x1b[19~': Key.function(8),
    '\x1b[20~': Key.function(9),
    '\x1b[21~': Key.function(10),
    '\x1b[23~': Key.function(11),
    '\x1b[24~': Key.function(12),
    '\x1bOP': Key.function(1),
    '\x1bOQ': Key.function(2),
    '\x1bOR': Key.function(3),
    '\x1bOS': Key.function(4),
    # Home / end
    '\x1b[H': Key.HOME,
    '\x1b[F': Key.END,
    '\x1bOH': Key.HOME,
    '\x1bOF': Key.END,
    '\x1bH': Key.HOME,
    '\x1bF': Key.END,
}

# Control characters and the letter typed with Ctrl to produce them.
CONTROL_LETTERS: dict[str, str] = {
    chr(code): letter
    for code, letter in zip(range(0x20), "@abcdefghijklmnopqrstuvwxyz[\\]^_")
}
CONTROL_LETTERS['\x7f'] = '?'

SIMPLE_KEYS: dict[str, Key] = {
    '\t': Key.TAB,
    '\r': Key.ENTER,
    '\x1b': Key.ESCAPE,
    '\x7f': Key.BACKSPACE,
}


def decode_key(token: str) -> Key:
    """
    Map one resolved input token to a Key.

    A token is a single character or a complete escape sequence as
    returned by ``KeyReader.read_token``. Unknown sequences come back as
    CHAR keys holding the literal sequence.
    """
    if not token:
        raise ValueError("Cannot decode an empty key token")
    if len(token) == 1:
        key: Optional[Key] = SIMPLE_KEYS.get(token)
        if key is not None:
            return key
        letter = CONTROL_LETTERS.get(token)
        if letter is not None:
            return Key.control(letter)
        return Key.char(token)
    return SEQUENCES.get(token) or Key.char(token)
