"""Key reader - turns a character source into resolved key tokens.

An ESC character is ambiguous: it is either the Escape key or the start of
an escape sequence. Terminals send a whole sequence in one burst, so once
ESC has been read, any further character that has not arrived yet means
the user pressed Escape on its own. The reader never waits on a sequence
body.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable, Iterator, Optional

from ansi_console.core.constants import ESC
from ansi_console.input.keys import Key, decode_key
from ansi_console.input.source import END_OF_STREAM, PENDING, CharSource, FdCharSource, Token
from ansi_console.terminal.mode import NotATty, TerminalModeManager, get_manager

logger = logging.getLogger(__name__)

# Some terminals send several escape characters before a sequence.
MAX_EXTRA_ESCAPES = 3

_PARAMETER_CHARS = frozenset("0123456789;")


class _ExitSequence(Exception):
    """The characters after ESC do not form a complete sequence."""


class KeyReader:
    """
    Read keys from a character source, one keypress at a time.

    Characters looked at while trying to complete an escape sequence are
    kept in a pushback buffer when the attempt fails, so they are read
    again as ordinary input.
    """

    def __init__(
        self,
        manager: Optional[TerminalModeManager] = None,
        source: Optional[CharSource] = None,
    ) -> None:
        self.manager = manager or get_manager()
        self._source = source
        self._pushback: deque[str] = deque()

    @property
    def source(self) -> CharSource:
        """The character source, opened on the manager's input by default."""
        if self._source is None:
            fd = self.manager.fileno()
            if fd is None:
                raise NotATty(f"Input has no file descriptor: {self.manager.stdin!r}")
            self._source = FdCharSource(fd)
        return self._source

    def unread(self, tokens: Iterable[str]) -> None:
        """Push tokens back so they are returned before any new input."""
        self._pushback.extendleft(reversed(list(tokens)))

    def _next(self) -> Token:
        if self._pushback:
            return self._pushback.popleft()
        return self.source.next()

    def read_token(self) -> str:
        """
        Read the next character or complete escape sequence.

        Waits for the first character. Raises EOFError if the source is
        exhausted before anything is read.
        """
        while True:
            token = self._next()
            if token is PENDING:
                self.source.wait()
            elif token is END_OF_STREAM:
                raise EOFError("Input stream is closed")
            else:
                break
        if token == ESC:
            return self._parse_escape()
        return token

    def _parse_escape(self) -> str:
        consumed: list[str] = []

        def get() -> str:
            try:
                token = self._next()
            except OSError as err:
                logger.debug("input failed inside escape sequence: %s", err)
                raise _ExitSequence() from err
            if not isinstance(token, str):
                raise _ExitSequence()
            consumed.append(token)
            if not token.isascii():
                raise _ExitSequence()
            return token

        try:
            ch = get()
            count = 0
            while ch == ESC and count < MAX_EXTRA_ESCAPES:
                ch = get()
                count += 1
            if ch in ('[', 'O'):
                ch = get()
                while ch in _PARAMETER_CHARS:
                    ch = get()
        except _ExitSequence:
            logger.debug("bare escape, returning %d char(s) to input", len(consumed))
            self.unread(consumed)
            return ESC

        return ESC + ''.join(consumed)

    def read_key(self) -> Key:
        """
        Read one keypress with the terminal in raw mode.

        Raw mode is held only for the duration of the read. Raises NotATty
        if the input is not a terminal.
        """
        with self.manager.enter_raw_mode():
            return decode_key(self.read_token())

    def __iter__(self) -> Iterator[Key]:
        """Yield keys until the input is closed."""
        while True:
            try:
                key = self.read_key()
            except EOFError:
                return
            yield key


_default_reader: Optional[KeyReader] = None


def read_key() -> Key:
    """Read one keypress from standard input."""
    global _default_reader
    if _default_reader is None:
        _default_reader = KeyReader()
    return _default_reader.read_key()
