"""Character sources - the token streams a KeyReader consumes.

A source hands out one token per call: a string holding a single decoded
character, or a SourceStatus telling the reader that nothing has arrived
yet (PENDING) or that nothing ever will (END_OF_STREAM). A source signals
failure by raising OSError.
"""

from __future__ import annotations

import os
import select
from codecs import getincrementaldecoder
from collections import deque
from enum import Enum
from typing import Iterable, Protocol, Union


class SourceStatus(Enum):
    PENDING = "pending"
    END_OF_STREAM = "end_of_stream"


PENDING = SourceStatus.PENDING
END_OF_STREAM = SourceStatus.END_OF_STREAM

Token = Union[str, SourceStatus]


class CharSource(Protocol):
    """Non-blocking token stream with an explicit wait."""

    def next(self) -> Token:
        """Return the next token without blocking."""
        ...

    def wait(self) -> None:
        """Block until ``next`` would return something other than PENDING."""
        ...


class FdCharSource:
    """
    Read characters from a file descriptor.

    Uses os.read() to bypass Python's I/O buffering, so bytes of an escape
    sequence are seen as soon as the terminal delivers them.
    """

    def __init__(self, fd: int, chunk_size: int = 1024) -> None:
        self._fd = fd
        self._chunk_size = chunk_size
        self._decode = getincrementaldecoder("utf-8")(errors="replace").decode
        self._chars: deque[str] = deque()
        self._eof = False

    def next(self) -> Token:
        if not self._chars and not self._eof and self._ready(0):
            self._fill()
        if self._chars:
            return self._chars.popleft()
        return END_OF_STREAM if self._eof else PENDING

    def wait(self) -> None:
        # A read may deliver only part of a UTF-8 character, so keep going
        # until something decodes.
        while not self._chars and not self._eof:
            self._ready(None)
            self._fill()

    def _ready(self, timeout: float | None) -> bool:
        ready, _, _ = select.select([self._fd], [], [], timeout)
        return bool(ready)

    def _fill(self) -> None:
        data = os.read(self._fd, self._chunk_size)
        if not data:
            self._eof = True
            self._chars.extend(self._decode(b"", final=True))
        else:
            self._chars.extend(self._decode(data))


class TokenSource:
    """
    In-memory source replaying a fixed list of tokens.

    A PENDING entry models a gap in delivery: it is returned once by
    ``next`` and skipped by ``wait``. Strings longer than one character
    are split into single-character tokens.
    """

    def __init__(self, tokens: Iterable[Token]) -> None:
        self._tokens: deque[Token] = deque()
        self.feed(tokens)

    def next(self) -> Token:
        if not self._tokens:
            return END_OF_STREAM
        token = self._tokens.popleft()
        if token is END_OF_STREAM:
            self._tokens.appendleft(token)
        return token

    def wait(self) -> None:
        while self._tokens and self._tokens[0] is PENDING:
            self._tokens.popleft()

    def feed(self, tokens: Iterable[Token]) -> None:
        """Append more tokens, e.g. to simulate a later burst of input."""
        for token in tokens:
            if isinstance(token, str):
                self._tokens.extend(token)
            else:
                self._tokens.append(token)
