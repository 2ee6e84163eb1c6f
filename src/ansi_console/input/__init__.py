"""Keyboard input: character sources, escape-sequence resolution and keys."""

from ansi_console.input.keys import CONTROL_LETTERS, SEQUENCES, Key, KeyCode, decode_key
from ansi_console.input.reader import KeyReader, read_key
from ansi_console.input.source import (
    END_OF_STREAM,
    PENDING,
    CharSource,
    FdCharSource,
    SourceStatus,
    TokenSource,
)

__all__ = [
    "Key",
    "KeyCode",
    "SEQUENCES",
    "CONTROL_LETTERS",
    "decode_key",
    "KeyReader",
    "read_key",
    "CharSource",
    "FdCharSource",
    "TokenSource",
    "SourceStatus",
    "PENDING",
    "END_OF_STREAM",
]
