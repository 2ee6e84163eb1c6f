"""Terminal mode management - reference-counted raw mode and cursor state.

Raw mode is shared by every caller in the process: the first request saves
the terminal attributes and switches the line discipline, nested requests
only bump a counter, and the last release restores the saved attributes.

    >>> manager = TerminalModeManager()
    >>> with manager.enter_raw_mode():
    ...     data = os.read(0, 1)
"""

from __future__ import annotations

import atexit
import logging
import sys
import termios
import tty
from dataclasses import dataclass
from typing import Any, Optional, TextIO

from ansi_console.core.constants import HIDE_CURSOR, SHOW_CURSOR

logger = logging.getLogger(__name__)


class NotATty(OSError):
    """Raw mode was requested on an input that is not a terminal."""


@dataclass(frozen=True)
class TerminalState:
    """Normal mode when ``saved_attributes`` is None, raw mode otherwise."""
    saved_attributes: Optional[list[Any]] = None

    @property
    def raw(self) -> bool:
        return self.saved_attributes is not None


NORMAL = TerminalState()


def make_raw(attributes: list[Any]) -> list[Any]:
    """Return a raw-mode copy of a ``termios.tcgetattr`` attribute list."""
    mode = list(attributes)
    mode[tty.IFLAG] &= ~(
        termios.BRKINT
        | termios.ICRNL
        | termios.INPCK
        | termios.ISTRIP
        | termios.IXON
    )
    mode[tty.OFLAG] &= ~termios.OPOST
    mode[tty.CFLAG] &= ~(termios.CSIZE | termios.PARENB)
    mode[tty.CFLAG] |= termios.CS8
    mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG)
    cc = list(mode[tty.CC])
    cc[termios.VMIN] = 1
    cc[termios.VTIME] = 0
    mode[tty.CC] = cc
    return mode


class RawModeGuard:
    """
    Holds one raw-mode acquisition until released.

    Use as a context manager; ``release`` runs exactly once however the
    block is left.
    """

    def __init__(self, manager: TerminalModeManager) -> None:
        self._manager = manager
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def release(self) -> None:
        """Give the acquisition back to the manager. Later calls do nothing."""
        if self._released:
            return
        self._released = True
        self._manager.leave_raw_mode()

    def __enter__(self) -> RawModeGuard:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()


class TerminalModeManager:
    """
    Owns the raw/normal state of one controlling terminal.

    The terminal attributes and the cursor-visibility flag are only changed
    through this object.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> None:
        self.stdin = stdin or sys.__stdin__
        self.stdout = stdout or sys.__stdout__
        self.stderr = stderr or sys.__stderr__
        self._state = NORMAL
        self._raw_count = 0
        self._cursor_visible = True

    @property
    def state(self) -> TerminalState:
        return self._state

    @property
    def raw_count(self) -> int:
        """Number of raw-mode guards currently held."""
        return self._raw_count

    @property
    def cursor_visible(self) -> bool:
        return self._cursor_visible

    def raw_mode(self) -> bool:
        """Check if the terminal is currently in raw mode."""
        return self._state.raw

    def fileno(self) -> Optional[int]:
        """Descriptor of the input stream, or None if it has none."""
        try:
            return self.stdin.fileno()
        except (AttributeError, ValueError, OSError):
            return None

    def enter_raw_mode(self) -> RawModeGuard:
        """
        Acquire raw mode and return a guard that releases it.

        Nested calls only increment the reference count. Raises NotATty if
        the input has no terminal attributes.
        """
        if self._state.raw:
            self._raw_count += 1
            return RawModeGuard(self)

        fd = self.fileno()
        attributes = None if fd is None else self._get_attributes(fd)
        if attributes is None:
            raise NotATty(f"Input is not a tty: {self.stdin!r}")

        # Pending output must reach the terminal before the line discipline
        # changes underneath it.
        self._flush_output()
        self._state = TerminalState(saved_attributes=attributes)
        self._raw_count = 1
        self._set_attributes(fd, make_raw(attributes))
        logger.debug("entered raw mode on fd %d", fd)
        return RawModeGuard(self)

    def leave_raw_mode(self) -> None:
        """Release one raw-mode acquisition; the last one restores the terminal."""
        if self._raw_count <= 0 or not self._state.raw:
            raise AssertionError("leave_raw_mode() called without matching enter_raw_mode()")
        self._raw_count -= 1
        if self._raw_count:
            return
        saved = self._state.saved_attributes
        self._state = NORMAL
        try:
            self._flush_output()
        finally:
            fd = self.fileno()
            if fd is not None:
                self._set_attributes(fd, saved)
        logger.debug("left raw mode")

    def show_cursor(self) -> None:
        self._cursor_visible = True
        self._write(SHOW_CURSOR)

    def hide_cursor(self) -> None:
        self._cursor_visible = False
        self._write(HIDE_CURSOR)

    def cleanup(self) -> None:
        """
        Restore the terminal at process shutdown.

        Shows the cursor if it was hidden and puts back the saved attributes
        if raw mode is still active, regardless of the reference count.
        """
        if not self._cursor_visible:
            self.show_cursor()
        if self._state.raw:
            fd = self.fileno()
            if fd is not None:
                self._set_attributes(fd, self._state.saved_attributes)
            logger.debug("restored terminal attributes at shutdown")

    # Low level

    def _flush_output(self) -> None:
        for stream in (self.stdout, self.stderr):
            if stream is not None:
                stream.flush()

    def _write(self, text: str) -> None:
        self.stdout.write(text)
        self.stdout.flush()

    @staticmethod
    def _get_attributes(fd: int) -> Optional[list[Any]]:
        try:
            return termios.tcgetattr(fd)
        except (termios.error, OSError):
            return None

    @staticmethod
    def _set_attributes(fd: int, attributes: list[Any]) -> None:
        try:
            termios.tcsetattr(fd, termios.TCSAFLUSH, attributes)
        except (termios.error, OSError) as err:
            logger.debug("ignoring tcsetattr failure on fd %d: %s", fd, err)


_default_manager: Optional[TerminalModeManager] = None


def get_manager() -> TerminalModeManager:
    """
    Return the process-wide manager for the standard streams.

    It is created on first use, and its ``cleanup`` is registered to run
    at interpreter exit.
    """
    global _default_manager
    if _default_manager is None:
        _default_manager = TerminalModeManager()
        atexit.register(_default_manager.cleanup)
    return _default_manager
