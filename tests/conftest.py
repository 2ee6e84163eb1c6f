"""Pytest configuration: fake terminal streams and termios backend."""

import termios
import tty
from typing import Any

import pytest

from ansi_console.terminal import mode
from ansi_console.terminal.mode import TerminalModeManager


class FakeStream:
    """A text stream recording writes and flushes into a shared event log."""

    def __init__(self, name: str, events: list[str], tty: bool = True, fd: int | None = 0) -> None:
        self.name = name
        self.events = events
        self.tty = tty
        self.fd = fd
        self.written: list[str] = []
        self.isatty_calls = 0
        self.flush_error: Exception | None = None

    def write(self, text: str) -> int:
        self.written.append(text)
        self.events.append(f"write:{self.name}")
        return len(text)

    def flush(self) -> None:
        self.events.append(f"flush:{self.name}")
        if self.flush_error is not None:
            raise self.flush_error

    def isatty(self) -> bool:
        self.isatty_calls += 1
        return self.tty

    def fileno(self) -> int:
        if self.fd is None:
            raise OSError("no file descriptor")
        return self.fd

    @property
    def text(self) -> str:
        return "".join(self.written)


def cooked_attributes() -> list[Any]:
    """Attribute list as a canonical-mode terminal would report it."""
    cc: list[Any] = [b"\x00"] * termios.NCCS
    cc[termios.VMIN] = b"\x04"
    cc[termios.VTIME] = b"\x00"
    return [
        termios.BRKINT | termios.ICRNL | termios.IXON | termios.ISTRIP | termios.INPCK,
        termios.OPOST,
        termios.CS7 | termios.PARENB | termios.CREAD,
        termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN,
        38400,
        38400,
        cc,
    ]


class FakeTermios:
    """Stand-in for tcgetattr/tcsetattr on a set of descriptors."""

    def __init__(self, events: list[str], ttys: tuple[int, ...] = (0,)) -> None:
        self.events = events
        self.attributes = {fd: cooked_attributes() for fd in ttys}
        self.set_calls: list[list[Any]] = []
        self.fail_set = False

    def tcgetattr(self, fd: int) -> list[Any]:
        if fd not in self.attributes:
            raise termios.error(25, "Inappropriate ioctl for device")
        return [list(v) if isinstance(v, list) else v for v in self.attributes[fd]]

    def tcsetattr(self, fd: int, when: int, attributes: list[Any]) -> None:
        self.events.append("tcsetattr")
        if self.fail_set:
            raise termios.error(5, "Input/output error")
        self.set_calls.append(attributes)
        self.attributes[fd] = attributes

    def is_raw(self, fd: int = 0) -> bool:
        return not self.attributes[fd][tty.LFLAG] & termios.ICANON


@pytest.fixture
def events() -> list[str]:
    return []


@pytest.fixture
def fake_termios(monkeypatch: pytest.MonkeyPatch, events: list[str]) -> FakeTermios:
    fake = FakeTermios(events)
    monkeypatch.setattr(mode.termios, "tcgetattr", fake.tcgetattr)
    monkeypatch.setattr(mode.termios, "tcsetattr", fake.tcsetattr)
    return fake


@pytest.fixture
def streams(events: list[str]) -> dict[str, FakeStream]:
    return {
        "stdin": FakeStream("stdin", events),
        "stdout": FakeStream("stdout", events, fd=1),
        "stderr": FakeStream("stderr", events, fd=2),
    }


@pytest.fixture
def manager(fake_termios: FakeTermios, streams: dict[str, FakeStream]) -> TerminalModeManager:
    return TerminalModeManager(**streams)
