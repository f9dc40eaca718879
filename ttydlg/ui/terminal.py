"""Controlling-terminal access and single keystroke reads.

Everything goes through ``/dev/tty`` rather than the process standard
streams, so a script may pipe or redirect stdout/stderr while the dialog
still talks to the human at the keyboard.
"""

from __future__ import annotations

import codecs
import logging
import os
import select
import sys
import termios
import tty
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Iterator, Optional, TextIO

TTY_PATH = "/dev/tty"
READ_TIMEOUT = 1.0

ENTER = "\n"
ESCAPE = "\x1b"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyRead:
    """Result of one read: either a key or a timeout."""

    key: Optional[str]
    timed_out: bool = False


def _isatty(stream: Optional[object]) -> bool:
    try:
        return bool(stream is not None and stream.isatty())  # type: ignore[attr-defined]
    except (AttributeError, ValueError):
        # Detached or closed streams behave like non-terminals.
        return False


class ControllingTerminal:
    """Read keys from and write the dialog block to the terminal device."""

    def __init__(
        self,
        path: str = TTY_PATH,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        timeout: float = READ_TIMEOUT,
    ) -> None:
        self.path = path
        self.timeout = timeout
        self._stdin = stdin
        self._stdout = stdout
        self._fd: Optional[int] = None
        self._stream: Optional[TextIO] = None

    # ------------------------------------------------------------------
    # Device lifecycle
    # ------------------------------------------------------------------
    def open(self) -> None:
        if self._fd is not None:
            return
        self._fd = os.open(self.path, os.O_RDWR | os.O_NOCTTY)
        self._stream = open(self._fd, "w", encoding="utf-8", errors="replace", closefd=False)

    def close(self) -> None:
        if self._stream is not None:
            try:
                self._stream.close()
            finally:
                self._stream = None
        if self._fd is not None:
            os.close(self._fd)
            self._fd = None

    @property
    def stream(self) -> TextIO:
        """Text stream writing to the terminal device (opened on demand)."""

        self.open()
        assert self._stream is not None
        return self._stream

    @property
    def fileno(self) -> int:
        self.open()
        assert self._fd is not None
        return self._fd

    def is_interactive(self) -> bool:
        """True when stdin and stdout are TTYs and the device can be opened."""

        stdin = self._stdin if self._stdin is not None else sys.stdin
        stdout = self._stdout if self._stdout is not None else sys.stdout
        if not (_isatty(stdin) and _isatty(stdout)):
            logger.debug("standard streams are not attached to a terminal")
            return False
        try:
            self.open()
        except OSError as exc:
            logger.debug("cannot open %s: %s", self.path, exc)
            return False
        return True

    @contextmanager
    def session(self) -> Iterator["ControllingTerminal"]:
        """Hold the device in cbreak mode (no echo, no line buffering).

        Pending type-ahead is kept (``TCSANOW``) and the previous terminal
        attributes are restored on exit, including on ``KeyboardInterrupt``.
        """

        fd = self.fileno
        saved = termios.tcgetattr(fd)
        try:
            tty.setcbreak(fd, termios.TCSANOW)
            yield self
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, saved)
            self.close()

    # ------------------------------------------------------------------
    # Key input
    # ------------------------------------------------------------------
    def read_key(self, paused: bool) -> KeyRead:
        """Read one character; wait forever when paused, else ``timeout`` seconds."""

        wait = None if paused else self.timeout
        ready, _, _ = select.select([self.fileno], [], [], wait)
        if not ready:
            return KeyRead(key=None, timed_out=True)
        return KeyRead(key=self._read_char())

    def _read_char(self) -> str:
        decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        while True:
            data = os.read(self.fileno, 1)
            if not data:
                # End of input reads like an empty line.
                return ENTER
            char = decoder.decode(data)
            if char:
                return char


__all__ = ["ControllingTerminal", "ENTER", "ESCAPE", "KeyRead", "READ_TIMEOUT", "TTY_PATH"]
