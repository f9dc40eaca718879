"""In-place redraw of the dialog status block."""

from __future__ import annotations

from typing import Optional, TextIO

from rich.control import Control, ControlType

from .theme import DialogTheme, plain_theme

PAUSED_TEXT = "Paused... Press P or Space to resume countdown"

_LINE_START = str(Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 0)))
_CARRIAGE_RETURN = str(Control(ControlType.CARRIAGE_RETURN))


def block_height(message: Optional[str], show_keymap: bool) -> int:
    """Number of terminal rows the block occupies (status line included)."""

    return 1 + (1 if message else 0) + (1 if show_keymap else 0)


def status_text(remaining: int, paused: bool) -> str:
    if paused:
        return PAUSED_TEXT
    return f"Continuing in {remaining}s..."


def _cursor_up(rows: int) -> str:
    return str(Control((ControlType.CURSOR_UP, rows))) if rows > 0 else ""


def _cursor_down(rows: int) -> str:
    return str(Control((ControlType.CURSOR_DOWN, rows))) if rows > 0 else ""


class BlockRenderer:
    """Draw the message, keymap and status lines onto a terminal stream.

    Each line starts with a carriage return plus erase-to-end-of-line so a
    shorter redraw never leaves stale characters behind. The status line has
    no trailing newline; :meth:`rewind` moves back to the first line of the
    block so the next :meth:`render` overwrites it instead of scrolling.
    """

    def __init__(self, stream: TextIO, theme: Optional[DialogTheme] = None) -> None:
        self.stream = stream
        self.theme = theme or plain_theme()
        # Where the cursor sits: "idle" (nothing drawn), "status" (end of the
        # status line, after render) or "top" (block start, after rewind).
        self.position = "idle"

    def _write(self, text: str) -> None:
        if not text:
            return
        self.stream.write(text)
        self.stream.flush()

    def render(self, message: Optional[str], keymap: Optional[str], status: str, paused: bool = False) -> None:
        """Draw the block. ``keymap=None`` hides the legend line."""

        parts = []
        if message:
            parts.append(_LINE_START + self.theme.paint("message", message) + "\n")
        if keymap is not None:
            parts.append(_LINE_START + self.theme.paint("keymap", keymap) + "\n")
        parts.append(_LINE_START + self.theme.paint("paused" if paused else "status", status))
        self._write("".join(parts))
        self.position = "status"

    def rewind(self, lines: int) -> None:
        self._write(_cursor_up(lines - 1) + _CARRIAGE_RETURN)
        self.position = "top"

    def finish(self, lines: int, *, advance: bool = True) -> None:
        """Park the cursor on the status line of the block.

        With ``advance`` a newline follows so caller output starts on a fresh
        row; without it the cursor stays at the start of the status line.
        """

        if self.position == "idle":
            return
        down = _cursor_down(lines - 1) if self.position == "top" else ""
        self._write(_CARRIAGE_RETURN + down + ("\n" if advance else ""))
        self.position = "idle"


__all__ = ["BlockRenderer", "PAUSED_TEXT", "block_height", "status_text"]
