"""Timed single-keystroke decision dialog.

The controller draws a small status block on the controlling terminal and
loops render -> read -> interpret until one of the outcome codes in
:class:`~ttydlg.core.outcome.Outcome` (or a custom key code) is decided::

    Create a release using these settings?
    Enter=continue; R=redo; C/Esc=cancel; Q=quit; P/Space=pause
    Continuing in 4s...

Without an interactive terminal the dialog is skipped and ``0`` (continue)
is returned immediately, so unattended runs never block.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

from ..ui.renderer import BlockRenderer, block_height, status_text
from ..ui.terminal import ESCAPE, ControllingTerminal
from ..ui.theme import DialogTheme, get_theme
from ..utils import logbook
from .choices import DEFAULT_CHOICES, Action, ChoiceSpec, decode, keymap_legend
from .outcome import Outcome, describe_outcome

logger = logging.getLogger(__name__)

PAUSE_KEYS = frozenset({"p", "P", " "})
ENTER_KEYS = frozenset({"\n", "\r"})

_ACTION_KEYS = (
    (frozenset({"r", "R"}), Action.REDO, Outcome.REDO),
    (frozenset({"c", "C", ESCAPE}), Action.CANCEL, Outcome.CANCEL),
    (frozenset({"q", "Q"}), Action.QUIT, Outcome.QUIT),
    (ENTER_KEYS, Action.ENTER, Outcome.CONTINUE),
)


@dataclass
class DialogState:
    """Mutable countdown state for one dialog run."""

    remaining: int
    lines: int
    paused: bool = False

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def tick(self) -> bool:
        """Count one elapsed second; return True once the countdown hits 0."""

        if self.paused:
            return False
        self.remaining = max(0, self.remaining - 1)
        return self.remaining == 0


class TimedDialog:
    """One configured dialog; call :meth:`run` to show it."""

    def __init__(
        self,
        seconds: int = 5,
        message: Optional[str] = "",
        choices: str = DEFAULT_CHOICES,
        *,
        terminal: Optional[ControllingTerminal] = None,
        theme: Optional[DialogTheme] = None,
        log_decisions: bool = False,
    ) -> None:
        self.seconds = max(0, int(seconds))
        self.message = message or ""
        self.spec: ChoiceSpec = decode(choices)
        self.terminal = terminal or ControllingTerminal()
        self.theme = theme
        self.log_decisions = log_decisions

    def new_state(self) -> DialogState:
        return DialogState(
            remaining=self.seconds,
            lines=block_height(self.message, self.spec.show_keymap),
        )

    def interpret(self, state: DialogState, key: str) -> Optional[int]:
        """Apply ``key`` to ``state``; return an outcome code or ``None`` to keep looping."""

        spec = self.spec
        if key in PAUSE_KEYS and spec.has(Action.PAUSE):
            state.toggle_pause()
            return None

        for keys, action, outcome in _ACTION_KEYS:
            if key in keys:
                return int(outcome) if spec.allows(action) else None

        code = spec.custom_code(key)
        if code is not None:
            return code

        if spec.has(Action.ANY):
            return int(Outcome.CONTINUE)
        return None

    def run(self) -> int:
        if not self.terminal.is_interactive():
            logger.debug("no interactive terminal; continuing without dialog")
            return self._decided(int(Outcome.CONTINUE), self.new_state(), interactive=False)

        state = self.new_state()
        with self.terminal.session():
            renderer = BlockRenderer(self.terminal.stream, self.theme or self._default_theme())
            try:
                code = self._loop(renderer, state)
            except KeyboardInterrupt:
                renderer.finish(state.lines)
                raise
            renderer.finish(state.lines, advance=code != Outcome.REDO)
        return self._decided(code, state)

    @staticmethod
    def _default_theme() -> DialogTheme:
        # https://no-color.org
        return get_theme(no_color=bool(os.environ.get("NO_COLOR")))

    def _loop(self, renderer: BlockRenderer, state: DialogState) -> int:
        while True:
            keymap = keymap_legend(self.spec, state.paused) if self.spec.show_keymap else None
            renderer.render(self.message, keymap, status_text(state.remaining, state.paused), state.paused)

            read = self.terminal.read_key(state.paused)
            renderer.rewind(state.lines)

            if read.key is None:
                if state.tick():
                    return int(Outcome.TIMEOUT)
                continue

            code = self.interpret(state, read.key)
            if code is not None:
                return code

    def _decided(self, code: int, state: DialogState, *, interactive: bool = True) -> int:
        logger.debug("dialog decided %s (%d) with %ds left", describe_outcome(code), code, state.remaining)
        if self.log_decisions:
            logbook.info(
                {
                    "action": "dialog.decision",
                    "choices": self.spec.choices,
                    "message": self.message,
                    "code": code,
                    "outcome": describe_outcome(code),
                    "remaining": state.remaining,
                    "paused": state.paused,
                    "interactive": interactive,
                }
            )
        return code


def run_timed_dialog(
    seconds: int = 5,
    message: Optional[str] = "",
    choices: str = DEFAULT_CHOICES,
    *,
    terminal: Optional[ControllingTerminal] = None,
    theme: Optional[DialogTheme] = None,
    log_decisions: bool = False,
) -> int:
    """Show a timed dialog and return its outcome code.

    Returns ``0`` continue, ``1`` timed out, ``2`` cancel, ``3`` redo,
    ``4`` quit, or ``10 + n`` for the n-th custom key in ``choices``.
    """

    dialog = TimedDialog(
        seconds,
        message,
        choices,
        terminal=terminal,
        theme=theme,
        log_decisions=log_decisions,
    )
    return dialog.run()


__all__ = ["DialogState", "ENTER_KEYS", "PAUSE_KEYS", "TimedDialog", "run_timed_dialog"]
