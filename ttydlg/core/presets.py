"""Historical dialog variants expressed as configurations of the one engine.

Three helpers used to exist side by side with their own key handling. They
are kept as thin presets so scripts written against their return codes keep
working, while every keystroke goes through :class:`~ttydlg.core.dialog.TimedDialog`.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Optional

from .choices import DEFAULT_CHOICES
from .dialog import run_timed_dialog
from .outcome import Outcome, custom_outcome

AUTOCONTINUE_CHOICES = "ACPQ"
OK_REDO_QUIT_CHOICES = "ERQPO"


class PromptAnswer(IntEnum):
    """Return codes of the ok/redo/quit prompt."""

    OK = 0
    REDO = 1
    QUIT = 2
    OTHER = 3


def autocontinue(
    seconds: int = 5,
    message: Optional[str] = "",
    choices: str = DEFAULT_CHOICES,
    **options: Any,
) -> int:
    """General autocontinue dialog: the engine's full outcome contract."""

    return run_timed_dialog(seconds, message, choices, **options)


def ask_autocontinue(seconds: int = 5, message: Optional[str] = "", **options: Any) -> bool:
    """Countdown that continues unless the user cancels.

    Any key continues right away, ``c``/``q``/Esc cancel, ``p``/Space pause.
    Returns ``True`` to continue (including on timeout), ``False`` when
    cancelled.
    """

    code = run_timed_dialog(seconds, message, AUTOCONTINUE_CHOICES, **options)
    return code not in (Outcome.CANCEL, Outcome.QUIT)


def timed_ok_redo_quit(prompt: str, seconds: int = 10, **options: Any) -> PromptAnswer:
    """Timed ``[OK/Redo/Quit]`` prompt.

    Enter or ``o`` accepts, and so does letting the countdown run out.
    ``r`` asks for a redo and ``q`` quits.
    """

    code = run_timed_dialog(seconds, f"{prompt} [OK/Redo/Quit]", OK_REDO_QUIT_CHOICES, **options)
    if code in (Outcome.CONTINUE, Outcome.TIMEOUT, custom_outcome(0)):
        return PromptAnswer.OK
    if code == Outcome.REDO:
        return PromptAnswer.REDO
    if code == Outcome.QUIT:
        return PromptAnswer.QUIT
    return PromptAnswer.OTHER


__all__ = [
    "AUTOCONTINUE_CHOICES",
    "OK_REDO_QUIT_CHOICES",
    "PromptAnswer",
    "ask_autocontinue",
    "autocontinue",
    "timed_ok_redo_quit",
]
