"""Timed single-keystroke terminal dialogs for shell-style tooling."""

from __future__ import annotations

__version__ = "1.0.0"

from .core import (
    Action,
    ChoiceSpec,
    Outcome,
    PromptAnswer,
    TimedDialog,
    ask_autocontinue,
    autocontinue,
    decode,
    describe_outcome,
    keymap_legend,
    run_timed_dialog,
    timed_ok_redo_quit,
)

__all__ = [
    "Action",
    "ChoiceSpec",
    "Outcome",
    "PromptAnswer",
    "TimedDialog",
    "__version__",
    "ask_autocontinue",
    "autocontinue",
    "decode",
    "describe_outcome",
    "keymap_legend",
    "run_timed_dialog",
    "timed_ok_redo_quit",
]
