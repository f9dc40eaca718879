"""Dialog engine: choice decoding, outcome codes, controller and presets."""

from .choices import DEFAULT_CHOICES, Action, ChoiceSpec, custom_key_table, decode, keymap_legend
from .dialog import DialogState, TimedDialog, run_timed_dialog
from .outcome import CUSTOM_BASE, Outcome, custom_index, custom_outcome, describe_outcome
from .presets import PromptAnswer, ask_autocontinue, autocontinue, timed_ok_redo_quit

__all__ = [
    "Action",
    "CUSTOM_BASE",
    "ChoiceSpec",
    "DEFAULT_CHOICES",
    "DialogState",
    "Outcome",
    "PromptAnswer",
    "TimedDialog",
    "ask_autocontinue",
    "autocontinue",
    "custom_index",
    "custom_key_table",
    "custom_outcome",
    "decode",
    "describe_outcome",
    "keymap_legend",
    "run_timed_dialog",
    "timed_ok_redo_quit",
]
