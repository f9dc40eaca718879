"""Outcome codes returned by the timed dialog engine."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional

CUSTOM_BASE = 10


class Outcome(IntEnum):
    """Fixed decision codes. Custom keys map to ``CUSTOM_BASE + index``."""

    CONTINUE = 0
    TIMEOUT = 1
    CANCEL = 2
    REDO = 3
    QUIT = 4


_LABELS = {
    Outcome.CONTINUE: "continue",
    Outcome.TIMEOUT: "timeout",
    Outcome.CANCEL: "cancel",
    Outcome.REDO: "redo",
    Outcome.QUIT: "quit",
}


def custom_outcome(index: int) -> int:
    """Return the code for the custom key at ``index`` (0-based)."""

    if index < 0:
        raise ValueError("custom key index must be >= 0")
    return CUSTOM_BASE + index


def custom_index(code: int) -> Optional[int]:
    """Return the custom key index encoded in ``code`` or ``None``."""

    if code >= CUSTOM_BASE:
        return code - CUSTOM_BASE
    return None


def describe_outcome(code: int) -> str:
    """Human readable label for ``code`` suitable for logs.

    Codes outside the known range are labelled ``unknown`` so callers keep a
    defensive default branch instead of crashing.
    """

    index = custom_index(code)
    if index is not None:
        return f"custom:{index}"
    try:
        return _LABELS[Outcome(code)]
    except ValueError:
        return "unknown"


__all__ = ["CUSTOM_BASE", "Outcome", "custom_index", "custom_outcome", "describe_outcome"]
