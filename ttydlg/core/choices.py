"""Decoder for the compact dialog choices string.

A choices string mixes reserved sentinel letters with arbitrary custom keys::

    "AERCPQ"   every reserved action, no custom keys
    "APO"      any key continues, pause enabled, ``O`` is custom key 0 (code 10)
    "Hxyz"     keymap hidden, three custom keys (codes 10, 11, 12)

Reserved letters are recognised in either case because the shell helpers this
replaces upper-cased the whole string before scanning it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import FrozenSet, Optional, Tuple

from .outcome import custom_outcome


class Action(Enum):
    """Reserved dialog behaviours and their sentinel letters."""

    ANY = "A"
    ENTER = "E"
    REDO = "R"
    CANCEL = "C"
    PAUSE = "P"
    QUIT = "Q"
    HIDE_KEYMAP = "H"


RESERVED_LETTERS = frozenset(action.value for action in Action)
DEFAULT_CHOICES = "AERCPQ"


@dataclass(frozen=True)
class ChoiceSpec:
    """Decoded, read-only view of a choices string."""

    choices: str
    reserved: FrozenSet[Action]
    custom_keys: Tuple[str, ...]

    def has(self, action: Action) -> bool:
        return action in self.reserved

    def allows(self, action: Action) -> bool:
        """True when ``action`` fires, either directly or through ``ANY``."""

        return action in self.reserved or Action.ANY in self.reserved

    @property
    def show_keymap(self) -> bool:
        return Action.HIDE_KEYMAP not in self.reserved

    def custom_code(self, key: str) -> Optional[int]:
        """Return ``10 + index`` for the first custom key matching ``key``."""

        for index, candidate in enumerate(self.custom_keys):
            if _same_key(key, candidate):
                return custom_outcome(index)
        return None


def _same_key(pressed: str, candidate: str) -> bool:
    if pressed == candidate:
        return True
    return pressed.isalpha() and candidate.isalpha() and pressed.upper() == candidate.upper()


def _is_reserved(char: str) -> bool:
    return char.upper() in RESERVED_LETTERS


@lru_cache(maxsize=64)
def decode(choices: str) -> ChoiceSpec:
    """Classify ``choices`` into reserved actions and custom keys.

    Every string is valid. Custom keys keep first-encounter order and the case
    of their first occurrence; later duplicates (same character, or the same
    letter in the other case) are dropped.
    """

    reserved = set()
    custom: list[str] = []
    for char in choices or "":
        if _is_reserved(char):
            reserved.add(Action(char.upper()))
            continue
        if any(_same_key(char, seen) for seen in custom):
            continue
        custom.append(char)
    return ChoiceSpec(choices=choices or "", reserved=frozenset(reserved), custom_keys=tuple(custom))


_LEGEND = (
    (Action.ENTER, "Enter=continue"),
    (Action.REDO, "R=redo"),
    (Action.CANCEL, "C/Esc=cancel"),
    (Action.QUIT, "Q=quit"),
    (Action.ANY, "Press any key to continue"),
)


def keymap_legend(spec: ChoiceSpec, paused: bool = False) -> str:
    """Build the ``; ``-separated key legend shown above the countdown."""

    parts = [text for action, text in _LEGEND if spec.has(action)]
    if spec.has(Action.PAUSE):
        parts.append("P/Space=resume" if paused else "P/Space=pause")
    return "; ".join(parts)


def custom_key_table(spec: ChoiceSpec) -> list[tuple[str, int]]:
    """Return ``(key, code)`` pairs for every custom key in decoder order."""

    return [(key, custom_outcome(index)) for index, key in enumerate(spec.custom_keys)]


__all__ = [
    "Action",
    "ChoiceSpec",
    "DEFAULT_CHOICES",
    "RESERVED_LETTERS",
    "custom_key_table",
    "decode",
    "keymap_legend",
]
