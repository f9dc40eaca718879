"""Style provider for the dialog block.

The renderer never reads colour globals; it asks a :class:`DialogTheme` to
paint text for a semantic slot. Presets follow the palette of the shell
framework the dialogs came from (silver body text, italic white countdown).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Optional

from rich.color import ColorSystem
from rich.style import Style

from ..exceptions import ThemeError

SLOTS = ("message", "keymap", "status", "paused")

THEME_PRESETS: Dict[str, Dict[str, str]] = {
    "default": {
        "message": "color(250)",
        "keymap": "color(250)",
        "status": "italic white",
        "paused": "italic white",
    },
    "monoblack": {
        "message": "dim color(250)",
        "keymap": "dim color(250)",
        "status": "italic white",
        "paused": "italic white",
    },
    "monogreen": {
        "message": "dim green",
        "keymap": "dim green",
        "status": "italic white",
        "paused": "italic white",
    },
    "greenyellow": {
        "message": "yellow",
        "keymap": "yellow",
        "status": "italic white",
        "paused": "italic white",
    },
    "carnaval": {
        "message": "bold cyan",
        "keymap": "bold cyan",
        "status": "italic white",
        "paused": "italic color(208)",
    },
}

DEFAULT_THEME = "default"


@dataclass
class DialogTheme:
    """Map dialog slots to Rich styles and render them as ANSI text."""

    name: str
    styles: Dict[str, Style] = field(default_factory=dict)
    color_system: Optional[ColorSystem] = ColorSystem.EIGHT_BIT

    def style_for(self, slot: str) -> Style:
        return self.styles.get(slot, Style.null())

    def paint(self, slot: str, text: str) -> str:
        """Return ``text`` wrapped in the SGR codes for ``slot``.

        With colour disabled (``color_system`` is ``None``) the text is
        returned unchanged.
        """

        return self.style_for(slot).render(text, color_system=self.color_system)

    @property
    def colored(self) -> bool:
        return self.color_system is not None


def available_themes() -> List[str]:
    return sorted(THEME_PRESETS)


def build_theme(name: str, slots: Mapping[str, str], *, no_color: bool = False) -> DialogTheme:
    """Create a theme from style definitions such as ``"italic white"``."""

    styles = {slot: Style.parse(slots.get(slot, "none")) for slot in SLOTS}
    return DialogTheme(
        name=name,
        styles=styles,
        color_system=None if no_color else ColorSystem.EIGHT_BIT,
    )


def get_theme(name: Optional[str] = None, *, no_color: bool = False) -> DialogTheme:
    """Resolve a preset by name (case-insensitive)."""

    key = (name or DEFAULT_THEME).strip().lower()
    if key not in THEME_PRESETS:
        raise ThemeError(f"Unknown theme '{name}'. Available: {', '.join(available_themes())}")
    return build_theme(key, THEME_PRESETS[key], no_color=no_color)


def plain_theme() -> DialogTheme:
    """Theme that renders every slot without escape codes."""

    return build_theme("plain", {}, no_color=True)


__all__ = [
    "DEFAULT_THEME",
    "DialogTheme",
    "SLOTS",
    "THEME_PRESETS",
    "available_themes",
    "build_theme",
    "get_theme",
    "plain_theme",
]
