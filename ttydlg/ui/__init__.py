"""Terminal-facing pieces of the dialog: key reader, renderer and themes."""

from .renderer import BlockRenderer, block_height, status_text
from .terminal import ControllingTerminal, KeyRead
from .theme import DialogTheme, available_themes, get_theme, plain_theme

__all__ = [
    "BlockRenderer",
    "ControllingTerminal",
    "DialogTheme",
    "KeyRead",
    "available_themes",
    "block_height",
    "get_theme",
    "plain_theme",
    "status_text",
]
