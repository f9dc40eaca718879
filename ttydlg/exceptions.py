"""Exception hierarchy for ttydlg's supporting layers.

The dialog engine itself never raises for user input; these cover explicit
configuration mistakes made by the calling script.
"""

from __future__ import annotations


class TtydlgError(Exception):
    """Base class for ttydlg errors."""


class ThemeError(TtydlgError):
    """Raised when an unknown theme name is requested explicitly."""


class SettingsError(TtydlgError):
    """Raised when a configuration value cannot be parsed."""


class ChoicesError(TtydlgError):
    """Raised when a choices string cannot be reported through an exit status."""


__all__ = ["ChoicesError", "SettingsError", "ThemeError", "TtydlgError"]
