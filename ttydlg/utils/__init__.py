"""Utility helpers exposed by ttydlg."""

from . import logbook
from .paths import log_file, settings_file, state_dir
from .settings import Settings, load_settings

__all__ = [
    "Settings",
    "load_settings",
    "log_file",
    "logbook",
    "settings_file",
    "state_dir",
]
