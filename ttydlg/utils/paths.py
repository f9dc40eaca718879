"""Where ttydlg keeps its settings file and decision log."""

from __future__ import annotations

import os
from pathlib import Path

STATE_DIR_ENV = "TTYDLG_STATE_DIR"
DEFAULT_STATE_DIR = "~/.ttydlg"


def state_dir() -> Path:
    """Directory holding ``ttydlg.env`` and ``logs/``.

    ``$TTYDLG_STATE_DIR`` wins when set and non-empty; it is resolved at
    call time so tests and wrapper scripts can redirect it per run.
    """

    return Path(os.environ.get(STATE_DIR_ENV) or DEFAULT_STATE_DIR).expanduser().resolve()


def settings_file() -> Path:
    return state_dir() / "ttydlg.env"


def log_file() -> Path:
    return state_dir() / "logs" / "ttydlg.log"
