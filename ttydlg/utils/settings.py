"""Runtime defaults resolved from ``ttydlg.env`` and the environment.

Resolution order (later wins): built-in defaults, ``<state_dir>/ttydlg.env``
parsed with python-dotenv, then the process environment.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from dotenv import dotenv_values

from ..core.choices import DEFAULT_CHOICES
from ..exceptions import SettingsError
from .paths import settings_file

DEFAULT_SECONDS = 5

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


@dataclass
class Settings:
    seconds: int = DEFAULT_SECONDS
    choices: str = DEFAULT_CHOICES
    theme: str = "default"
    log_decisions: Optional[bool] = None
    no_color: bool = False


def _parse_int(name: str, raw: str) -> int:
    try:
        value = int(raw.strip())
    except ValueError as exc:
        raise SettingsError(f"{name} must be an integer, got {raw!r}") from exc
    return max(0, value)


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise SettingsError(f"{name} must be a boolean (1/0, yes/no), got {raw!r}")


def _collect(environ: Mapping[str, str], path: Path) -> Dict[str, str]:
    values: Dict[str, str] = {}
    if path.exists():
        values.update({key: value for key, value in dotenv_values(path).items() if value is not None})
    for key, value in environ.items():
        if key.startswith("TTYDLG_") or key == "NO_COLOR":
            values[key] = value
    return values


def load_settings(environ: Optional[Mapping[str, str]] = None, path: Optional[Path] = None) -> Settings:
    """Build :class:`Settings` from the settings file and ``environ``."""

    values = _collect(os.environ if environ is None else environ, path or settings_file())
    settings = Settings()
    if "TTYDLG_SECONDS" in values:
        settings.seconds = _parse_int("TTYDLG_SECONDS", values["TTYDLG_SECONDS"])
    if "TTYDLG_CHOICES" in values:
        settings.choices = values["TTYDLG_CHOICES"]
    if values.get("TTYDLG_THEME"):
        settings.theme = values["TTYDLG_THEME"].strip().lower()
    if "TTYDLG_LOG" in values:
        settings.log_decisions = _parse_bool("TTYDLG_LOG", values["TTYDLG_LOG"])
    # https://no-color.org: any non-empty value disables colour.
    settings.no_color = bool(values.get("NO_COLOR"))
    return settings


__all__ = ["DEFAULT_SECONDS", "Settings", "load_settings"]
