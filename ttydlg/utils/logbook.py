"""Rotating JSON-lines log of dialog decisions.

Writing the log never fails the dialog: if the state directory cannot be
created or the file cannot be opened, a warning is logged and the record
is dropped.
"""

from __future__ import annotations

import json
import logging
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, Optional

from .paths import log_file

LOGGER_NAME = "ttydlg.decisions"

logger = logging.getLogger(__name__)

_handler: Optional[RotatingFileHandler] = None


def _get_logger(path: Optional[Path] = None) -> logging.Logger:
    global _handler

    decisions = logging.getLogger(LOGGER_NAME)
    # Handlers added by the host application do not count as ours.
    if _handler is not None and _handler in decisions.handlers:
        return decisions

    target = path or log_file()
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(target, maxBytes=1_000_000, backupCount=5, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(message)s"))

    decisions.setLevel(logging.INFO)
    decisions.propagate = False
    decisions.addHandler(handler)
    _handler = handler
    return decisions


def reset() -> None:
    """Detach and close the file handler so the next write reopens it."""

    global _handler

    if _handler is None:
        return
    logging.getLogger(LOGGER_NAME).removeHandler(_handler)
    _handler.close()
    _handler = None


def info(record: Dict[str, object]) -> bool:
    """Append ``record`` as one JSON line to the decision log.

    Returns ``False`` when the log file could not be opened.
    """

    entry = {"ts": round(time.time(), 3), **record}
    try:
        decisions = _get_logger()
    except OSError as exc:
        logger.warning("decision log unavailable: %s", exc)
        return False
    decisions.info(json.dumps(entry, sort_keys=True, default=str))
    return True


__all__ = ["LOGGER_NAME", "info", "reset"]
