from __future__ import annotations

import io
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

import pytest


ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from ttydlg.ui.terminal import KeyRead  # noqa: E402
from ttydlg.ui.theme import plain_theme  # noqa: E402
from ttydlg.utils import logbook  # noqa: E402


class ScriptedTerminal:
    """Stand-in for the controlling terminal.

    ``keys`` is replayed one entry per read; ``None`` stands for a 1-second
    timeout. Everything the dialog draws lands in :attr:`stream`.
    """

    def __init__(self, keys: Iterable[Optional[str]] = (), *, interactive: bool = True) -> None:
        self.stream = io.StringIO()
        self.interactive = interactive
        self.reads: List[bool] = []
        self.sessions = 0
        self._keys = list(keys)

    def is_interactive(self) -> bool:
        return self.interactive

    @contextmanager
    def session(self) -> Iterator["ScriptedTerminal"]:
        self.sessions += 1
        yield self

    def read_key(self, paused: bool) -> KeyRead:
        self.reads.append(paused)
        if not self._keys:
            raise AssertionError("dialog kept reading after the scripted keys ran out")
        key = self._keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        if key is None:
            return KeyRead(key=None, timed_out=True)
        return KeyRead(key=key)

    @property
    def output(self) -> str:
        return self.stream.getvalue()


@pytest.fixture(autouse=True)
def isolated_state(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    state = tmp_path / "state"
    monkeypatch.setenv("TTYDLG_STATE_DIR", str(state))
    for key in ("TTYDLG_SECONDS", "TTYDLG_CHOICES", "TTYDLG_THEME", "TTYDLG_LOG", "NO_COLOR"):
        monkeypatch.delenv(key, raising=False)
    logbook.reset()
    yield state
    logbook.reset()


@pytest.fixture()
def plain():
    return plain_theme()
