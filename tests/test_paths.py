from __future__ import annotations

from pathlib import Path

import pytest

from ttydlg.utils import paths


def test_state_dir_follows_environment(isolated_state: Path) -> None:
    assert paths.state_dir() == isolated_state.resolve()
    assert paths.log_file() == isolated_state.resolve() / "logs" / "ttydlg.log"


def test_state_dir_defaults_to_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(paths.STATE_DIR_ENV)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert paths.state_dir() == (tmp_path / ".ttydlg").resolve()
    assert paths.settings_file().name == "ttydlg.env"


def test_empty_override_is_ignored(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(paths.STATE_DIR_ENV, "")
    monkeypatch.setenv("HOME", str(tmp_path))

    assert paths.state_dir() == (tmp_path / ".ttydlg").resolve()
