from __future__ import annotations

import json
import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from ttydlg.utils import logbook


def test_records_are_json_lines(isolated_state: Path) -> None:
    logbook.info({"action": "dialog.decision", "code": 0})
    logbook.info({"action": "dialog.decision", "code": 4})

    lines = (isolated_state / "logs" / "ttydlg.log").read_text(encoding="utf-8").splitlines()
    records = [json.loads(line) for line in lines]

    assert [record["code"] for record in records] == [0, 4]
    assert all("ts" in record for record in records)


def test_logbook_does_not_propagate(isolated_state: Path) -> None:
    logbook.info({"action": "dialog.decision"})

    logger = logging.getLogger(logbook.LOGGER_NAME)
    assert logger.propagate is False
    assert [type(handler) for handler in logger.handlers].count(RotatingFileHandler) == 1


def test_reset_reopens_in_new_state_dir(tmp_path: Path, monkeypatch) -> None:
    logbook.info({"action": "first"})
    logbook.reset()

    other = tmp_path / "other"
    monkeypatch.setenv("TTYDLG_STATE_DIR", str(other))
    logbook.info({"action": "second"})

    record = json.loads((other / "logs" / "ttydlg.log").read_text(encoding="utf-8"))
    assert record["action"] == "second"


def test_foreign_handler_does_not_block_the_file(isolated_state: Path) -> None:
    decisions = logging.getLogger(logbook.LOGGER_NAME)
    foreign = logging.NullHandler()
    decisions.addHandler(foreign)
    try:
        assert logbook.info({"action": "dialog.decision", "code": 2}) is True
    finally:
        decisions.removeHandler(foreign)

    record = json.loads((isolated_state / "logs" / "ttydlg.log").read_text(encoding="utf-8"))
    assert record["code"] == 2


def test_unwritable_state_dir_is_reported_not_raised(
    tmp_path: Path, monkeypatch, caplog
) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("", encoding="utf-8")
    monkeypatch.setenv("TTYDLG_STATE_DIR", str(blocker))

    with caplog.at_level(logging.WARNING, logger="ttydlg.utils.logbook"):
        assert logbook.info({"action": "dialog.decision"}) is False

    assert "decision log unavailable" in caplog.text
