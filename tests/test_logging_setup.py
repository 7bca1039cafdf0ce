from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from bingo_sim.logging_setup import setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in saved_handlers:
            handler.close()
    root.handlers[:] = saved_handlers
    root.setLevel(saved_level)


def test_json_log_file_writes_one_object_per_line(tmp_path: Path, restore_root_logging):
    log_file = tmp_path / "run.log"
    setup_logging(level="INFO", log_file=str(log_file), json_format=True)
    logging.getLogger("bingo_sim.test").info("draw #%02d", 3)
    logging.getLogger("bingo_sim.test").debug("filtered out")
    for handler in logging.getLogger().handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    assert len(lines) == 1
    record = json.loads(lines[0])
    assert record["level"] == "INFO"
    assert record["logger"] == "bingo_sim.test"
    assert record["message"] == "draw #03"
    assert "time" in record


def test_text_log_file(tmp_path: Path, restore_root_logging):
    log_file = tmp_path / "run.log"
    setup_logging(level="DEBUG", log_file=str(log_file))
    logging.getLogger("bingo_sim.test").debug("hello")
    for handler in logging.getLogger().handlers:
        handler.flush()
    text = log_file.read_text(encoding="utf-8")
    assert "DEBUG bingo_sim.test hello" in text
