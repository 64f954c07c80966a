"""Tests for the command-line runner."""
import logging

import pytest

from strategycalc.main import main


@pytest.fixture(autouse=True)
def drop_log_handlers():
    yield
    logger = logging.getLogger("strategycalc")
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()


def test_runs_and_prints_days_and_totals(qapp, capsys):
    main(["--days", "2", "--military", "2", "--economy", "0", "--seed", "7", "--init-military", "5"])
    out = capsys.readouterr().out

    assert "Day 1:" in out
    assert "Day 2:" in out
    assert "Day 3:" not in out
    assert "Military total = +5 +" in out
    assert "Economy total = +0 + +0 = +0" in out


def test_same_seed_same_output(qapp, capsys):
    args = ["--days", "4", "--seed", "11", "--y", "30", "--sync-all"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    second = capsys.readouterr().out
    assert first == second


def test_log_file_gets_debug_details(qapp, capsys, tmp_path):
    log_path = tmp_path / "run.log"
    main(["--days", "2", "--seed", "3", "--sync-pair", "--y", "20", "--log-file", str(log_path)])
    for handler in logging.getLogger("strategycalc").handlers:
        handler.flush()

    text = log_path.read_text(encoding="utf-8")
    assert "propagated to 1 cell(s)" in text
    assert "Generated 2 day(s)" in text
    assert "DEBUG" not in capsys.readouterr().out
