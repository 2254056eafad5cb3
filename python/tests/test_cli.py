from __future__ import annotations

import logging

from typer.testing import CliRunner

from main import _warn_if_large, app

runner = CliRunner()


def test_solve_prints_swaps() -> None:
    result = runner.invoke(app, ["solve", "-w", "2", "-h", "2", "0", "1", "_", "2"])
    assert result.exit_code == 0, result.output
    assert "2 3" in result.output.splitlines()


def test_solve_accepts_numeric_sentinel() -> None:
    result = runner.invoke(
        app, ["solve", "-w", "3", "-h", "3", "255", "1", "2", "0", "3", "5", "6", "4", "7"]
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[:4] == ["0 3", "3 4", "4 7", "7 8"]


def test_solve_already_solved() -> None:
    result = runner.invoke(app, ["solve", "-w", "2", "-h", "2", "0", "1", "2", "_"])
    assert result.exit_code == 0
    assert "Already solved" in result.output


def test_solve_unsolvable_exits_with_error() -> None:
    result = runner.invoke(app, ["solve", "-w", "2", "-h", "2", "1", "0", "2", "_"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_solve_rejects_garbage_tile() -> None:
    result = runner.invoke(app, ["solve", "-w", "2", "-h", "2", "0", "x", "2", "_"])
    assert result.exit_code != 0


def test_shuffle_is_seeded() -> None:
    args = ["shuffle", "-w", "3", "-h", "3", "-m", "6", "--seed", "5"]
    first = runner.invoke(app, args)
    second = runner.invoke(app, args)
    assert first.exit_code == 0, first.output
    assert first.output == second.output
    lines = first.output.splitlines()
    assert len(lines) == 6 + 3
    assert lines[0].startswith("8 ")


def test_shuffle_rejects_oversized_board() -> None:
    result = runner.invoke(app, ["shuffle", "-w", "17", "-h", "16"])
    assert result.exit_code == 1
    assert "Error" in result.output


def test_large_board_logs_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="main"):
        assert not _warn_if_large(4, 4)
        assert not caplog.records
        assert _warn_if_large(5, 4)
    assert "may not finish" in caplog.text
