# -*- coding: utf-8 -*-
from __future__ import annotations

import io

import numpy as np
import pytest

from conftest import EASY_9X9, EASY_9X9_SOLUTION, SCENARIO_4X4, UNSOLVABLE_4X4, flatten
from sudone.cli import main
from sudone.config import EXIT_INVALID_ARG, EXIT_INVALID_DATA, EXIT_SUCCESS, EXIT_UNSOLVABLE
from sudone.io.sud_format import load_grid_file


def _write_sud(path, values):
    path.write_bytes(np.asarray(values, dtype=np.uint32).tobytes())
    return str(path)


def test_solve_file(tmp_path, capsys):
    path = _write_sud(tmp_path / "easy.sud", flatten(EASY_9X9))

    assert main(["3", "-f", path]) == EXIT_SUCCESS

    out = capsys.readouterr().out
    assert out.startswith("+---------+---------+---------+\n")
    assert "| 5  3  4 | 6  7  8 | 9  1  2 |" in out


def test_solve_writes_output(tmp_path):
    path = _write_sud(tmp_path / "easy.sud", flatten(EASY_9X9))
    output = tmp_path / "solved.sud"

    assert main(["3", "-f", path, "-o", str(output)]) == EXIT_SUCCESS

    assert load_grid_file(output, 3).values() == flatten(EASY_9X9_SOLUTION)


def test_no_solve_prints_grid(tmp_path, capsys):
    path = _write_sud(tmp_path / "scenario.sud", SCENARIO_4X4)

    assert main(["2", "-f", path, "--no-solve"]) == EXIT_SUCCESS
    assert "| 1  . | .  . |" in capsys.readouterr().out


def test_reads_standard_input(monkeypatch, capsys):
    data = np.asarray(SCENARIO_4X4, dtype=np.uint32).tobytes()
    monkeypatch.setattr("sys.stdin", io.TextIOWrapper(io.BytesIO(data)))

    assert main(["2"]) == EXIT_SUCCESS
    assert "." not in capsys.readouterr().out


@pytest.mark.parametrize("n", ["0", "9"])
def test_block_size_out_of_range(n):
    assert main([n, "-f", "unused.sud"]) == EXIT_INVALID_ARG


def test_non_integer_block_size():
    with pytest.raises(SystemExit) as exc_info:
        main(["three"])
    assert exc_info.value.code == EXIT_INVALID_ARG


def test_missing_file(tmp_path):
    assert main(["2", "-f", str(tmp_path / "missing.sud")]) == EXIT_INVALID_ARG


def test_invalid_data(tmp_path):
    values = list(SCENARIO_4X4)
    values[5] = 7
    path = _write_sud(tmp_path / "bad.sud", values)
    assert main(["2", "-f", path]) == EXIT_INVALID_DATA

    short = _write_sud(tmp_path / "short.sud", SCENARIO_4X4[:10])
    assert main(["2", "-f", short]) == EXIT_INVALID_DATA


def test_unsolvable(tmp_path, capsys):
    path = _write_sud(tmp_path / "unsolvable.sud", UNSOLVABLE_4X4)

    assert main(["2", "-f", path]) == EXIT_UNSOLVABLE
    assert capsys.readouterr().out.startswith("+------+------+")
