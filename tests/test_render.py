# -*- coding: utf-8 -*-
from __future__ import annotations

import io

import pandas as pd

from conftest import full_pattern, flatten, make_grid
from sudone.postprocess.render import build_result, print_grid, render_grid
from sudone.types import SolveStats

SCENARIO_TEXT = (
    "+------+------+\n"
    "| 1  . | .  . |\n"
    "| .  . | .  2 |\n"
    "+------+------+\n"
    "| .  . | .  . |\n"
    "| .  . | .  . |\n"
    "+------+------+\n"
)


def test_render_scenario(scenario_grid):
    assert render_grid(scenario_grid) == SCENARIO_TEXT


def test_print_grid(scenario_grid):
    out = io.StringIO()
    print_grid(scenario_grid, out)
    assert out.getvalue() == SCENARIO_TEXT


def test_render_16x16_pads_values():
    grid = make_grid(4, flatten(full_pattern(4)))
    lines = render_grid(grid).splitlines()

    assert len(lines) == 16 + 5
    assert lines[0] == "+" + ("-" * 16 + "+") * 4
    assert len(lines[0]) == 69
    assert all(len(line) == 69 for line in lines)
    assert lines[1].startswith("|  1   2 ")


def test_build_result(scenario_grid):
    stats = SolveStats()
    stats.record("naked_singleton")
    df = pd.DataFrame([[0] * 4] * 4, columns=list("abcd"))

    result = build_result(scenario_grid, False, stats, original_df=df)

    assert result["solved"] is False
    assert result["shape"] == (4, 4)
    assert result["block_size"] == 2
    assert result["solved_board"][0] == [1, 0, 0, 0]
    assert result["solved_board"][1] == [0, 0, 0, 2]
    assert result["stats"]["technique_progress"] == {"naked_singleton": 1}
