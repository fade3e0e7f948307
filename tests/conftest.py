# -*- coding: utf-8 -*-
from __future__ import annotations

from typing import List

import pytest

from sudone.grid import Grid

# 4x4 (N=2) の基本シナリオ
SCENARIO_4X4 = [
    1, 0, 0, 0,
    0, 0, 0, 2,
    0, 0, 0, 0,
    0, 0, 0, 0,
]

# singleton だけで解ける 9x9
EASY_9X9 = [
    [5, 3, 0, 0, 7, 0, 0, 0, 0],
    [6, 0, 0, 1, 9, 5, 0, 0, 0],
    [0, 9, 8, 0, 0, 0, 0, 6, 0],
    [8, 0, 0, 0, 6, 0, 0, 0, 3],
    [4, 0, 0, 8, 0, 3, 0, 0, 1],
    [7, 0, 0, 0, 2, 0, 0, 0, 6],
    [0, 6, 0, 0, 0, 0, 2, 8, 0],
    [0, 0, 0, 4, 1, 9, 0, 0, 5],
    [0, 0, 0, 0, 8, 0, 0, 7, 9],
]

EASY_9X9_SOLUTION = [
    [5, 3, 4, 6, 7, 8, 9, 1, 2],
    [6, 7, 2, 1, 9, 5, 3, 4, 8],
    [1, 9, 8, 3, 4, 2, 5, 6, 7],
    [8, 5, 9, 7, 6, 1, 4, 2, 3],
    [4, 2, 6, 8, 5, 3, 7, 9, 1],
    [7, 1, 3, 9, 2, 4, 8, 5, 6],
    [9, 6, 1, 5, 3, 7, 2, 8, 4],
    [2, 8, 7, 4, 1, 9, 6, 3, 5],
    [3, 4, 5, 2, 8, 6, 1, 7, 9],
]

# テクニックだけでは止まり、backtracking が必要な 9x9
HARD_9X9 = [
    [8, 0, 0, 0, 0, 0, 0, 0, 0],
    [0, 0, 3, 6, 0, 0, 0, 0, 0],
    [0, 7, 0, 0, 9, 0, 2, 0, 0],
    [0, 5, 0, 0, 0, 7, 0, 0, 0],
    [0, 0, 0, 0, 4, 5, 7, 0, 0],
    [0, 0, 0, 1, 0, 0, 0, 3, 0],
    [0, 0, 1, 0, 0, 0, 0, 6, 8],
    [0, 0, 8, 5, 0, 0, 0, 1, 0],
    [0, 9, 0, 0, 0, 0, 4, 0, 0],
]

# ヒント同士は衝突しないが、(0,2) に置ける値がない 4x4
UNSOLVABLE_4X4 = [
    1, 2, 0, 0,
    0, 0, 3, 0,
    0, 0, 4, 0,
    0, 0, 0, 0,
]


def flatten(rows: List[List[int]]) -> List[int]:
    return [v for row in rows for v in row]


def make_grid(n: int, values: List[int]) -> Grid:
    grid = Grid(n)
    grid.load(values)
    return grid


def full_pattern(n: int) -> List[List[int]]:
    """ブロックサイズ n の完成盤面（パターンで作る）。"""
    size = n * n
    return [[(n * (r % n) + r // n + c) % size + 1 for c in range(size)] for r in range(size)]


def peers(grid: Grid, row: int, column: int):
    block_row = grid.block_index(row)
    block_col = grid.block_index(column)
    out = set()
    for i in range(grid.size):
        out.add((row, i))
        out.add((i, column))
    for r in range(block_row, block_row + grid.n):
        for c in range(block_col, block_col + grid.n):
            out.add((r, c))
    out.discard((row, column))
    return out


def assert_consistent(grid: Grid) -> None:
    """空き値テーブル・候補集合・候補数の整合性を確認する。"""
    for r in range(grid.size):
        for c in range(grid.size):
            cell = grid.cell_at(r, c)
            if cell.has_value():
                assert cell.candidate_count == 0
                assert not grid.possible(r, c, cell.value)
                for pr, pc in peers(grid, r, c):
                    peer = grid.cell_at(pr, pc)
                    if not peer.has_value():
                        assert not peer.has_candidate(cell.value), (r, c, pr, pc)
            else:
                candidates = cell.candidates()
                assert cell.candidate_count == len(candidates)
                for v in candidates:
                    assert grid.possible(r, c, v)


@pytest.fixture
def scenario_grid() -> Grid:
    return make_grid(2, SCENARIO_4X4)


@pytest.fixture
def blank_4x4() -> Grid:
    return make_grid(2, [0] * 16)
