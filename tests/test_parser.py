# -*- coding: utf-8 -*-
from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from sudone.errors import InvalidDataError
from sudone.grid.parser import block_size_for_side, normalize_board, normalize_cell


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, 0),
        (float("nan"), 0),
        ("", 0),
        (".", 0),
        (" 7 ", 7),
        (3, 3),
        (np.int64(12), 12),
        (4.0, 4),
    ],
)
def test_normalize_cell(raw, expected):
    assert normalize_cell(raw) == expected


@pytest.mark.parametrize("raw", [True, 2.5, "a", "1.5", object()])
def test_normalize_cell_rejects(raw):
    with pytest.raises(InvalidDataError):
        normalize_cell(raw)


def test_block_size_for_side():
    assert block_size_for_side(1) == 1
    assert block_size_for_side(4) == 2
    assert block_size_for_side(16) == 4
    assert block_size_for_side(64) == 8

    for side in (0, 3, 10):
        with pytest.raises(InvalidDataError):
            block_size_for_side(side)
    with pytest.raises(InvalidDataError):
        block_size_for_side(81)


def test_normalize_board_from_dataframe():
    df = pd.DataFrame([[1, None, None, None], [None, None, None, 2], [None] * 4, [None] * 4])
    n, values = normalize_board(df)

    assert n == 2
    assert values[0] == 1
    assert values[7] == 2
    assert values.count(0) == 14


def test_normalize_board_from_ndarray():
    n, values = normalize_board(np.zeros((9, 9), dtype=int))
    assert n == 3
    assert values == [0] * 81

    with pytest.raises(InvalidDataError):
        normalize_board(np.zeros(16, dtype=int))


def test_normalize_board_rejects_ragged_or_empty():
    with pytest.raises(InvalidDataError):
        normalize_board([[0, 0, 0, 0], [0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
    with pytest.raises(InvalidDataError):
        normalize_board([])


def test_normalize_board_keeps_out_of_range_values():
    # 範囲チェックは Grid.load 側の責務
    n, values = normalize_board([[9, 0, 0, 0], [0] * 4, [0] * 4, [0] * 4])
    assert n == 2
    assert values[0] == 9
