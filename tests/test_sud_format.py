# -*- coding: utf-8 -*-
from __future__ import annotations

import io

import numpy as np
import pytest

from conftest import EASY_9X9, SCENARIO_4X4, flatten, make_grid
from sudone.errors import InvalidDataError
from sudone.io.sud_format import (
    SUD_DTYPE, load_grid, load_grid_file, read_sud_values, write_grid, write_grid_file,
)


def _sud_bytes(values):
    return np.asarray(values, dtype=np.uint32).tobytes()


def test_sud_values_are_native_uint32():
    assert SUD_DTYPE.itemsize == 4
    assert read_sud_values(io.BytesIO(_sud_bytes(SCENARIO_4X4)), 2) == SCENARIO_4X4


def test_load_grid_from_stream():
    grid = load_grid(io.BytesIO(_sud_bytes(flatten(EASY_9X9))), 3)

    assert grid.size == 9
    assert grid.values() == flatten(EASY_9X9)


def test_write_then_load(tmp_path):
    grid = make_grid(2, SCENARIO_4X4)
    path = write_grid_file(grid, tmp_path / "scenario.sud")

    assert path.stat().st_size == 16 * 4
    assert load_grid_file(path, 2).values() == SCENARIO_4X4


def test_write_grid_to_stream():
    buf = io.BytesIO()
    write_grid(make_grid(2, SCENARIO_4X4), buf)
    assert buf.getvalue() == _sud_bytes(SCENARIO_4X4)


def test_short_data_is_invalid():
    data = _sud_bytes(SCENARIO_4X4)[:-4]
    with pytest.raises(InvalidDataError):
        load_grid(io.BytesIO(data), 2)


def test_value_larger_than_side_is_invalid():
    values = list(SCENARIO_4X4)
    values[2] = 5
    with pytest.raises(InvalidDataError):
        load_grid(io.BytesIO(_sud_bytes(values)), 2)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_grid_file(tmp_path / "missing.sud", 2)
