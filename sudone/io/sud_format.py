# -*- coding: utf-8 -*-
"""
.sud 形式の盤面ファイルを読み書きするモジュールです。

.sud 形式
---------
- ヘッダはなく、(N^2)^2 個の符号なし 32 ビット整数（ネイティブのバイト順）を
  行優先で並べただけのバイナリ
- 0 は空きマス、1..N^2 はヒント
- ブロックサイズ N はファイルに含まれないので、呼び出し側が指定する
"""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, List

import numpy as np

from ..errors import InvalidDataError
from ..grid import Grid

# 1 マスの値の型
SUD_DTYPE = np.dtype(np.uint32)


def read_sud_values(stream: BinaryIO, n: int) -> List[int]:
    """
    ストリームから (N^2)^2 個の値を読み込みます。

    Raises
    ------
    InvalidDataError
        値の個数が足りない場合。
    """
    count = (n * n) ** 2
    data = stream.read(count * SUD_DTYPE.itemsize)
    if len(data) != count * SUD_DTYPE.itemsize:
        raise InvalidDataError(
            f"Expected {count} values ({count * SUD_DTYPE.itemsize} bytes), got {len(data)} bytes."
        )
    return np.frombuffer(data, dtype=SUD_DTYPE).astype(np.int64).tolist()


def load_grid(stream: BinaryIO, n: int) -> Grid:
    """
    .sud 形式のストリームから盤面を読み込みます。

    Raises
    ------
    InvalidDataError
        ファイルの中身が不正な場合（盤面は使えない状態で破棄されます）。
    """
    grid = Grid(n)
    grid.load(read_sud_values(stream, n))
    return grid


def load_grid_file(path: str | Path, n: int) -> Grid:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Grid file not found: {p}")
    with p.open("rb") as f:
        return load_grid(f, n)


def write_grid(grid: Grid, stream: BinaryIO) -> None:
    """盤面の値を .sud 形式でストリームに書き出します。"""
    stream.write(np.asarray(grid.values(), dtype=SUD_DTYPE).tobytes())


def write_grid_file(grid: Grid, path: str | Path) -> Path:
    p = Path(path)
    with p.open("wb") as f:
        write_grid(grid, f)
    return p
