# -*- coding: utf-8 -*-
"""
盤面の入力を内部表現（行優先の整数リスト）に正規化するモジュールです。

主な役割:
- pandas.DataFrame / 2 次元リスト / numpy 配列を受け取る
- 各セルの値を整数に正規化する（空欄は 0）
- 一辺の長さからブロックサイズ N を求める
"""

from __future__ import annotations

import math
from typing import Any, List, Tuple

import numpy as np
import pandas as pd

from ..config import MAX_BLOCK_SIZE
from ..errors import InvalidDataError

# 空きマスとして扱う文字列
BLANK_TOKENS = {"", ".", "0", "-", "_"}


def normalize_cell(x: Any) -> int:
    """
    個々のセルの値を整数に変換します。

    変換ルール
    ----------
    - None / NaN / 空文字 / "." などの空欄記号: 0
    - 整数、または整数として読める文字列: その値
    - それ以外: InvalidDataError
    """
    if x is None:
        return 0

    if isinstance(x, (bool, np.bool_)):
        raise InvalidDataError(f"Invalid cell value: {x!r} (not an integer).")

    if isinstance(x, (int, np.integer)):
        return int(x)

    if isinstance(x, (float, np.floating)):
        if math.isnan(x):
            return 0
        if float(x).is_integer():
            return int(x)
        raise InvalidDataError(f"Invalid cell value: {x!r} (not an integer).")

    s = str(x).strip()
    if s in BLANK_TOKENS:
        return 0
    if s.isdigit():
        return int(s)

    raise InvalidDataError(f"Invalid cell value: {x!r} (not an integer).")


def block_size_for_side(side: int) -> int:
    """
    一辺の長さ (N^2) からブロックサイズ N を求めます。

    一辺が平方数でない場合は InvalidDataError。
    """
    n = math.isqrt(side)
    if side <= 0 or n * n != side:
        raise InvalidDataError(
            f"Invalid size: {side}. Only perfect squares are supported (4, 9, 16, ...)."
        )
    if n > MAX_BLOCK_SIZE:
        raise InvalidDataError(f"Block size {n} exceeds the maximum of {MAX_BLOCK_SIZE}.")
    return n


def normalize_board(board: Any, block_size: int | None = None) -> Tuple[int, List[int]]:
    """
    盤面を (ブロックサイズ N, 行優先の値リスト) に変換します。

    Parameters
    ----------
    board : pandas.DataFrame or list of list or numpy.ndarray
        入力の盤面データ。正方形であること。
    block_size : int, optional
        ブロックサイズ N。省略時は一辺の長さから求めます。

    Returns
    -------
    (int, list of int)
        N と、長さ (N^2)^2 の値リスト。
        値の範囲チェックは Grid.load 側で行います。
    """
    if isinstance(board, pd.DataFrame):
        rows = board.values.tolist()
    elif isinstance(board, np.ndarray):
        if board.ndim != 2:
            raise InvalidDataError(f"Board must be 2-dimensional, got shape {board.shape}.")
        rows = board.tolist()
    else:
        rows = [list(row) for row in board]

    side = len(rows)
    if side == 0 or any(len(row) != side for row in rows):
        raise InvalidDataError("Board must be square (N^2 x N^2).")

    n = block_size_for_side(side)
    if block_size is not None and block_size != n:
        raise InvalidDataError(
            f"Board side {side} does not match block size {block_size}."
        )

    values = [normalize_cell(x) for row in rows for x in row]
    return n, values
