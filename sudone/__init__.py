# -*- coding: utf-8 -*-
"""
sudone パッケージの入口となるモジュールです。

api.py や cli.py などから:

    from sudone import solve

と呼び出されることを想定しています。

ここでは、盤面（pandas.DataFrame や 2 次元リスト）を受け取り、
1. 盤面の正規化（ブロックサイズの判定・値の整数化）
2. Grid の構築（候補と空き値テーブルの初期化）
3. テクニック＋backtracking による求解
4. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Dict, Optional

import pandas as pd

from .config import TRACE_TECHNIQUES, USE_HIDDEN_PAIR, USE_NAKED_PAIR, USE_X_WING
from .errors import InvalidDataError
from .grid import Cell, Grid
from .grid.parser import normalize_board
from .logging_utils import get_logger
from .postprocess.render import build_result, render_grid
from .resolution.engine import solve_grid
from .types import Position, SolveStats

__all__ = [
    "Cell",
    "Grid",
    "InvalidDataError",
    "Position",
    "SolveStats",
    "render_grid",
    "solve",
    "solve_grid",
]

logger = get_logger()


def solve(
    board: Any,
    block_size: Optional[int] = None,
    use_naked_pair: bool = USE_NAKED_PAIR,
    use_hidden_pair: bool = USE_HIDDEN_PAIR,
    use_x_wing: bool = USE_X_WING,
    trace_techniques: bool = TRACE_TECHNIQUES,
) -> Dict[str, Any]:
    """
    数独を解くメイン関数。

    Parameters
    ----------
    board : pandas.DataFrame or list of list
        一辺 N^2 の正方形の盤面。空きマスは 0 / None / NaN / "" / "."。
    block_size : int, optional
        ブロックサイズ N。省略時は一辺の長さから求めます。

    Returns
    -------
    dict
        solved_board / solved / shape / block_size / stats を持つ dict。

    Raises
    ------
    InvalidDataError
        盤面データが不正な場合。
    """
    logger.info("=== solve() START ===")

    # 1) 盤面の正規化
    n, values = normalize_board(board, block_size)
    logger.info("Block size: %d (grid %dx%d)", n, n * n, n * n)

    # 2) Grid の構築
    grid = Grid(n)
    grid.load(values)
    empty = len(grid.empty_positions())
    logger.info("Givens: %d, empty cells: %d", len(values) - empty, empty)

    # 3) 求解
    stats = SolveStats()
    solved = solve_grid(
        grid,
        stats,
        use_naked_pair=use_naked_pair,
        use_hidden_pair=use_hidden_pair,
        use_x_wing=use_x_wing,
        trace_techniques=trace_techniques,
    )

    logger.info("--- テクニックごとの進捗回数 ---")
    for name, count in sorted(stats.technique_progress.items()):
        logger.info("  %s: %d", name, count)
    if stats.used_backtracking:
        logger.info("Backtracking used: nodes_visited=%d", stats.backtracking_nodes)

    # 4) 結果の構築
    result = build_result(
        grid,
        solved,
        stats,
        original_df=board if isinstance(board, pd.DataFrame) else None,
    )

    logger.info("=== solve() END (solved=%s) ===", solved)
    return result
