# -*- coding: utf-8 -*-
"""
backtracking（深さ優先探索）で残りの空きマスを埋めるモジュールです。

ざっくり流れ
------------
1. 空きマスの座標を配列に並べる
2. cursor 以降の空きマスのうち、置ける値が最も少ないマス（MRV）を
   cursor の位置に入れ替える
3. 置ける値を小さい順に仮置きし、cursor + 1 から再帰的に探索する
4. うまくいけば値をマスに書き込んで成功、だめなら仮置きを戻して次の値へ

このテクニックはマスの候補集合ではなく、空き値テーブルだけを使います。
（再帰のたびに候補集合を同期させるとループが必要になって遅いため）
そのため実行後の候補集合は不整合な状態になります。
backtracking は必ず最後に使うテクニックなので問題ありません。
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import List

from ..grid import Grid
from ..logging_utils import get_logger
from ..types import Position

logger = get_logger()

# 再帰 1 段あたりのフレーム以外に必要な余裕
_RECURSION_HEADROOM = 200


@dataclass
class BacktrackingContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    grid: Grid
    positions: List[Position]
    nodes_visited: int = 0
    solved: bool = False

    @property
    def empty_cell_count(self) -> int:
        return len(self.positions)


def swap_min_cell(ctx: BacktrackingContext, here: int) -> None:
    """
    here 以降の空きマスのうち、置ける値が最も少ないマスを here と入れ替えます。

    同数なら先に見つかったものを優先します。
    """
    grid = ctx.grid
    positions = ctx.positions

    pos = positions[here]
    i_min = here
    count_min = grid.cell_possible_values_count(pos.row, pos.column)

    for i in range(here + 1, len(positions)):
        pos = positions[i]
        count = grid.cell_possible_values_count(pos.row, pos.column)
        if count < count_min:
            i_min = i
            count_min = count

    positions[here], positions[i_min] = positions[i_min], positions[here]


def _search(ctx: BacktrackingContext, cursor: int) -> bool:
    # すべての空きマスを処理した → 解けた
    if cursor == ctx.empty_cell_count:
        return True

    swap_min_cell(ctx, cursor)

    grid = ctx.grid
    pos = ctx.positions[cursor]

    for value in range(1, grid.size + 1):
        if not grid.possible(pos.row, pos.column, value):
            continue

        ctx.nodes_visited += 1

        # value が入っていると仮定して、次のマスへ
        with grid.placed(pos.row, pos.column, value) as placement:
            if _search(ctx, cursor + 1):
                placement.commit()
                return True

    # どの値でも失敗した
    return False


def backtracking(grid: Grid) -> BacktrackingContext:
    """
    backtracking で盤面の空きマスをすべて埋めます。

    Returns
    -------
    BacktrackingContext
        探索に使ったコンテキスト。``solved`` 属性に結果が入ります。
        失敗した場合、盤面の値は呼び出し前のままです。
    """
    grid.backtracking_started = True

    ctx = BacktrackingContext(grid=grid, positions=grid.empty_positions())
    logger.debug("[backtracking] empty cells = %d", ctx.empty_cell_count)

    # 再帰の深さは空きマス数まで
    previous_limit = sys.getrecursionlimit()
    needed = ctx.empty_cell_count + _RECURSION_HEADROOM
    raised = previous_limit < needed
    if raised:
        sys.setrecursionlimit(needed)

    # 上限はプロセス全体で共有されるので、探索が終わったら元に戻す
    try:
        ctx.solved = _search(ctx, 0)
    finally:
        if raised:
            sys.setrecursionlimit(previous_limit)

    logger.debug(
        "[backtracking] solved=%s, nodes_visited=%d",
        ctx.solved,
        ctx.nodes_visited,
    )
    return ctx
