# -*- coding: utf-8 -*-
"""
テクニックを組み合わせて盤面を解くモジュールです。

ざっくり流れ
------------
1. 盤面全体を走査し、各空きマスに安いテクニックから順に適用する
   （naked singleton → hidden singleton → naked pair → hidden pair）
   マスの値が決まった時点で次のマスへ進む
2. 走査で進捗がなければ X-Wing を 1 回試す
3. どちらかで進捗がある限り 1〜2 を繰り返す
4. それでも空きマスが残れば backtracking で埋める
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from ..config import TRACE_TECHNIQUES, USE_HIDDEN_PAIR, USE_NAKED_PAIR, USE_X_WING
from ..grid import Grid
from ..logging_utils import get_logger, get_trace_logger
from ..types import SolveStats
from .backtracking import backtracking
from .techniques import hidden_pair, hidden_singleton, naked_pair, naked_singleton, x_wing

logger = get_logger()

CellTechnique = Callable[[Grid, int, int], bool]


def cell_techniques(
    use_naked_pair: bool = USE_NAKED_PAIR,
    use_hidden_pair: bool = USE_HIDDEN_PAIR,
) -> List[Tuple[str, CellTechnique]]:
    """1 マス単位のテクニックを、安い順に並べて返します。"""
    techniques: List[Tuple[str, CellTechnique]] = [
        ("naked_singleton", naked_singleton),
        ("hidden_singleton", hidden_singleton),
    ]
    if use_naked_pair:
        techniques.append(("naked_pair", naked_pair))
    if use_hidden_pair:
        techniques.append(("hidden_pair", hidden_pair))
    return techniques


def perform_simple_techniques(
    grid: Grid,
    stats: Optional[SolveStats] = None,
    techniques: Optional[List[Tuple[str, CellTechnique]]] = None,
    trace: Optional[logging.Logger] = None,
) -> bool:
    """
    盤面全体を 1 回走査し、各空きマスにテクニックを適用します。

    Returns
    -------
    bool
        どこかで進捗があれば True。
    """
    assert not grid.backtracking_started, "candidates are stale after backtracking"

    if techniques is None:
        techniques = cell_techniques()

    progress = False
    for r in range(grid.size):
        for c in range(grid.size):
            cell = grid.cell_at(r, c)

            for name, technique in techniques:
                if cell.has_value():
                    break
                if technique(grid, r, c):
                    progress = True
                    if stats is not None:
                        stats.record(name)
                    if trace is not None:
                        trace.debug("%s progressed at (%d,%d)", name, r, c)

    return progress


def solve_grid(
    grid: Grid,
    stats: Optional[SolveStats] = None,
    use_naked_pair: bool = USE_NAKED_PAIR,
    use_hidden_pair: bool = USE_HIDDEN_PAIR,
    use_x_wing: bool = USE_X_WING,
    trace_techniques: bool = TRACE_TECHNIQUES,
) -> bool:
    """
    盤面を解きます（盤面はその場で書き換えます）。

    Returns
    -------
    bool
        すべてのマスが埋まれば True。解がなければ False。
    """
    if stats is None:
        stats = SolveStats()

    trace = get_trace_logger() if trace_techniques else None
    techniques = cell_techniques(use_naked_pair, use_hidden_pair)

    while True:
        stats.sweeps += 1
        progress = perform_simple_techniques(grid, stats, techniques, trace)

        # X-Wing は値を直接確定しないので、安いテクニックが止まったときだけ使う
        if not progress and use_x_wing:
            progress = x_wing(grid)
            if progress:
                stats.record("x_wing")
                if trace is not None:
                    trace.debug("x_wing progressed")

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "[engine] sweep=%d progress=%s empty=%d",
                stats.sweeps,
                progress,
                len(grid.empty_positions()),
            )
        if not progress:
            break

    if not grid.empty_positions():
        return grid.is_solved()

    stats.used_backtracking = True
    ctx = backtracking(grid)
    stats.backtracking_nodes = ctx.nodes_visited

    if not ctx.solved:
        logger.warning("Grid has no solution (backtracking exhausted %d nodes).", ctx.nodes_visited)

    return ctx.solved and grid.is_solved()
