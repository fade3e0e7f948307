# -*- coding: utf-8 -*-
"""
解いた盤面をもとに表示用の情報を構築するモジュールです。

- render_grid  : 罫線付きのテキスト表示
- build_result : API などで返す dict
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, TextIO

import pandas as pd

from ..config import (
    DISPLAY_EMPTY_VALUE, DISPLAY_HORIZONTAL_LINE, DISPLAY_INTERSECTION,
    DISPLAY_SPACE, DISPLAY_VERTICAL_LINE,
)
from ..grid import Grid
from ..types import SolveStats


def _separation_line(n: int, padding: int) -> str:
    # 値の左右に 1 文字ずつ余白があるので +2
    segment = DISPLAY_HORIZONTAL_LINE * (n * (padding + 2))
    return DISPLAY_INTERSECTION + (segment + DISPLAY_INTERSECTION) * n


def _format_value(value: int, padding: int) -> str:
    text = DISPLAY_EMPTY_VALUE if value == 0 else str(value)
    return DISPLAY_SPACE + text.rjust(padding) + DISPLAY_SPACE


def _row_line(grid: Grid, row: int, padding: int) -> str:
    parts: List[str] = [DISPLAY_VERTICAL_LINE]
    for block in range(grid.n):
        for block_col in range(grid.n):
            parts.append(_format_value(grid.cell_at(row, block * grid.n + block_col).value, padding))
        parts.append(DISPLAY_VERTICAL_LINE)
    return "".join(parts)


def render_grid(grid: Grid) -> str:
    """
    盤面を罫線付きのテキストにします。

    例（N=2、途中まで）::

        +------+------+
        | 1  . | .  . |
        | .  . | .  2 |
        +------+------+
    """
    padding = len(str(grid.size))
    separator = _separation_line(grid.n, padding)

    lines: List[str] = []
    for block in range(grid.n):
        lines.append(separator)
        for block_row in range(grid.n):
            lines.append(_row_line(grid, block * grid.n + block_row, padding))
    lines.append(separator)

    return "\n".join(lines) + "\n"


def print_grid(grid: Grid, out: TextIO) -> None:
    out.write(render_grid(grid))


def build_result(
    grid: Grid,
    solved: bool,
    stats: Optional[SolveStats] = None,
    original_df: Optional[pd.DataFrame] = None,
) -> Dict[str, Any]:
    """
    API などで返す結果の dict を作ります。

    original_df が与えられた場合は、その index / columns を引き継いだ
    DataFrame を経由して盤面を作ります。
    """
    values = grid.to_array()

    if original_df is not None:
        solved_df = pd.DataFrame(values, index=original_df.index, columns=original_df.columns)
    else:
        solved_df = pd.DataFrame(values)

    return {
        "solved_board": solved_df.values.tolist(),  # DataFrameは返さない
        "solved": bool(solved),
        "shape": (grid.size, grid.size),
        "block_size": grid.n,
        "stats": (stats or SolveStats()).to_dict(),
    }
