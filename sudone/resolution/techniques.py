# -*- coding: utf-8 -*-
"""
論理的な解法テクニックをまとめたモジュールです。

どのテクニックも「盤面を受け取り、候補を減らすか値を確定し、
進捗があったかどうかを bool で返す」関数になっています。

- naked_singleton  : 候補が 1 つだけのマス
- hidden_singleton : グループ内でその値を置けるマスが 1 つだけ
- naked_pair       : ブロック内に候補 {a, b} だけのマスが 2 つ
- hidden_pair      : グループ内で a, b を置けるマスが同じ 2 つだけ
- x_wing           : 2 列（2 行）で候補の位置が長方形をなす

x_wing 以外は 1 マスを対象にし、盤面全体の走査（engine.py）から呼ばれます。
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from ..config import PAIR_SIZE
from ..grid import Grid
from ..types import Pair, Position

# (r_start, r_end, c_start, c_end) ※ end は含まない
GroupRange = Tuple[int, int, int, int]


def _block_range(grid: Grid, row: int, column: int) -> GroupRange:
    block_row = grid.block_index(row)
    block_col = grid.block_index(column)
    return block_row, block_row + grid.n, block_col, block_col + grid.n


def _row_range(grid: Grid, row: int) -> GroupRange:
    return row, row + 1, 0, grid.size


def _column_range(grid: Grid, column: int) -> GroupRange:
    return 0, grid.size, column, column + 1


# ============================================================
# Naked singleton
# ============================================================

def naked_singleton(grid: Grid, row: int, column: int) -> bool:
    """
    マスの候補が 1 つだけなら、その候補を行・列・ブロックから取り除きます。

    マス自身から取り除くときに値が確定するので（cell_remove_candidate の特例）、
    発動したときは必ず 1 つ以上の進捗があります。
    """
    cell = grid.cell_at(row, column)
    if cell.candidate_count != 1:
        return False

    candidate = cell.first_candidate()
    progress = grid.remove_candidate_from_row(row, candidate)
    progress |= grid.remove_candidate_from_column(column, candidate)
    progress |= grid.remove_candidate_from_block(row, column, candidate)
    return progress


# ============================================================
# Hidden singleton
# ============================================================

def find_unique_candidate(grid: Grid, group: GroupRange) -> Optional[Tuple[int, Position]]:
    """
    グループ内で、候補として 1 マスにしか現れない値を探します。

    Returns
    -------
    (int, Position) or None
        見つかった値と、その値を候補に持つ唯一のマスの座標。
        複数あるときは一番小さい値。
    """
    r_start, r_end, c_start, c_end = group
    counts = [0] * (grid.size + 1)

    for r in range(r_start, r_end):
        for c in range(c_start, c_end):
            for candidate in grid.cell_at(r, c).candidates():
                counts[candidate] += 1

    try:
        candidate = counts.index(1)
    except ValueError:
        return None

    for r in range(r_start, r_end):
        for c in range(c_start, c_end):
            if grid.cell_at(r, c).has_candidate(candidate):
                return candidate, Position(r, c)

    raise AssertionError("unique candidate counted but not found in the group")


def hidden_singleton(grid: Grid, row: int, column: int) -> bool:
    """
    マスの属するブロック → 行 → 列 の順に hidden singleton を探します。

    見つかるたびに値を確定し、探したグループ以外の 2 種類のグループから
    その値を取り除きます。1 回の呼び出しで最大 3 マス確定します。
    """
    progress = False

    # 矛盾した盤面（解なし）では候補が古くなっていることがあるので、
    # 置けない値は確定しない。
    # ブロック
    found = find_unique_candidate(grid, _block_range(grid, row, column))
    if found is not None and grid.possible(found[1].row, found[1].column, found[0]):
        candidate, pos = found
        grid.cell_provide_value(pos.row, pos.column, candidate)
        grid.remove_candidate_from_row(pos.row, candidate)
        grid.remove_candidate_from_column(pos.column, candidate)
        progress = True

    # 行
    found = find_unique_candidate(grid, _row_range(grid, row))
    if found is not None and grid.possible(found[1].row, found[1].column, found[0]):
        candidate, pos = found
        grid.cell_provide_value(pos.row, pos.column, candidate)
        grid.remove_candidate_from_block(pos.row, pos.column, candidate)
        grid.remove_candidate_from_column(pos.column, candidate)
        progress = True

    # 列
    found = find_unique_candidate(grid, _column_range(grid, column))
    if found is not None and grid.possible(found[1].row, found[1].column, found[0]):
        candidate, pos = found
        grid.cell_provide_value(pos.row, pos.column, candidate)
        grid.remove_candidate_from_block(pos.row, pos.column, candidate)
        grid.remove_candidate_from_row(pos.row, candidate)
        progress = True

    return progress


# ============================================================
# Naked pair
# ============================================================

def naked_pair(grid: Grid, row: int, column: int) -> bool:
    """
    マスの候補がちょうど {a, b} で、同じブロックにもう 1 つ
    候補がちょうど {a, b} のマスがあれば、
    ブロック内のその他のマスから a と b を取り除きます。
    """
    target = grid.cell_at(row, column)
    if target.candidate_count != PAIR_SIZE:
        return False

    pair = Pair(candidates=(target.candidate_at(1), target.candidate_at(2)))
    a, b = pair.candidates
    r_start, r_end, c_start, c_end = _block_range(grid, row, column)

    for r in range(r_start, r_end):
        for c in range(c_start, c_end):
            if (r != row or c != column) and grid.cell_at(r, c).has_exactly(a, b):
                pair.count += 1

    if pair.count != PAIR_SIZE:
        return False

    # ペアのマス以外から取り除くので remove_candidate_from_block は使えない
    progress = False
    for r in range(r_start, r_end):
        for c in range(c_start, c_end):
            if grid.cell_at(r, c).has_exactly(a, b):
                continue
            progress |= grid.cell_remove_candidate(r, c, a)
            progress |= grid.cell_remove_candidate(r, c, b)

    return progress


# ============================================================
# Hidden pair
# ============================================================

def find_pair_cells(
    grid: Grid,
    candidates: Tuple[int, int],
    group: GroupRange,
    first: Position,
) -> Optional[List[Position]]:
    """
    グループ内で、候補 a, b を両方持つマスが first を含めてちょうど 2 つかを調べます。

    次の場合はペアとみなしません。
    - a か b の片方だけを持つマスがある（ペアが成り立たない）
    - 2 マスとも候補が {a, b} だけ（取り除けるものがない）
    """
    a, b = candidates
    r_start, r_end, c_start, c_end = group
    pair_cells = [first]
    has_other_candidates = grid.cell_at_pos(first).candidate_count > PAIR_SIZE

    for r in range(r_start, r_end):
        for c in range(c_start, c_end):
            if r == first.row and c == first.column:
                continue

            cell = grid.cell_at(r, c)
            has_a = cell.has_candidate(a)
            has_b = cell.has_candidate(b)

            if has_a and has_b:
                pair_cells.append(Position(r, c))
                if len(pair_cells) > PAIR_SIZE:
                    return None
                has_other_candidates |= cell.candidate_count > PAIR_SIZE
            elif has_a or has_b:
                return None

    if len(pair_cells) == PAIR_SIZE and has_other_candidates:
        return pair_cells
    return None


def find_hidden_pair(
    grid: Grid,
    group: GroupRange,
    first: Position,
) -> Optional[Tuple[List[Position], Tuple[int, int]]]:
    """
    first の候補から作れるペア (a, b) を小さい順に試し、
    グループ内で hidden pair になるものを探します。
    """
    own = grid.cell_at_pos(first).candidates()
    assert len(own) >= PAIR_SIZE

    for i, a in enumerate(own):
        for b in own[i + 1:]:
            cells = find_pair_cells(grid, (a, b), group, first)
            if cells is not None:
                return cells, (a, b)

    return None


def remove_pair_cells_others(
    grid: Grid,
    pair_cells: List[Position],
    candidates: Tuple[int, int],
) -> bool:
    """ペアの各マスから、ペア以外の候補をすべて取り除きます。"""
    progress = False
    for pos in pair_cells:
        for candidate in grid.cell_at_pos(pos).candidates():
            if candidate not in candidates:
                progress |= grid.cell_remove_candidate(pos.row, pos.column, candidate)
    return progress


def hidden_pair(grid: Grid, row: int, column: int) -> bool:
    """
    ブロック・行・列のそれぞれで、対象マスを含む hidden pair を探し、
    見つかればペアの 2 マスをペアの候補だけに絞ります。
    """
    first = Position(row, column)
    target = grid.cell_at(row, column)
    progress = False

    for group in (
        _block_range(grid, row, column),
        _row_range(grid, row),
        _column_range(grid, column),
    ):
        if target.candidate_count < PAIR_SIZE:
            break
        found = find_hidden_pair(grid, group, first)
        if found is not None:
            pair_cells, candidates = found
            progress |= remove_pair_cells_others(grid, pair_cells, candidates)

    return progress


# ============================================================
# X-Wing
# ============================================================

def x_wing(grid: Grid) -> bool:
    """
    盤面全体で X-Wing を探します。

    縦: 2 つの列で、ある候補が現れるマスがどちらも同じ 2 行だけにあるとき、
        その 2 行の他の列からその候補を取り除きます。
    横: 行と列を入れ替えた同じ処理です。

    長方形の頂点になる 4 マスからは取り除きません。
    """
    size = grid.size
    progress = False

    # 縦の X-Wing
    #   A---B
    #   |   |
    #   C---D
    for col_ac in range(size):
        for col_bd in range(col_ac + 1, size):
            for candidate in range(1, size + 1):
                rows = _matching_lines(
                    [grid.cell_at(r, col_ac).has_candidate(candidate) for r in range(size)],
                    [grid.cell_at(r, col_bd).has_candidate(candidate) for r in range(size)],
                )
                if rows is None:
                    continue
                for c in range(size):
                    if c == col_ac or c == col_bd:
                        continue
                    progress |= grid.cell_remove_candidate(rows[0], c, candidate)
                    progress |= grid.cell_remove_candidate(rows[1], c, candidate)

    # 横の X-Wing
    for row_ab in range(size):
        for row_cd in range(row_ab + 1, size):
            for candidate in range(1, size + 1):
                columns = _matching_lines(
                    [grid.cell_at(row_ab, c).has_candidate(candidate) for c in range(size)],
                    [grid.cell_at(row_cd, c).has_candidate(candidate) for c in range(size)],
                )
                if columns is None:
                    continue
                for r in range(size):
                    if r == row_ab or r == row_cd:
                        continue
                    progress |= grid.cell_remove_candidate(r, columns[0], candidate)
                    progress |= grid.cell_remove_candidate(r, columns[1], candidate)

    return progress


def _matching_lines(first: List[bool], second: List[bool]) -> Optional[Tuple[int, int]]:
    """
    2 本の線（列または行）で候補の位置がちょうど同じ 2 箇所なら、その添字を返します。
    """
    if sum(first) != 2 or sum(second) != 2:
        return None
    both = [i for i, (x, y) in enumerate(zip(first, second)) if x and y]
    if len(both) != 2:
        return None
    return both[0], both[1]
