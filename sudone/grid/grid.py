# -*- coding: utf-8 -*-
"""
数独の盤面（Grid）を表すモジュールです。

盤面はブロックサイズ N で決まり、一辺は N^2 マスです。
（N=3 なら普通の 9x9 数独）

盤面は次のものを持ちます。
- cells : 行優先で並べた Cell のリスト（長さ (N^2)^2）
- 3 つの「空き値テーブル」（行・列・ブロックごと）

空き値テーブルは「その行/列/ブロックに値 v がまだ置かれていないか」を
True/False で持つ numpy の bool 配列です。
これにより「このマスに v を置けるか」を O(1) で判定できます。

ただしその代わりに、テーブルとマスの値がずれないようにする必要があります。
テーブルを書き換えるのは :meth:`Grid.mark_value_free` だけで、
値を確定する処理は必ずこのメソッドを同時に呼びます。
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from ..errors import InvalidDataError
from ..types import Position
from .cell import Cell


class Placement:
    """
    backtracking 用の「仮置き」です。

    with 文に入るときに値を使用済みにし、抜けるときに空きへ戻します。
    :meth:`commit` を呼んだ場合だけ、抜けても戻さずにマスへ値を書き込みます。
    """

    __slots__ = ("grid", "row", "column", "value", "committed")

    def __init__(self, grid: "Grid", row: int, column: int, value: int) -> None:
        self.grid = grid
        self.row = row
        self.column = column
        self.value = value
        self.committed = False

    def __enter__(self) -> "Placement":
        self.grid.mark_value_free(False, self.row, self.column, self.value)
        return self

    def commit(self) -> None:
        self.grid.cell_at(self.row, self.column).set_value(self.value)
        self.committed = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self.committed:
            self.grid.mark_value_free(True, self.row, self.column, self.value)
        return False


class Grid:
    """
    N^2 x N^2 の数独盤面です。

    作成直後は cells も空き値テーブルも持たず、
    :meth:`load` で初めて確保・初期化されます。
    """

    def __init__(self, n: int) -> None:
        self.n = n
        self._size = n * n
        self.cells: Optional[List[Cell]] = None
        self._is_row_free: Optional[np.ndarray] = None
        self._is_column_free: Optional[np.ndarray] = None
        self._is_block_free: Optional[np.ndarray] = None
        # backtracking 開始後は候補集合が信用できなくなる
        self.backtracking_started = False

    # ------------------------------------------------------------------
    # 構築・解放
    # ------------------------------------------------------------------

    def load(self, values: Sequence[int]) -> None:
        """
        行優先の値の並びから盤面を構築します。

        Parameters
        ----------
        values : sequence of int
            長さ (N^2)^2。0 は空きマス、1..N^2 はヒント。

        Raises
        ------
        InvalidDataError
            長さが違う、値が範囲外、ヒント同士が衝突している場合。
            このとき盤面は解放された状態に戻ります。
        """
        size = self._size
        if len(values) != size * size:
            raise InvalidDataError(
                f"Expected {size * size} values for block size {self.n}, got {len(values)}."
            )

        self.cells = [Cell() for _ in range(size * size)]
        self._is_row_free = np.ones((size, size + 1), dtype=bool)
        self._is_column_free = np.ones((size, size + 1), dtype=bool)
        self._is_block_free = np.ones((self.n, self.n, size + 1), dtype=bool)
        self.backtracking_started = False

        # 1) ヒントを置いて、テーブルを使用済みにする
        for r in range(size):
            for c in range(size):
                value = int(values[r * size + c])
                if value == 0:
                    continue
                if value < 0 or value > size:
                    self.free()
                    raise InvalidDataError(
                        f"Invalid value at ({r + 1},{c + 1}): {value} (allowed: 0..{size})."
                    )
                if not self.possible(r, c, value):
                    self.free()
                    raise InvalidDataError(
                        f"Conflict: value {value} appears twice in a row/column/block (cell {r + 1},{c + 1})."
                    )
                self.cells[r * size + c].set_value(value)
                self.mark_value_free(False, r, c, value)

        # 2) 空きマスの候補を計算する
        for r in range(size):
            for c in range(size):
                cell = self.cells[r * size + c]
                if cell.has_value():
                    continue
                free = self._free_values(r, c)
                for candidate in np.flatnonzero(free):
                    cell.add_candidate(int(candidate))

    def free(self) -> None:
        """盤面のバッファを手放し、load 前の状態に戻します。"""
        self.cells = None
        self._is_row_free = None
        self._is_column_free = None
        self._is_block_free = None

    @property
    def loaded(self) -> bool:
        return self.cells is not None

    # ------------------------------------------------------------------
    # 参照
    # ------------------------------------------------------------------

    @property
    def size(self) -> int:
        """一辺のマス数 (N^2)。"""
        return self._size

    def cell_at(self, row: int, column: int) -> Cell:
        return self.cells[row * self._size + column]

    def cell_at_pos(self, pos: Position) -> Cell:
        return self.cells[pos.row * self._size + pos.column]

    def block_index(self, index: int) -> int:
        """
        index（行番号または列番号）を含むブロックの、先頭の行/列番号を返します。
        """
        return index - index % self.n

    def possible(self, row: int, column: int, value: int) -> bool:
        """
        value を (row, column) に置けるかどうかを返します。候補は見ません。

        数独のルール上、同じ行・列・ブロックにまだ value がなければ置けます。
        参照順は 列 → 行 → ブロック（計測で一番速かった順）。
        """
        n = self.n
        return bool(
            self._is_column_free[column, value]
            and self._is_row_free[row, value]
            and self._is_block_free[row // n, column // n, value]
        )

    def _free_values(self, row: int, column: int) -> np.ndarray:
        """(row, column) に置ける値を True にした bool 配列（添字 0 は常に False）。"""
        n = self.n
        free = (
            self._is_column_free[column]
            & self._is_row_free[row]
            & self._is_block_free[row // n, column // n]
        )
        free[0] = False
        return free

    def cell_possible_values_count(self, row: int, column: int) -> int:
        """
        possible() が True になる値の個数を返します。

        backtracking のマス選び（MRV）専用です。
        マスの候補数（candidate_count）とは別物なので注意。
        """
        return int(np.count_nonzero(self._free_values(row, column)))

    def values(self) -> List[int]:
        """行優先のマスの値のリスト（0 = 未確定）。"""
        return [cell.value for cell in self.cells]

    def to_array(self) -> np.ndarray:
        """マスの値を (N^2, N^2) の numpy 配列で返します。"""
        return np.array(self.values(), dtype=np.int64).reshape(self._size, self._size)

    def empty_positions(self) -> List[Position]:
        size = self._size
        return [
            Position(r, c)
            for r in range(size)
            for c in range(size)
            if not self.cells[r * size + c].has_value()
        ]

    def is_solved(self) -> bool:
        """全マスが埋まり、どの行・列・ブロックにも 1..N^2 がちょうど 1 回ずつあるか。"""
        arr = self.to_array()
        n, size = self.n, self._size
        expected = np.arange(1, size + 1)

        if not np.array_equal(np.sort(arr, axis=1), np.tile(expected, (size, 1))):
            return False
        if not np.array_equal(np.sort(arr, axis=0), np.tile(expected[:, None], (1, size))):
            return False

        blocks = arr.reshape(n, n, n, n).swapaxes(1, 2).reshape(size, size)
        return bool(np.array_equal(np.sort(blocks, axis=1), np.tile(expected, (size, 1))))

    # ------------------------------------------------------------------
    # 更新
    # ------------------------------------------------------------------

    def mark_value_free(self, is_free: bool, row: int, column: int, value: int) -> None:
        """
        value が (row, column) の行・列・ブロックで空いているかどうかを設定します。

        空き値テーブルを書き換える唯一の方法です。
        False にした直後に（他の値を置かずに）True に戻せば、元の状態に戻ります。
        """
        assert 0 <= row < self._size
        assert 0 <= column < self._size
        assert 1 <= value <= self._size
        n = self.n
        self._is_column_free[column, value] = is_free
        self._is_row_free[row, value] = is_free
        self._is_block_free[row // n, column // n, value] = is_free

    def placed(self, row: int, column: int, value: int) -> Placement:
        """backtracking 用の仮置きを返します（with 文で使う）。"""
        return Placement(self, row, column, value)

    def cell_remove_candidate(self, row: int, column: int, candidate: int) -> bool:
        """
        マスから候補を 1 つ取り除きます。

        ただし、マスの候補が 1 つだけで、それが candidate の場合は、
        取り除く代わりにその候補をマスの値として確定します。
        （「最後の候補を消す」ことと「値を確定する」ことを同じ操作にしている）

        Returns
        -------
        bool
            候補を取り除いた（または確定した）場合 True。
        """
        assert 1 <= candidate <= self._size
        cell = self.cells[row * self._size + column]

        if cell.candidate_count == 1 and cell.first_candidate() == candidate:
            cell.set_value(candidate)
            self.mark_value_free(False, row, column, candidate)
            return True

        return cell.discard_candidate(candidate)

    def cell_provide_value(self, row: int, column: int, value: int) -> None:
        """
        マスの値を確定し、候補をすべて消します。

        事前条件: possible(row, column, value) が True で、マスが未確定。
        """
        assert self.possible(row, column, value)
        assert 1 <= value <= self._size
        cell = self.cells[row * self._size + column]
        assert not cell.has_value()

        cell.set_value(value)
        self.mark_value_free(False, row, column, value)

    def remove_candidate_from_row(self, row: int, candidate: int) -> bool:
        """行のすべてのマスから候補を取り除きます。進捗があれば True。"""
        progress = False
        for c in range(self._size):
            progress |= self.cell_remove_candidate(row, c, candidate)
        return progress

    def remove_candidate_from_column(self, column: int, candidate: int) -> bool:
        """列のすべてのマスから候補を取り除きます。進捗があれば True。"""
        progress = False
        for r in range(self._size):
            progress |= self.cell_remove_candidate(r, column, candidate)
        return progress

    def remove_candidate_from_block(self, row: int, column: int, candidate: int) -> bool:
        """(row, column) を含むブロックのすべてのマスから候補を取り除きます。"""
        progress = False
        block_row = self.block_index(row)
        block_col = self.block_index(column)

        for r in range(block_row, block_row + self.n):
            for c in range(block_col, block_col + self.n):
                progress |= self.cell_remove_candidate(r, c, candidate)

        return progress
