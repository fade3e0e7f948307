# -*- coding: utf-8 -*-
"""
盤面の 1 マスを表すモジュールです。

1 マスは次のどちらかの状態を持ちます。
- 値が確定している（value = 1..N^2）
- 値が未確定で、候補値の集合を持っている（value = 0）

候補値の集合は整数のビット集合で表します。
（ビット v が立っている ⇔ v が候補）
候補数は集合を数え直さずに、追加・削除のたびに差分で更新します。
"""

from __future__ import annotations

from typing import List


class Cell:
    """
    盤面の 1 マスです。

    値や候補を書き換えるメソッドは Grid からだけ呼ぶ想定です。
    （値の確定は Grid 側の「空き値テーブル」の更新と必ずセットで行うため）
    """

    __slots__ = ("_value", "_candidates", "_candidate_count")

    def __init__(self, value: int = 0) -> None:
        self._value = value
        self._candidates = 0
        self._candidate_count = 0

    @property
    def value(self) -> int:
        """確定値。未確定なら 0。"""
        return self._value

    @property
    def candidate_count(self) -> int:
        return self._candidate_count

    @property
    def candidate_mask(self) -> int:
        """候補のビット集合（ビット v ⇔ 候補 v）。"""
        return self._candidates

    def has_value(self) -> bool:
        return self._value != 0

    def has_candidate(self, candidate: int) -> bool:
        return (self._candidates >> candidate) & 1 == 1

    def candidates(self) -> List[int]:
        """候補値を小さい順に返します。"""
        out: List[int] = []
        mask = self._candidates
        while mask:
            lsb = mask & -mask
            out.append(lsb.bit_length() - 1)
            mask ^= lsb
        return out

    def first_candidate(self) -> int:
        """最も小さい候補値。候補がなければ 0。"""
        mask = self._candidates
        return (mask & -mask).bit_length() - 1 if mask else 0

    def candidate_at(self, n: int) -> int:
        """
        n 番目（1 始まり）に小さい候補値を返します。

        例: 候補が {2, 5, 7} のとき candidate_at(2) == 5
        """
        assert 1 <= n <= self._candidate_count
        return self.candidates()[n - 1]

    def has_exactly(self, first: int, second: int) -> bool:
        """候補がちょうど {first, second} の 2 つかどうか。"""
        return (
            self._candidate_count == 2
            and self.has_candidate(first)
            and self.has_candidate(second)
        )

    # ---- 以下は Grid からだけ呼ぶ -----------------------------------------

    def add_candidate(self, candidate: int) -> None:
        bit = 1 << candidate
        if not self._candidates & bit:
            self._candidates |= bit
            self._candidate_count += 1

    def discard_candidate(self, candidate: int) -> bool:
        """
        候補を 1 つ取り除きます。

        Returns
        -------
        bool
            候補が存在して取り除いた場合 True。
        """
        bit = 1 << candidate
        if self._candidates & bit:
            self._candidates ^= bit
            self._candidate_count -= 1
            return True
        return False

    def set_value(self, value: int) -> None:
        """値を確定し、候補をすべて消します。"""
        self._value = value
        self._candidates = 0
        self._candidate_count = 0
