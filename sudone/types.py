# -*- coding: utf-8 -*-
"""
sudone で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

※ マス（Cell）と盤面（Grid）は振る舞いが多いので
  sudone.grid パッケージ側に置いています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


@dataclass(frozen=True)
class Position:
    """
    盤面上の座標 (row, column) を表すクラスです。

    マスそのものは持たず、座標だけを持ちます。
    """

    row: int
    column: int


@dataclass
class Pair:
    """
    naked pair の探索中に使う「候補のペア」です。

    Attributes
    ----------
    candidates : tuple of int
        ペアを構成する 2 つの候補値。
    count : int
        このペアだけを候補に持つマスが、これまでに何個見つかったか。
    """

    candidates: Tuple[int, int]
    count: int = 1


@dataclass
class SolveStats:
    """
    1 回の求解の統計情報です。

    Attributes
    ----------
    technique_progress : dict[str, int]
        テクニック名 → 進捗があった回数。
    sweeps : int
        盤面全体を走査した回数。
    used_backtracking : bool
        backtracking まで使ったかどうか。
    backtracking_nodes : int
        backtracking で値を試した回数。
    """

    technique_progress: Dict[str, int] = field(default_factory=dict)
    sweeps: int = 0
    used_backtracking: bool = False
    backtracking_nodes: int = 0

    def record(self, technique: str) -> None:
        """technique の進捗を 1 回分記録します。"""
        self.technique_progress[technique] = self.technique_progress.get(technique, 0) + 1

    def to_dict(self) -> Dict[str, object]:
        return {
            "technique_progress": dict(self.technique_progress),
            "sweeps": self.sweeps,
            "used_backtracking": self.used_backtracking,
            "backtracking_nodes": self.backtracking_nodes,
        }
