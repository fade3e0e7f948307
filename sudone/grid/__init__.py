# -*- coding: utf-8 -*-
"""
sudone.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- cell.py   : 1 マス（確定値 or 候補集合）
- grid.py   : 盤面本体と空き値テーブル
- parser.py : DataFrame などから内部表現への変換
"""

from .cell import Cell
from .grid import Grid, Placement

__all__ = ["Cell", "Grid", "Placement"]
