# -*- coding: utf-8 -*-
"""
sudone.resolution パッケージ

盤面を解く処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- techniques.py   : 論理的な解法テクニック（singleton / pair / X-Wing）
- backtracking.py : 最後の手段としての深さ優先探索
- engine.py       : テクニックを繰り返し適用し、最後に backtracking を呼ぶ
"""
