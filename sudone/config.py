# -*- coding: utf-8 -*-
"""
sudone 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 使用する解法テクニックの有効/無効
- ログの出力先
- 表示に使う文字
などを簡単に変更できます。
"""

from __future__ import annotations

# ==== プログラム情報 =======================================================

PROGRAM_NAME: str = "sudone"

# ==== 終了コード ===========================================================

# 正常終了
EXIT_SUCCESS: int = 0

# コマンドライン引数が不正
EXIT_INVALID_ARG: int = 1

# ファイルの中身（盤面データ）が不正
EXIT_INVALID_DATA: int = 2

# 盤面に解が存在しない
EXIT_UNSOLVABLE: int = 3

# ==== 盤面関連 =============================================================

# ペア系テクニック（naked pair / hidden pair）で扱う候補の個数
PAIR_SIZE: int = 2

# 受け付けるブロックサイズ N の上限。
# .sud 形式は値を uint32 で持つので理論上はもっと大きくできるが、
# 盤面は (N^2)^2 マスになるため、現実的な範囲に制限しておきます。
MAX_BLOCK_SIZE: int = 8

# ==== テクニック設定 =======================================================

# 各テクニックの有効/無効
# （naked singleton / hidden singleton は常に有効。無効にすると
# 　ほとんどの盤面が backtracking 任せになるため）
USE_NAKED_PAIR: bool = True
USE_HIDDEN_PAIR: bool = True
USE_X_WING: bool = True

# ==== ログ関連 =============================================================

# テクニックごとの進捗をファイルに記録するかどうか
TRACE_TECHNIQUES: bool = False

# トレースログの保存場所
LOG_DIR: str = "logs"
TRACE_LOG_FILE: str = "trace.log"

# ==== 表示関連 =============================================================

DISPLAY_SPACE: str = " "
DISPLAY_EMPTY_VALUE: str = "."
DISPLAY_INTERSECTION: str = "+"
DISPLAY_VERTICAL_LINE: str = "|"
DISPLAY_HORIZONTAL_LINE: str = "-"
