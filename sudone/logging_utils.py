# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

初学者向けポイント:
- 「ログ」とは、プログラムの実行状況を記録するメッセージのことです。
- どのテクニックで何マス埋まったか、backtracking に何ノード使ったか、
  などを確認するのに役立ちます。
"""

from __future__ import annotations

import logging
import os

from .config import LOG_DIR, TRACE_LOG_FILE

# sudone パッケージ共通で使うロガー名
LOGGER_NAME = "sudone"
TRACE_LOGGER_NAME = "sudone.trace"


def get_logger() -> logging.Logger:
    """
    sudone 全体で共通して使う logger を返します。

    すでに handler（出力先）が設定されていない場合は、
    標準エラー出力に INFO レベルのログを表示するように設定します。
    """
    logger = logging.getLogger(LOGGER_NAME)

    # まだハンドラが設定されていなければ、簡単な設定を行う
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.setLevel(logging.INFO)

    return logger


def get_trace_logger(log_dir: str = LOG_DIR) -> logging.Logger:
    """
    テクニック単位のトレースをファイルに書き出す logger を返します。

    盤面が大きいと行数が非常に多くなるので、
    通常のログ（標準エラー出力）とは分けています。
    """
    logger = logging.getLogger(TRACE_LOGGER_NAME)

    if logger.handlers:
        return logger  # すでに初期化済み

    logger.setLevel(logging.DEBUG)

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, TRACE_LOG_FILE)

    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    fh.setFormatter(formatter)

    logger.addHandler(fh)

    # 親ロガー（sudone）への伝播禁止（標準エラーに出さない）
    logger.propagate = False

    return logger
