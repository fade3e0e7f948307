# -*- coding: utf-8 -*-
"""
sudone で使う例外クラスです。
"""

from __future__ import annotations


class InvalidDataError(ValueError):
    """
    盤面データが不正な場合に送出される例外です。

    - マス数が (N^2)^2 と一致しない
    - 値が 0..N^2 の範囲外
    - 整数として解釈できない

    などの場合に使います。盤面の構築はこの例外で中断され、
    呼び出し側はその盤面を使ってはいけません。
    """
