# -*- coding: utf-8 -*-
"""
sudone.io パッケージ

盤面ファイルの読み書きをまとめています。
- sud_format.py : .sud バイナリ形式
"""
