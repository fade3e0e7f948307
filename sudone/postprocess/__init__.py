# -*- coding: utf-8 -*-
"""
sudone.postprocess パッケージ

求解結果の表示・整形をまとめています。
- render.py : テキスト表示と結果 dict の構築
"""
