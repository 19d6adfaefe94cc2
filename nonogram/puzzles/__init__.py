# -*- coding: utf-8 -*-
"""
nonogram.puzzles パッケージ

問題データの入出力をまとめたサブパッケージです。ソルバー本体はこれを知りません。
- loader.py  : puzzles.json の読み書きと番号による検索
- records.py : 表形式（1 行 = 1 問、"3,1" のような文字列）からの変換
"""

from .loader import load_puzzles, find_puzzle, load_puzzle, save_puzzles
from .records import parse_run_list, record_to_puzzle, records_to_puzzles, load_records_csv

__all__ = [
    "load_puzzles",
    "find_puzzle",
    "load_puzzle",
    "save_puzzles",
    "parse_run_list",
    "record_to_puzzle",
    "records_to_puzzles",
    "load_records_csv",
]
