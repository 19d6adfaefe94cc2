# -*- coding: utf-8 -*-
"""
nonogram.line パッケージ

1 本の線（行または列）だけで完結する処理をまとめています。
- combos.py : ヒントから候補（combo）を全列挙
- mask.py   : 候補の共通部分（マスク）の計算と、マスクによる候補のフィルタ
"""

from .combos import (
    generate_combos,
    min_space,
    count_combos,
    extract_runs,
    clues_from_grid,
    normalize_clue,
)
from .mask import build_mask, filter_combos, count_unknown, is_complete

__all__ = [
    "generate_combos",
    "min_space",
    "count_combos",
    "extract_runs",
    "clues_from_grid",
    "normalize_clue",
    "build_mask",
    "filter_combos",
    "count_unknown",
    "is_complete",
]
