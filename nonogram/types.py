# -*- coding: utf-8 -*-
"""
nonogram solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。

セルの値そのものは numpy.int8 の配列で扱います（config.FILLED など）。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

import numpy as np


# 1 本の行（または列）のヒント。正の整数（連続する塗りマスの長さ）の並び。
Clue = Tuple[int, ...]

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]

# 解いた結果の状態
STATUS_SOLVED = "solved"
STATUS_CONTRADICTION = "contradiction"
STATUS_STALLED = "stalled"
STATUS_CANCELLED = "cancelled"


@dataclass
class Puzzle:
    """
    1 問分の問題データを表すクラスです。

    Attributes
    ----------
    title : str
        問題のタイトル。
    number : int
        問題番号（nonograms.org の番号など）。
    rows : list of Clue
        上の行から順に並べた行ヒント。
    cols : list of Clue
        左の列から順に並べた列ヒント。
    solution : str
        期待される解答（行優先の "0"/"1" 文字列）。無ければ空文字。
    difficulty : str
        難易度の表記。ソルバー本体は使いません。
    """

    title: str
    number: int
    rows: List[Clue]
    cols: List[Clue]
    solution: str = ""
    difficulty: str = ""

    @property
    def shape(self) -> Tuple[int, int]:
        """盤面サイズ (行数, 列数) を返します。"""
        return len(self.rows), len(self.cols)


@dataclass
class StepSnapshot:
    """
    伝播ループ 1 反復分の記録です。

    Attributes
    ----------
    iteration : int
        1 から始まる反復番号。
    grid : numpy.ndarray
        行・列を突き合わせた後の盤面 (rows, cols)。未確定マスは UNKNOWN。
    unknown_cells : int
        残っている未確定マスの数。
    row_combo_counts / col_combo_counts : list of int
        フィルタ後に各行・各列に残っている候補数。
    """

    iteration: int
    grid: np.ndarray
    unknown_cells: int
    row_combo_counts: List[int]
    col_combo_counts: List[int]

    @property
    def total_combos(self) -> int:
        return sum(self.row_combo_counts) + sum(self.col_combo_counts)


@dataclass
class SolveResult:
    """
    1 回の求解の結果です。

    status は "solved" / "contradiction" / "stalled" / "cancelled" のいずれか。
    解けなかった場合は error に理由（NonogramError）が入ります。
    """

    status: str
    grid: np.ndarray
    iterations: int
    error: Optional[Exception] = None
    history: List[StepSnapshot] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.status == STATUS_SOLVED

    @property
    def unknown_cells(self) -> int:
        from .line.mask import count_unknown  # 循環 import を避ける

        return count_unknown(self.grid)
