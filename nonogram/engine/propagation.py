# -*- coding: utf-8 -*-
"""
行マスクと列マスクを突き合わせる（cross-propagation）モジュールです。

マス (i, j) について、行 i のマスクの j 番目と列 j のマスクの i 番目を比べ、

- 両方 UNKNOWN        : そのまま
- 片方だけ確定        : 確定している方の値をもう片方にコピー
- 両方確定で値が違う  : 矛盾（ContradictionError）

とします。行の情報が列へ、列の情報が行へ伝わるのはここだけです。

この処理は並列フェーズの間の同期点で、単一スレッドで実行します。
結果は行・列どちらの見方でも同じになるので、1 枚の盤面 (rows, cols) として返します。
"""

from __future__ import annotations

import numpy as np

from ..config import UNKNOWN
from ..errors import ContradictionError


def cross_propagate(
    row_masks: np.ndarray,
    col_masks: np.ndarray,
    iteration: int = 0,
) -> np.ndarray:
    """
    行マスクと列マスクを 1 枚の盤面にまとめます。

    Parameters
    ----------
    row_masks : numpy.ndarray
        shape = (rows, cols)。i 行目が行 i のマスク。
    col_masks : numpy.ndarray
        shape = (cols, rows)。j 行目が列 j のマスク。
    iteration : int
        矛盾の報告に使う反復番号。

    Returns
    -------
    numpy.ndarray
        shape = (rows, cols) の突き合わせ後の盤面。

    Raises
    ------
    ContradictionError
        行と列が同じマスに異なる確定値を主張した場合（行優先で最初のマスを報告）。
    """
    by_row = row_masks
    by_col = col_masks.T

    if by_row.shape != by_col.shape:
        raise ValueError(
            f"row masks {by_row.shape} and column masks {col_masks.shape} do not describe the same grid"
        )

    conflict = (by_row != UNKNOWN) & (by_col != UNKNOWN) & (by_row != by_col)
    if conflict.any():
        i, j = (int(x) for x in np.argwhere(conflict)[0])
        raise ContradictionError(
            row=i,
            col=j,
            row_value=int(by_row[i, j]),
            col_value=int(by_col[i, j]),
            iteration=iteration,
        )

    return np.where(by_row == UNKNOWN, by_col, by_row).astype(np.int8)
