# -*- coding: utf-8 -*-
"""
候補集合からマスクを作り、マスクで候補集合を絞り込むモジュールです。

マスク = 残っている候補すべてで値が一致しているマスだけ確定値、
それ以外は UNKNOWN にした配列です。
"""

from __future__ import annotations

import numpy as np

from ..config import UNKNOWN


def build_mask(combos: np.ndarray) -> np.ndarray:
    """
    候補集合 (n, length) の共通部分をとってマスク (length,) を返します。

    先頭の候補を基準にして、どれか 1 つでも値が食い違う位置を UNKNOWN にします。

    候補が空の場合は「情報なし」ではなく矛盾なので、
    全マス UNKNOWN のマスクを返したりはせず ValueError を投げます。
    呼び出し側はその前に EmptyComboSetError として扱ってください。
    """
    if combos.shape[0] == 0:
        raise ValueError("cannot build a mask from an empty combo set")

    first = combos[0]
    agree = np.all(combos == first, axis=0)
    return np.where(agree, first, UNKNOWN).astype(np.int8)


def filter_combos(combos: np.ndarray, mask: np.ndarray) -> np.ndarray:
    """
    マスクの確定マスすべてと一致する候補だけを残します。

    UNKNOWN の位置は何も制約しません。戻り値は必ず入力の部分集合です。
    """
    known = mask != UNKNOWN
    if not known.any():
        return combos
    keep = np.all(combos[:, known] == mask[known], axis=1)
    return combos[keep]


def count_unknown(mask: np.ndarray) -> int:
    return int(np.count_nonzero(mask == UNKNOWN))


def is_complete(mask: np.ndarray) -> bool:
    """UNKNOWN が 1 つも残っていなければ True。"""
    return count_unknown(mask) == 0
