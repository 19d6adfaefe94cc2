# -*- coding: utf-8 -*-
"""
1 本の線について、ヒントを満たす塗り方（combo）を全列挙するモジュールです。

例: ヒント [1, 2]、長さ 5 の場合

    ■□■■□
    ■□□■■
    □■□■■

の 3 通りになります（■ = FILLED, □ = EMPTY）。

列挙は「先頭のブロックの前に空白をいくつ置くか」で再帰的に行います。
同じ再帰レベルでは空白の少ない順に並ぶので、結果の順序は常に同じです。

候補数は最悪の場合（長い線に短いブロックが少しだけ）指数的に増えるため、
求解全体で一番重い処理になります。
"""

from __future__ import annotations

import operator
from math import comb
from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..config import EMPTY, FILLED
from ..types import Clue


def normalize_clue(runs: Iterable) -> Clue:
    """
    ヒントをタプルに正規化します。

    問題サイトによっては空の行を [0] と書くので、0 は取り除きます。
    負の値や、1.5 のような整数でない値は受け付けません（切り捨てはしません）。
    """
    out: List[int] = []
    for r in runs:
        if isinstance(r, str):
            n = int(r.strip())
        elif isinstance(r, float):  # numpy.float64 もここに来る
            if not r.is_integer():
                raise ValueError(f"run length must be an integer: {r!r}")
            n = int(r)
        else:
            n = operator.index(r)
        if n < 0:
            raise ValueError(f"run length must not be negative: {r!r}")
        if n > 0:
            out.append(n)
    return tuple(out)


def min_space(clue: Sequence[int]) -> int:
    """
    ヒントを置くのに最低限必要なマス数を返します。

    ブロック長の合計 + ブロック間に 1 マスずつの空白。
    空のヒントなら 0 です。
    """
    if not clue:
        return 0
    return sum(clue) + len(clue) - 1


def count_combos(clue: Sequence[int], length: int) -> int:
    """
    generate_combos() が返す候補数を組合せの公式で計算します。

    余りのマス（length - min_space）を k 個のブロックの前後 k+1 か所に
    配る方法の数なので C(余り + k, k) になります。
    """
    slack = length - min_space(clue)
    if slack < 0:
        return 0
    k = len(clue)
    return comb(slack + k, k)


def _fill_runs(out: np.ndarray, clue: Clue, k: int, row: int, pos: int) -> None:
    # out[row:row + count_combos(clue[k:], 残りの長さ)] の pos 列目以降に clue[k:] を書き込む。
    # 呼び出し側で min_space(clue[k:]) <= 残りの長さ を保証している
    length = out.shape[1]
    run, rest = clue[k], clue[k + 1:]

    if not rest:
        # 最後のブロックは開始位置ごとに 1 行なので、まとめて書く
        starts = np.arange(pos, length - run + 1)
        cols = np.arange(length)
        block = (cols >= starts[:, None]) & (cols < starts[:, None] + run)
        out[row:row + len(starts)][block] = FILLED
        return

    rest_min = min_space(rest)
    for start in range(pos, length - rest_min - run):
        nxt = start + run + 1  # ブロックの後ろに区切りの空白 1 マス
        n = count_combos(rest, length - nxt)
        out[row:row + n, start:start + run] = FILLED
        _fill_runs(out, clue, k + 1, row, nxt)
        row += n


def generate_combos(clue: Sequence[int], length: int) -> np.ndarray:
    """
    ヒント clue を長さ length の線に置く方法をすべて列挙します。

    Parameters
    ----------
    clue : sequence of int
        正の整数の並び。空なら「全部空白」の 1 通りだけを返します。
    length : int
        線の長さ（反対方向の本数）。

    Returns
    -------
    numpy.ndarray
        shape = (候補数, length) の int8 配列。
        ヒントが収まらない場合は shape = (0, length) の空配列。
    """
    clue = tuple(clue)
    if length < 0:
        raise ValueError(f"length must not be negative: {length}")
    if any(r <= 0 for r in clue):
        raise ValueError(f"run lengths must be positive: {list(clue)}")

    if min_space(clue) > length:
        return np.empty((0, length), dtype=np.int8)

    # 候補数は公式で分かるので、先に配列を確保してその場で塗っていく
    out = np.full((count_combos(clue, length), length), EMPTY, dtype=np.int8)
    if clue:
        _fill_runs(out, clue, 0, 0, 0)
    return out


def extract_runs(line: Sequence[int]) -> Clue:
    """
    塗り済みの線から、連続する FILLED の長さを取り出します。

    generate_combos() の結果に適用すると元のヒントに戻ります。
    """
    runs: List[int] = []
    current = 0
    for cell in line:
        if cell == FILLED:
            current += 1
        elif current:
            runs.append(current)
            current = 0
    if current:
        runs.append(current)
    return tuple(runs)


def clues_from_grid(grid: np.ndarray) -> Tuple[List[Clue], List[Clue]]:
    """
    完成した盤面 (rows, cols) から行ヒント・列ヒントを作ります。

    期待解答の検算や、テスト用の問題作成に使います。
    """
    grid = np.asarray(grid)
    rows = [extract_runs(r) for r in grid]
    cols = [extract_runs(c) for c in grid.T]
    return rows, cols
