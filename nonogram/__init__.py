# -*- coding: utf-8 -*-
"""
nonogram パッケージの入口となるモジュールです。

cli.py や api_proto/local_api.py などから:

    from nonogram import solve, solve_puzzle

と呼び出されることを想定しています。

ここでは、行ヒント・列ヒントを受け取り、
1. ヒントの正規化
2. 各行・各列の候補の全列挙（並列）
3. マスク作成 → 行と列の突き合わせ → 候補のフィルタ の繰り返し
4. 解けた / 矛盾 / 停滞 の判定
を順番に呼び出します。盤面の表示は呼び出し側の仕事です。
"""

from __future__ import annotations

import threading
from typing import Iterable, Optional, Sequence

from .config import MAX_ITERATIONS, N_JOBS
from .engine.loop import StepCallback, propagate
from .line.combos import normalize_clue
from .logging_utils import get_logger
from .types import Puzzle, SolveResult

logger = get_logger()

__version__ = "0.1.0"


def solve(
    rows: Sequence[Iterable[int]],
    cols: Sequence[Iterable[int]],
    n_jobs: int = N_JOBS,
    max_iterations: Optional[int] = MAX_ITERATIONS,
    stop_event: Optional[threading.Event] = None,
    on_step: Optional[StepCallback] = None,
) -> SolveResult:
    """
    ノノグラムを制約伝播だけで解くメイン関数。

    推測（バックトラック）はしません。伝播だけで埋まらなければ
    status="stalled" の結果を返します。
    """
    logger.info("=== solve() START ===")
    row_clues = [normalize_clue(r) for r in rows]
    col_clues = [normalize_clue(c) for c in cols]
    logger.info("Grid shape: (%d, %d)", len(row_clues), len(col_clues))

    result = propagate(
        row_clues,
        col_clues,
        n_jobs=n_jobs,
        max_iterations=max_iterations,
        stop_event=stop_event,
        on_step=on_step,
    )

    logger.info("=== solve() END: %s ===", result.status)
    return result


def solve_puzzle(puzzle: Puzzle, **kwargs) -> SolveResult:
    """Puzzle をそのまま解きます。キーワード引数は solve() に渡します。"""
    logger.info("Puzzle #%d %s (%s)", puzzle.number, puzzle.title, puzzle.difficulty)
    return solve(puzzle.rows, puzzle.cols, **kwargs)


__all__ = ["solve", "solve_puzzle", "Puzzle", "SolveResult"]
