# -*- coding: utf-8 -*-
"""
制約伝播の固定点ループを回すモジュールです。

状態遷移
--------
    初期化 → 反復 → { 解けた | 矛盾 | 停滞 }（外部からの中断もあり）

1 反復の流れ
------------
1. 行・列それぞれの候補集合からマスクを作る（並列）
2. 行マスクと列マスクを突き合わせる（同期点、矛盾ならここで終了）
3. 突き合わせ後の盤面で各線の候補を絞る（並列、空になったら矛盾）
4. 未確定マスが無ければ解けた
5. 前回と盤面が変わっていなければ、伝播だけではこれ以上進まない（停滞）

候補集合は減る一方で、盤面のマスも UNKNOWN から確定値へしか動かないので、
進展のある反復ごとに最低 1 マスは確定します。
よって反復回数は「行数 × 列数」で抑えられます。
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

import numpy as np

from ..config import GENERATE_BACKEND_PREFER, MAX_ITERATIONS, N_JOBS, UNKNOWN
from ..errors import (
    ContradictionError,
    EmptyComboSetError,
    InfeasibleClueError,
    SolveCancelled,
    StalledError,
)
from ..line.combos import generate_combos
from ..line.mask import build_mask, count_unknown, filter_combos, is_complete
from ..logging_utils import get_logger
from ..types import (
    STATUS_CANCELLED,
    STATUS_CONTRADICTION,
    STATUS_SOLVED,
    STATUS_STALLED,
    Clue,
    SolveResult,
    StepSnapshot,
)
from .parallel import map_lines
from .propagation import cross_propagate

logger = get_logger()

StepCallback = Callable[[StepSnapshot], None]


@dataclass
class EngineState:
    """
    1 回の求解の間、エンジンが持ち続ける状態です。

    row_combos[i] は行 i の残り候補 (n, cols)、
    col_combos[j] は列 j の残り候補 (n, rows)。
    grid は直近の突き合わせ後の盤面です。
    """

    row_clues: List[Clue]
    col_clues: List[Clue]
    row_combos: List[np.ndarray]
    col_combos: List[np.ndarray]
    grid: np.ndarray
    iteration: int = 0

    @property
    def n_rows(self) -> int:
        return len(self.row_clues)

    @property
    def n_cols(self) -> int:
        return len(self.col_clues)


def _generate_line(axis: str, index: int, clue: Clue, length: int) -> np.ndarray:
    combos = generate_combos(clue, length)
    if combos.shape[0] == 0:
        raise InfeasibleClueError(axis, index, clue, length)
    return combos


def _filter_line(
    axis: str, index: int, combos: np.ndarray, mask: np.ndarray, iteration: int
) -> np.ndarray:
    kept = filter_combos(combos, mask)
    if kept.shape[0] == 0:
        raise EmptyComboSetError(axis, index, iteration)
    return kept


def _stack(masks: Sequence[np.ndarray], n_lines: int, length: int) -> np.ndarray:
    # 0 本や長さ 0 の線でも形が崩れないように reshape する
    return np.array(masks, dtype=np.int8).reshape(n_lines, length)


def initialize(
    row_clues: Sequence[Clue],
    col_clues: Sequence[Clue],
    n_jobs: int = N_JOBS,
) -> EngineState:
    """
    全ての行・列について候補集合を作ります。

    行の長さは列の本数、列の長さは行の本数です。
    どれか 1 本でもヒントが収まらなければ InfeasibleClueError を投げます。
    """
    n_rows, n_cols = len(row_clues), len(col_clues)

    tasks = [("row", i, tuple(clue), n_cols) for i, clue in enumerate(row_clues)]
    tasks += [("col", j, tuple(clue), n_rows) for j, clue in enumerate(col_clues)]
    combos = map_lines(_generate_line, tasks, n_jobs, prefer=GENERATE_BACKEND_PREFER)

    state = EngineState(
        row_clues=[tuple(c) for c in row_clues],
        col_clues=[tuple(c) for c in col_clues],
        row_combos=combos[:n_rows],
        col_combos=combos[n_rows:],
        grid=np.full((n_rows, n_cols), UNKNOWN, dtype=np.int8),
    )
    logger.info(
        "Initialized %dx%d grid: row combos=%d, col combos=%d",
        n_rows,
        n_cols,
        sum(c.shape[0] for c in state.row_combos),
        sum(c.shape[0] for c in state.col_combos),
    )
    return state


def run_iteration(state: EngineState, n_jobs: int = N_JOBS) -> StepSnapshot:
    """
    伝播を 1 反復だけ進め、state を更新してその記録を返します。

    矛盾を見つけた場合は ContradictionError / EmptyComboSetError を投げます。
    その場合 state.grid は前の反復のままです。
    """
    state.iteration += 1
    it = state.iteration
    n_rows, n_cols = state.n_rows, state.n_cols

    # 1) マスク（行と列を同時に）
    masks = map_lines(build_mask, [(c,) for c in state.row_combos + state.col_combos], n_jobs)
    row_masks = _stack(masks[:n_rows], n_rows, n_cols)
    col_masks = _stack(masks[n_rows:], n_cols, n_rows)

    # 2) 突き合わせ（同期点）
    grid = cross_propagate(row_masks, col_masks, iteration=it)

    # 3) フィルタ（行と列を同時に）
    tasks = [("row", i, state.row_combos[i], grid[i, :], it) for i in range(n_rows)]
    tasks += [("col", j, state.col_combos[j], grid[:, j], it) for j in range(n_cols)]
    filtered = map_lines(_filter_line, tasks, n_jobs)

    state.row_combos = filtered[:n_rows]
    state.col_combos = filtered[n_rows:]
    state.grid = grid

    return StepSnapshot(
        iteration=it,
        grid=grid,
        unknown_cells=count_unknown(grid),
        row_combo_counts=[c.shape[0] for c in state.row_combos],
        col_combo_counts=[c.shape[0] for c in state.col_combos],
    )


def propagate(
    row_clues: Sequence[Clue],
    col_clues: Sequence[Clue],
    n_jobs: int = N_JOBS,
    max_iterations: Optional[int] = MAX_ITERATIONS,
    stop_event: Optional[threading.Event] = None,
    on_step: Optional[StepCallback] = None,
) -> SolveResult:
    """
    固定点に達するまで伝播を繰り返し、結果を SolveResult で返します。

    Parameters
    ----------
    row_clues, col_clues : sequence of Clue
        正規化済みの行ヒント・列ヒント。
    n_jobs : int
        joblib のワーカー数。
    max_iterations : int or None
        反復回数の上限。None なら 行数 × 列数 + 1。
    stop_event : threading.Event or None
        セットされると、次の反復に入る前に中断します。
    on_step : callable or None
        各反復の後に StepSnapshot を受け取るコールバック（進捗表示用）。

    矛盾・停滞・中断はすべて SolveResult.status と error で表現し、
    例外としては外に出しません。
    """
    n_rows, n_cols = len(row_clues), len(col_clues)

    try:
        state = initialize(row_clues, col_clues, n_jobs=n_jobs)
    except InfeasibleClueError as e:
        logger.warning("Infeasible clue: %s", e)
        return SolveResult(
            status=STATUS_CONTRADICTION,
            grid=np.full((n_rows, n_cols), UNKNOWN, dtype=np.int8),
            iterations=0,
            error=e,
        )

    limit = max_iterations if max_iterations is not None else n_rows * n_cols + 1
    history: List[StepSnapshot] = []
    previous = state.grid

    try:
        while True:
            if stop_event is not None and stop_event.is_set():
                raise SolveCancelled(state.iteration)
            if state.iteration >= limit:
                raise StalledError(
                    count_unknown(state.grid),
                    state.iteration,
                    reason="iteration limit",
                )

            snapshot = run_iteration(state, n_jobs=n_jobs)
            history.append(snapshot)
            logger.info(
                "[step %d] unknown=%d, combos=%d",
                snapshot.iteration,
                snapshot.unknown_cells,
                snapshot.total_combos,
            )
            if on_step is not None:
                on_step(snapshot)

            if is_complete(state.grid):
                logger.info("Solved in %d steps.", state.iteration)
                return SolveResult(
                    status=STATUS_SOLVED,
                    grid=state.grid,
                    iterations=state.iteration,
                    history=history,
                )

            if np.array_equal(state.grid, previous):
                raise StalledError(snapshot.unknown_cells, state.iteration)
            previous = state.grid

    except (ContradictionError, EmptyComboSetError) as e:
        logger.warning("Contradiction at step %d: %s", e.iteration, e)
        status = STATUS_CONTRADICTION
        error = e
    except StalledError as e:
        logger.info("Stalled at step %d: %s", e.iteration, e)
        status = STATUS_STALLED
        error = e
    except SolveCancelled as e:
        logger.info("Cancelled after step %d", e.iteration)
        status = STATUS_CANCELLED
        error = e

    return SolveResult(
        status=status,
        grid=state.grid,
        iterations=state.iteration,
        error=error,
        history=history,
    )
