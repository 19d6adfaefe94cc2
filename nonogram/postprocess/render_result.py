# -*- coding: utf-8 -*-
"""
求解結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import numpy as np

from ..config import BOX_EMPTY, BOX_FILLED, BOX_UNKNOWN, CELL_WIDTH, FILLED, EMPTY, UNKNOWN
from ..errors import NonogramError
from ..line.mask import is_complete
from ..types import Puzzle, SolveResult

_BOX = {FILLED: BOX_FILLED, EMPTY: BOX_EMPTY, UNKNOWN: BOX_UNKNOWN}


def render_line(mask: np.ndarray, width: int = CELL_WIDTH) -> str:
    """
    1 本分のマスクを文字列にします。1 マスは width 文字分に引き伸ばします。
    """
    return "".join(_BOX[int(v)] * width for v in mask)


def render_grid(grid: np.ndarray, width: int = CELL_WIDTH) -> List[str]:
    """盤面を 1 行 1 文字列のリストにします（進捗表示用）。"""
    return [render_line(row, width) for row in grid]


def encode_solution(grid: np.ndarray) -> Optional[str]:
    """
    盤面を行優先の "0"/"1" 文字列にします。

    未確定マスが残っている場合は None を返します。
    """
    if not is_complete(grid):
        return None
    return "".join("1" if int(v) == FILLED else "0" for v in grid.ravel())


def build_board(grid: np.ndarray) -> List[List[Optional[int]]]:
    """
    JSON で返せる形の盤面を作ります。

    塗り = 1、空白 = 0、未確定 = None。
    """
    return [[None if int(v) == UNKNOWN else int(v) for v in row] for row in grid]


def build_result(
    result: SolveResult,
    puzzle: Optional[Puzzle] = None,
) -> Dict[str, Any]:

    rows, cols = result.grid.shape
    solution = encode_solution(result.grid)

    out: Dict[str, Any] = {
        "status": result.status,
        "iterations": result.iterations,
        "shape": (rows, cols),
        "unknown_cells": result.unknown_cells,
        "board": build_board(result.grid),  # ★ numpy 配列は返さない
        "solution": solution,
        "error": None,
    }

    if isinstance(result.error, NonogramError):
        out["error"] = result.error.to_dict()

    if puzzle is not None:
        out["puzzle"] = {
            "title": puzzle.title,
            "number": puzzle.number,
            "difficulty": puzzle.difficulty,
        }
        if puzzle.solution:
            out["matches_expected"] = solution == puzzle.solution

    return out


def describe_result(result: SolveResult) -> str:
    """結果を 1 行の文章にします（CLI の最後の表示用）。"""
    if result.solved:
        return f"Solved in {result.iterations} steps."
    return f"Not solved ({result.status}) after {result.iterations} steps: {result.error}"
