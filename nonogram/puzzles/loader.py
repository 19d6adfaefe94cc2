# -*- coding: utf-8 -*-
"""
問題 JSON を読み込むモジュールです。

今回の仕様：
- JSON はレコードの配列
- 各レコードに title, number, solution, difficulty, rows, cols がある
  （rows / cols は「ブロック長のリスト」のリスト）

例::

    [{"title": "heron", "number": 3541, "difficulty": "easy", "solution": "",
      "rows": [[1], [3]], "cols": [[1], [2], [1]]}]
"""

from __future__ import annotations

import copy
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ..config import DEFAULT_PUZZLES_PATH
from ..errors import PuzzleFormatError, PuzzleNotFoundError
from ..line.combos import normalize_clue
from ..logging_utils import get_logger
from ..types import Puzzle

logger = get_logger()

REQUIRED_COLUMNS = ("number", "rows", "cols")

# 解決済みパス -> (読み込んだ時点の st_mtime_ns, 問題リスト)
_PUZZLE_CACHE: Dict[str, Tuple[int, List[Puzzle]]] = {}


def _text(value) -> str:
    if value is None or (isinstance(value, float) and pd.isna(value)):
        return ""
    return str(value)


def _row_to_puzzle(row: pd.Series) -> Puzzle:
    try:
        rows = [normalize_clue(r) for r in row["rows"]]
        cols = [normalize_clue(c) for c in row["cols"]]
    except (TypeError, ValueError) as e:
        raise PuzzleFormatError(f"puzzle {row.get('number')}: bad clue list ({e})") from e

    return Puzzle(
        title=_text(row.get("title")),
        number=int(row["number"]),
        rows=rows,
        cols=cols,
        solution=_text(row.get("solution")),
        difficulty=_text(row.get("difficulty")),
    )


def load_puzzles(path: str | Path = DEFAULT_PUZZLES_PATH, use_cache: bool = True) -> List[Puzzle]:
    """
    問題 JSON を読み込み、Puzzle のリストにして返します。

    Parameters
    ----------
    path : str or Path
        JSON ファイルのパス。
    use_cache : bool
        同じパスを 2 回目以降に読むときはキャッシュを使います。
        ファイルの更新時刻が変わっていれば読み直します。

    Returns
    -------
    list of Puzzle
        呼び出しごとに別のオブジェクトです。書き換えてもキャッシュには影響しません。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Puzzle JSON not found: {p}")

    key = str(p.resolve())
    mtime = p.stat().st_mtime_ns
    cached = _PUZZLE_CACHE.get(key)
    if use_cache and cached is not None and cached[0] == mtime:
        return copy.deepcopy(cached[1])

    logger.debug("Loading puzzles from %s", p)
    # dtype=False: 数値っぽい文字列（solution など）を勝手に変換させない
    df = pd.read_json(p, orient="records", dtype=False)

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise PuzzleFormatError(f"Puzzle JSON must have columns {missing}: {p}")

    puzzles = [_row_to_puzzle(row) for _, row in df.iterrows()]
    logger.info("Loaded %d puzzles from %s", len(puzzles), p)

    _PUZZLE_CACHE[key] = (mtime, puzzles)
    return copy.deepcopy(puzzles)


def find_puzzle(puzzles: Sequence[Puzzle], number: int, path: Optional[str] = None) -> Puzzle:
    """番号が一致する問題を返します。無ければ PuzzleNotFoundError。"""
    for puzzle in puzzles:
        if puzzle.number == number:
            return puzzle
    raise PuzzleNotFoundError(number, path)


def load_puzzle(number: int, path: str | Path = DEFAULT_PUZZLES_PATH) -> Puzzle:
    return find_puzzle(load_puzzles(path), number, str(path))


def save_puzzles(puzzles: Sequence[Puzzle], path: str | Path) -> Path:
    """
    Puzzle のリストを load_puzzles() で読める JSON として保存します。
    """
    p = Path(path)
    df = pd.DataFrame(
        [
            {
                "title": pz.title,
                "number": pz.number,
                "solution": pz.solution,
                "difficulty": pz.difficulty,
                "rows": [list(r) for r in pz.rows],
                "cols": [list(c) for c in pz.cols],
            }
            for pz in puzzles
        ],
        columns=["title", "number", "solution", "difficulty", "rows", "cols"],
    )
    df.to_json(p, orient="records", force_ascii=False, indent=2)
    _PUZZLE_CACHE.pop(str(p.resolve()), None)
    return p
