# -*- coding: utf-8 -*-
"""
表形式のレコードを Puzzle に変換するモジュールです。

1 レコード = 1 問で、列は

    title, number, difficulty, solution, row_1, ..., row_R, col_1, ..., col_C

のように並んでいる想定です。row_i / col_j には "3,1" のような
カンマ区切りのブロック長が入ります。空欄・NaN・"0" は「塗りなし」です。

単なる形式の変換で、ソルバー本体とは関係ありません。
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, List, Optional

import pandas as pd

from ..config import RECORD_COL_PREFIX, RECORD_ROW_PREFIX, RUN_SEPARATOR
from ..errors import PuzzleFormatError
from ..line.combos import normalize_clue
from ..types import Clue, Puzzle


def parse_run_list(value: Any) -> Clue:
    """
    "3,1" のようなセルの値をヒントのタプルに変換します。

    例:
    - "3,1" -> (3, 1)
    - 5     -> (5,)
    - ""    -> ()
    - NaN   -> ()
    - "0"   -> ()
    """
    if value is None:
        return ()
    if isinstance(value, float):
        if pd.isna(value):
            return ()
        if not value.is_integer():
            raise PuzzleFormatError(f"run length must be an integer: {value!r}")
        value = int(value)
    if isinstance(value, int):
        return normalize_clue([value])

    s = str(value).strip().strip('"')
    if not s:
        return ()

    parts = [p.strip() for p in s.split(RUN_SEPARATOR)]
    try:
        return normalize_clue(int(p) for p in parts if p)
    except ValueError as e:
        raise PuzzleFormatError(f"bad run list {value!r}: {e}") from e


def _numbered_columns(columns, prefix: str) -> List[int]:
    pattern = re.compile(rf"^{re.escape(prefix)}(\d+)$")
    nums = []
    for col in columns:
        m = pattern.match(str(col))
        if m:
            nums.append(int(m.group(1)))
    return sorted(nums)


def _read_clues(record: pd.Series, prefix: str, count: Optional[int]) -> List[Clue]:
    if count is None:
        nums = _numbered_columns(record.index, prefix)
        count = nums[-1] if nums else 0

    clues: List[Clue] = []
    for k in range(1, count + 1):
        name = f"{prefix}{k}"
        if name not in record.index:
            raise PuzzleFormatError(f"record is missing column {name!r}")
        clues.append(parse_run_list(record[name]))
    return clues


def record_to_puzzle(
    record: pd.Series,
    n_rows: Optional[int] = None,
    n_cols: Optional[int] = None,
    default_number: int = 0,
) -> Puzzle:
    """
    1 レコード（pandas.Series）を Puzzle に変換します。

    n_rows / n_cols を省略した場合は、row_* / col_* 列の最大番号から盤面サイズを決めます。
    指定した場合は、その本数分の列が揃っていなければ PuzzleFormatError です。
    """
    rows = _read_clues(record, RECORD_ROW_PREFIX, n_rows)
    cols = _read_clues(record, RECORD_COL_PREFIX, n_cols)

    number = record.get("number", default_number)
    if number is None or (isinstance(number, float) and pd.isna(number)) or str(number).strip() == "":
        number = default_number

    def text(name: str) -> str:
        v = record.get(name, "")
        return "" if v is None or (isinstance(v, float) and pd.isna(v)) else str(v)

    return Puzzle(
        title=text("title"),
        number=int(number),
        rows=rows,
        cols=cols,
        solution=text("solution"),
        difficulty=text("difficulty"),
    )


def records_to_puzzles(
    df: pd.DataFrame,
    n_rows: Optional[int] = None,
    n_cols: Optional[int] = None,
) -> List[Puzzle]:
    """DataFrame の各行を Puzzle に変換します。number 列が無ければ行番号を使います。"""
    return [
        record_to_puzzle(row, n_rows=n_rows, n_cols=n_cols, default_number=pos)
        for pos, (_, row) in enumerate(df.iterrows())
    ]


def load_records_csv(
    path: str | Path,
    n_rows: Optional[int] = None,
    n_cols: Optional[int] = None,
) -> List[Puzzle]:
    """
    レコード形式の CSV を読み込んで Puzzle のリストにします。

    ヒント列は "3,1" のような文字列なので、すべて文字列として読み込みます。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Record CSV not found: {p}")

    df = pd.read_csv(p, encoding="utf-8-sig", dtype=str, keep_default_na=False)
    return records_to_puzzles(df, n_rows=n_rows, n_cols=n_cols)
