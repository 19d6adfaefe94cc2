# -*- coding: utf-8 -*-
"""
ソルバーが投げる例外をまとめたモジュールです。

伝播ループの中ではこれらの例外を投げ、
最終的には engine.loop が SolveResult に変換して呼び出し側へ返します。
プロセスを終了させることはありません。
"""

from __future__ import annotations

from typing import Optional

from .types import CellCoord, Clue


class NonogramError(Exception):
    """ソルバー関連の例外の基底クラス。iteration は検出した反復番号です。"""

    kind = "error"

    def __init__(self, message: str, iteration: int = 0):
        super().__init__(message)
        self.iteration = iteration

    def __reduce__(self):
        # 既定の pickle は self.args しか渡さないので、コンストラクタ引数を明示する
        return (type(self), (str(self), self.iteration))

    def to_dict(self) -> dict:
        return {"kind": self.kind, "message": str(self), "iteration": self.iteration}


class InfeasibleClueError(NonogramError):
    """ヒントがそもそも線の長さに収まらない（初期化時に検出）。"""

    kind = "infeasible_clue"

    def __init__(self, axis: str, index: int, clue: Clue, length: int):
        super().__init__(
            f"{axis} {index}: clue {list(clue)} does not fit in length {length}",
            iteration=0,
        )
        self.axis = axis
        self.index = index
        self.clue = clue
        self.length = length

    def __reduce__(self):
        return (type(self), (self.axis, self.index, self.clue, self.length))

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update(axis=self.axis, index=self.index, clue=list(self.clue), length=self.length)
        return d


class ContradictionError(NonogramError):
    """同じマスについて、行と列が異なる確定値を主張した。"""

    kind = "contradiction"

    def __init__(self, row: int, col: int, row_value: int, col_value: int, iteration: int):
        super().__init__(
            f"cell ({row}, {col}): row says {row_value}, column says {col_value}",
            iteration=iteration,
        )
        self.row = row
        self.col = col
        self.row_value = row_value
        self.col_value = col_value

    @property
    def cell(self) -> CellCoord:
        return (self.row, self.col)

    def __reduce__(self):
        return (
            type(self),
            (self.row, self.col, self.row_value, self.col_value, self.iteration),
        )

    def to_dict(self) -> dict:
        d = super().to_dict()
        row, col = self.cell
        d.update(row=row, col=col)
        return d


class EmptyComboSetError(NonogramError):
    """フィルタの結果、ある線の候補が 1 つも残らなかった。"""

    kind = "empty_combo_set"

    def __init__(self, axis: str, index: int, iteration: int):
        super().__init__(f"{axis} {index}: no candidate left", iteration=iteration)
        self.axis = axis
        self.index = index

    def __reduce__(self):
        return (type(self), (self.axis, self.index, self.iteration))

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update(axis=self.axis, index=self.index)
        return d


class StalledError(NonogramError):
    """制約伝播だけではこれ以上マスが確定しない（入力の誤りではない）。"""

    kind = "stalled"

    def __init__(self, unknown_cells: int, iteration: int, reason: str = "fixed point"):
        super().__init__(
            f"{reason}: {unknown_cells} cells still unknown",
            iteration=iteration,
        )
        self.unknown_cells = unknown_cells
        self.reason = reason

    def __reduce__(self):
        return (type(self), (self.unknown_cells, self.iteration, self.reason))

    def to_dict(self) -> dict:
        d = super().to_dict()
        d.update(unknown_cells=self.unknown_cells, reason=self.reason)
        return d


class SolveCancelled(NonogramError):
    """外部から中断が要求された（反復の境目で検出）。"""

    kind = "cancelled"

    def __init__(self, iteration: int):
        super().__init__("cancelled", iteration=iteration)

    def __reduce__(self):
        return (type(self), (self.iteration,))


class PuzzleNotFoundError(LookupError):
    """指定された番号の問題が見つからない。"""

    def __init__(self, number: int, path: Optional[str] = None):
        where = f" in {path}" if path else ""
        super().__init__(f"puzzle {number} not found{where}")
        self.number = number
        self.path = path

    def __reduce__(self):
        return (type(self), (self.number, self.path))


class PuzzleFormatError(ValueError):
    """問題ファイル・レコードの形式が想定と違う。"""
