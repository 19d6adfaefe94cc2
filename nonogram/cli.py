# -*- coding: utf-8 -*-
"""
コマンドラインから問題を解くためのモジュールです。

使い方:
    python -m nonogram                       # puzzles.json の既定の問題
    python -m nonogram --number 3541         # 番号を指定
    python -m nonogram --records data.csv    # 表形式レコードの CSV から
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from . import solve_puzzle
from .config import DEFAULT_PUZZLE_NUMBER, DEFAULT_PUZZLES_PATH, N_JOBS
from .errors import PuzzleNotFoundError
from .logging_utils import set_log_level
from .postprocess.render_result import describe_result, render_grid
from .puzzles.loader import find_puzzle, load_puzzles
from .puzzles.records import load_records_csv
from .types import Puzzle, StepSnapshot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="nonogram",
        description="Solve a nonogram by line constraint propagation.",
    )
    parser.add_argument("--puzzles", default=DEFAULT_PUZZLES_PATH, help="puzzle JSON file")
    parser.add_argument("--number", type=int, default=None, help="puzzle number to solve")
    parser.add_argument("--records", default=None, help="record-format CSV to read instead of JSON")
    parser.add_argument("--jobs", type=int, default=N_JOBS, help="parallel workers (-1 = all cores)")
    parser.add_argument("--max-iterations", type=int, default=None)
    parser.add_argument("--quiet", action="store_true", help="do not print the grid after every step")
    return parser


def _pick_puzzle(args: argparse.Namespace) -> Puzzle:
    if args.records:
        puzzles = load_records_csv(args.records)
        if not puzzles:
            raise PuzzleNotFoundError(args.number or 0, args.records)
        if args.number is None:
            return puzzles[0]
        return find_puzzle(puzzles, args.number, args.records)

    number = args.number if args.number is not None else DEFAULT_PUZZLE_NUMBER
    return find_puzzle(load_puzzles(args.puzzles), number, args.puzzles)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.quiet:
        set_log_level(logging.WARNING)

    try:
        puzzle = _pick_puzzle(args)
    except (FileNotFoundError, PuzzleNotFoundError, ValueError) as e:
        print(f"error: {e}")
        return 2

    def show_step(snapshot: StepSnapshot) -> None:
        if args.quiet:
            return
        print(f"step: {snapshot.iteration}")
        for line in render_grid(snapshot.grid):
            print(line)
        print()

    result = solve_puzzle(
        puzzle,
        n_jobs=args.jobs,
        max_iterations=args.max_iterations,
        on_step=show_step,
    )
    print(describe_result(result))
    return 0 if result.solved else 1
