# -*- coding: utf-8 -*-
"""
線（行・列）ごとの計算を並列に実行するヘルパーです。

1 つのフェーズ内では各線が自分の候補集合・マスクだけを触るので、
ロックは要りません。行と列の仕事は 1 回の Parallel 呼び出しにまとめて渡すため、
両者は同時に進み、呼び出しが返った時点でフェーズ全体が完了しています。

どれかの線で例外が起きた場合は、Parallel がそのまま呼び出し側へ投げ直します。
プロセスで回す場合も同じ型の例外が返ってくるように、
errors.py の例外はすべて pickle できるようにしてあります。
"""

from __future__ import annotations

from typing import Any, Callable, List, Sequence, Tuple

from joblib import Parallel, delayed

from ..config import N_JOBS, PARALLEL_BACKEND_PREFER, PARALLEL_MIN_LINES


def map_lines(
    func: Callable[..., Any],
    tasks: Sequence[Tuple],
    n_jobs: int = N_JOBS,
    prefer: str = PARALLEL_BACKEND_PREFER,
) -> List[Any]:
    """
    tasks の各タプルを引数にして func を呼び、結果を同じ順番のリストで返します。

    prefer は joblib にそのまま渡します（"threads" または "processes"）。
    線の本数が少ないとき、または n_jobs == 1 のときは並列化せずに計算します。
    """
    if n_jobs == 1 or len(tasks) < PARALLEL_MIN_LINES:
        return [func(*args) for args in tasks]

    return Parallel(n_jobs=n_jobs, prefer=prefer)(
        delayed(func)(*args) for args in tasks
    )
