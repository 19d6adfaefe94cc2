# -*- coding: utf-8 -*-
"""
nonogram 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- セルの内部表現と表示文字
- 伝播ループの反復上限
- 並列ワーカー数
- 問題ファイルの場所
などを簡単に変更できます。
"""

from __future__ import annotations

from typing import Optional

# ==== セルの内部表現 =======================================================

# 塗りマス・空白マス・未確定マスを numpy.int8 の値で表します。
# UNKNOWN はマスクの中にだけ現れ、候補（combo）には現れません。
FILLED: int = 1
EMPTY: int = 0
UNKNOWN: int = -1

# ==== 表示関連 =============================================================

# 進捗表示で使う文字。1マスを CELL_WIDTH 文字分に引き伸ばして表示します。
# 白黒反転の表示です。塗りマスは空白、空白マスは █ で描くので、
# 暗い背景の端末では塗りマスが背景色の絵として浮かび上がります。
BOX_FILLED: str = " "
BOX_EMPTY: str = "█"
BOX_UNKNOWN: str = "?"
CELL_WIDTH: int = 2

# ==== 伝播ループ関連 =======================================================

# 反復回数の上限。None の場合は「行数 × 列数 + 1」を使います。
# （進展のある反復ごとに最低 1 マスは確定するので、これで十分です）
MAX_ITERATIONS: Optional[int] = None

# joblib に渡すワーカー数。-1 で全コアを使います。
N_JOBS: int = -1

# joblib のバックエンド指定。
# マスク作成とフィルタは大きな numpy 配列の比較が中心で、線ごとの計算中に
# GIL を握り続けることは少ないので、配列のコピーが要らないスレッドで回します。
PARALLEL_BACKEND_PREFER: str = "threads"

# 候補の全列挙は Python の再帰が GIL を握ったまま進むので、
# スレッドでは速くなりません。こちらは loky のプロセスで回します。
GENERATE_BACKEND_PREFER: str = "processes"

# 行＋列の本数がこれより少ない盤面では並列化せず、その場で計算します。
PARALLEL_MIN_LINES: int = 16

# ==== 問題ファイル関連 =====================================================

# 問題 JSON のパス（title, number, solution, difficulty, rows, cols の配列）
DEFAULT_PUZZLES_PATH: str = "puzzles.json"

# 番号指定が無いときに解く問題（nonograms.org の問題番号）
DEFAULT_PUZZLE_NUMBER: int = 18264

# ==== 表形式レコード関連 ===================================================

# 1 レコード = 1 問。row_1..row_R, col_1..col_C 列に "3,1" のような文字列が入ります。
RECORD_ROW_PREFIX: str = "row_"
RECORD_COL_PREFIX: str = "col_"
RUN_SEPARATOR: str = ","
