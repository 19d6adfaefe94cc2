import json

import numpy as np
import pytest

from nonogram.line.combos import clues_from_grid

# 3x3 の十字。1 反復目で中央の行と列が決まり、2 反復目で解ける。
PLUS = np.array(
    [
        [0, 1, 0],
        [1, 1, 1],
        [0, 1, 0],
    ],
    dtype=np.int8,
)

# 5x5 の "P"。
LETTER_P = np.array(
    [
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 1],
        [1, 1, 1, 1, 1],
        [1, 0, 0, 0, 0],
        [1, 0, 0, 0, 0],
    ],
    dtype=np.int8,
)


@pytest.fixture
def plus_grid():
    return PLUS.copy()


@pytest.fixture
def plus_clues():
    return clues_from_grid(PLUS)


@pytest.fixture
def letter_p_clues():
    return clues_from_grid(LETTER_P)


@pytest.fixture
def puzzles_json(tmp_path):
    """title / number / solution / difficulty / rows / cols を持つ問題ファイル。"""
    records = [
        {
            "title": "plus",
            "number": 1,
            "solution": "010111010",
            "difficulty": "easy",
            "rows": [[1], [3], [1]],
            "cols": [[1], [3], [1]],
        },
        {
            "title": "two ways",
            "number": 2,
            "solution": "",
            "difficulty": "hard",
            "rows": [[1], [1]],
            "cols": [[1], [1]],
        },
        {
            "title": "blank row",
            "number": 3,
            "solution": "111000",
            "difficulty": "easy",
            "rows": [[3], [0]],
            "cols": [[1], [1], [1]],
        },
    ]
    path = tmp_path / "puzzles.json"
    path.write_text(json.dumps(records), encoding="utf-8")
    return path
