"""
1 本の線の候補（combo）列挙のテスト
"""

import itertools
from collections import Counter

import numpy as np
import pytest

from nonogram.config import EMPTY, FILLED
from nonogram.line.combos import (
    clues_from_grid,
    count_combos,
    extract_runs,
    generate_combos,
    min_space,
    normalize_clue,
)


class TestMinSpace:
    """min_space のテスト"""

    def test_empty_clue(self):
        assert min_space(()) == 0

    def test_single_run(self):
        assert min_space((4,)) == 4

    def test_runs_need_separators(self):
        assert min_space((1, 2, 3)) == 1 + 2 + 3 + 2


class TestGenerateCombos:
    """generate_combos のテスト"""

    def test_scenario_one_two_in_five(self):
        combos = generate_combos((1, 2), 5)
        as_lists = [list(c) for c in combos]

        assert combos.shape == (3, 5)
        assert [1, 0, 1, 1, 0] in as_lists
        assert [0, 1, 0, 1, 1] in as_lists

    def test_order_is_by_leading_gap(self):
        combos = generate_combos((1, 2), 5)
        assert [list(c) for c in combos] == [
            [1, 0, 1, 1, 0],
            [1, 0, 0, 1, 1],
            [0, 1, 0, 1, 1],
        ]

    def test_order_with_three_runs(self):
        combos = generate_combos((1, 1, 1), 6)
        assert combos.tolist() == [
            [1, 0, 1, 0, 1, 0],
            [1, 0, 1, 0, 0, 1],
            [1, 0, 0, 1, 0, 1],
            [0, 1, 0, 1, 0, 1],
        ]

    def test_empty_clue_is_single_blank_line(self):
        combos = generate_combos((), 4)
        assert combos.shape == (1, 4)
        assert np.all(combos == EMPTY)

    def test_exact_fit(self):
        combos = generate_combos((2, 1), 4)
        assert [list(c) for c in combos] == [[1, 1, 0, 1]]

    def test_infeasible_clue_gives_empty_set(self):
        combos = generate_combos((1, 1), 1)
        assert combos.shape == (0, 1)

    def test_full_line(self):
        combos = generate_combos((3,), 3)
        assert np.all(combos == FILLED)

    def test_zero_length_line(self):
        assert generate_combos((), 0).shape == (1, 0)
        assert generate_combos((1,), 0).shape == (0, 0)

    def test_non_positive_run_is_rejected(self):
        with pytest.raises(ValueError):
            generate_combos((1, 0), 5)

    @pytest.mark.parametrize("clue,length", [((1,), 6), ((2, 1), 7), ((1, 1, 1), 8), ((3, 2), 9)])
    def test_every_combo_reproduces_clue(self, clue, length):
        combos = generate_combos(clue, length)
        assert combos.shape[1] == length
        for combo in combos:
            assert extract_runs(combo) == clue

    @pytest.mark.parametrize("clue,length", [((1,), 6), ((2, 1), 7), ((1, 1, 1), 8)])
    def test_combos_are_distinct(self, clue, length):
        combos = generate_combos(clue, length)
        assert len({tuple(c) for c in combos}) == combos.shape[0]


class TestCountCombos:
    """組合せの公式と総当たりの突き合わせ"""

    @pytest.mark.parametrize("length", range(0, 8))
    def test_matches_brute_force(self, length):
        by_clue = Counter(
            extract_runs(line) for line in itertools.product([EMPTY, FILLED], repeat=length)
        )
        for clue, n in by_clue.items():
            assert count_combos(clue, length) == n
            assert generate_combos(clue, length).shape[0] == n

    def test_brute_force_sets_are_identical(self):
        length = 6
        clue = (2, 1)
        expected = {
            line
            for line in itertools.product([EMPTY, FILLED], repeat=length)
            if extract_runs(line) == clue
        }
        assert {tuple(int(v) for v in c) for c in generate_combos(clue, length)} == expected

    def test_infeasible_count_is_zero(self):
        assert count_combos((1, 1), 2) == 0

    def test_large_line_count(self):
        # 余り 20 マスを 3 ブロックの前後に配る
        assert count_combos((1, 1, 1), 25) == 1771
        assert generate_combos((1, 1, 1), 25).shape[0] == 1771

    def test_many_short_runs_on_long_line(self):
        # C(21 + 5, 5) 通り。配列は最初に 1 回だけ確保される
        combos = generate_combos((1, 1, 1, 1, 1), 30)
        assert combos.shape == (count_combos((1, 1, 1, 1, 1), 30), 30) == (65780, 30)
        assert combos.dtype == np.int8
        assert (combos.sum(axis=1) == 5).all()
        assert np.unique(combos, axis=0).shape[0] == combos.shape[0]
        assert np.flatnonzero(combos[0]).tolist() == [0, 2, 4, 6, 8]
        assert np.flatnonzero(combos[-1]).tolist() == [21, 23, 25, 27, 29]


class TestHelpers:
    """normalize_clue / extract_runs / clues_from_grid"""

    def test_normalize_drops_zero(self):
        assert normalize_clue([0]) == ()
        assert normalize_clue(["3", 1]) == (3, 1)

    def test_normalize_rejects_negative(self):
        with pytest.raises(ValueError):
            normalize_clue([2, -1])

    def test_normalize_rejects_fraction(self):
        with pytest.raises(ValueError):
            normalize_clue([1.5])
        with pytest.raises(ValueError):
            normalize_clue(["1.5"])

    def test_normalize_accepts_integral_numbers(self):
        assert normalize_clue([2.0, np.int64(3), np.float64(1.0)]) == (2, 3, 1)
        assert all(type(r) is int for r in normalize_clue([2.0, np.int64(3)]))

    def test_extract_runs(self):
        assert extract_runs([0, 1, 1, 0, 1]) == (2, 1)
        assert extract_runs([0, 0]) == ()

    def test_clues_from_grid(self, plus_grid):
        rows, cols = clues_from_grid(plus_grid)
        assert rows == [(1,), (3,), (1,)]
        assert cols == [(1,), (3,), (1,)]
