"""
マスク作成とフィルタのテスト
"""

import numpy as np
import pytest

from nonogram.config import EMPTY, FILLED, UNKNOWN
from nonogram.line.combos import generate_combos
from nonogram.line.mask import build_mask, count_unknown, filter_combos, is_complete


class TestBuildMask:
    """build_mask のテスト"""

    def test_scenario_one_two_in_five_has_unknown(self):
        mask = build_mask(generate_combos((1, 2), 5))
        assert count_unknown(mask) >= 1
        # 3 通りとも 4 マス目は塗り
        assert mask[3] == FILLED

    def test_single_combo_is_fully_known(self):
        combos = np.array([[1, 0, 1]], dtype=np.int8)
        mask = build_mask(combos)
        assert list(mask) == [1, 0, 1]
        assert is_complete(mask)

    def test_overlap_of_long_run(self):
        # 長さ 5 に 4 のブロック → 中央 3 マスが確定
        mask = build_mask(generate_combos((4,), 5))
        assert list(mask) == [UNKNOWN, FILLED, FILLED, FILLED, UNKNOWN]

    def test_empty_clue_mask_is_all_empty(self):
        mask = build_mask(generate_combos((), 3))
        assert list(mask) == [EMPTY, EMPTY, EMPTY]

    def test_empty_combo_set_is_an_error(self):
        with pytest.raises(ValueError):
            build_mask(np.empty((0, 4), dtype=np.int8))


class TestFilterCombos:
    """filter_combos のテスト"""

    def test_keeps_only_matching(self):
        combos = generate_combos((1, 2), 5)
        mask = np.array([FILLED, UNKNOWN, UNKNOWN, UNKNOWN, EMPTY], dtype=np.int8)
        kept = filter_combos(combos, mask)
        assert [list(c) for c in kept] == [[1, 0, 1, 1, 0]]

    def test_all_unknown_mask_keeps_everything(self):
        combos = generate_combos((1, 1), 5)
        mask = np.full(5, UNKNOWN, dtype=np.int8)
        assert filter_combos(combos, mask).shape == combos.shape

    def test_result_is_subset(self):
        combos = generate_combos((2, 1), 7)
        mask = np.array([UNKNOWN, FILLED, UNKNOWN, UNKNOWN, UNKNOWN, EMPTY, UNKNOWN], dtype=np.int8)
        kept = {tuple(c) for c in filter_combos(combos, mask)}
        assert kept <= {tuple(c) for c in combos}
        assert all(c[1] == FILLED and c[5] == EMPTY for c in kept)

    def test_can_remove_everything(self):
        combos = generate_combos((1,), 3)
        mask = np.array([EMPTY, EMPTY, EMPTY], dtype=np.int8)
        assert filter_combos(combos, mask).shape[0] == 0

    @pytest.mark.parametrize("clue,length", [((1, 2), 5), ((3,), 5), ((1, 1, 1), 7), ((), 4)])
    def test_mask_then_filter_is_idempotent(self, clue, length):
        combos = generate_combos(clue, length)
        kept = filter_combos(combos, build_mask(combos))
        assert np.array_equal(kept, combos)
