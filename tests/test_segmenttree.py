import random

import pytest

from leetkit.segmenttree import SegmentTree


DATA = [5, -2, 7, 0, 3, 11, -4, 8]


def test_len_matches_data():
    assert len(SegmentTree(DATA)) == len(DATA)


def test_single_element_queries():
    tree = SegmentTree(DATA)
    assert [tree.query(i, i) for i in range(len(DATA))] == DATA


def test_all_ranges_match_slices():
    tree = SegmentTree(DATA)
    for lo in range(len(DATA)):
        for hi in range(lo, len(DATA)):
            assert tree.query(lo, hi) == sum(DATA[lo : hi + 1])


def test_range_beyond_bounds_is_clamped():
    tree = SegmentTree(DATA)
    assert tree.query(-10, 100) == sum(DATA)
    assert tree.query(-3, 2) == sum(DATA[:3])


def test_invalid_ranges_yield_zero():
    tree = SegmentTree(DATA)
    assert tree.query(3, 2) == 0
    assert tree.query(len(DATA), len(DATA) + 5) == 0
    assert tree.query(-5, -1) == 0


def test_empty_tree():
    tree = SegmentTree([])
    assert len(tree) == 0
    assert tree.query(0, 0) == 0
    with pytest.raises(IndexError):
        tree.update(0, 1)


def test_update_changes_sums():
    tree = SegmentTree(DATA)
    expected = list(DATA)
    tree.update(2, 100)
    expected[2] = 100
    assert tree.query(0, len(DATA) - 1) == sum(expected)
    assert tree.query(2, 2) == 100
    assert tree.query(3, 7) == sum(expected[3:])


def test_update_out_of_range():
    tree = SegmentTree(DATA)
    with pytest.raises(IndexError):
        tree.update(len(DATA), 1)
    with pytest.raises(IndexError):
        tree.update(-1, 1)


def test_random_updates_agree_with_list():
    rng = random.Random(1234)
    values = [rng.randint(-50, 50) for _ in range(37)]
    tree = SegmentTree(values)
    for _ in range(200):
        i = rng.randrange(len(values))
        v = rng.randint(-50, 50)
        tree.update(i, v)
        values[i] = v
        lo = rng.randrange(len(values))
        hi = rng.randrange(lo, len(values))
        assert tree.query(lo, hi) == sum(values[lo : hi + 1])


def test_input_is_copied():
    source = [1, 2, 3]
    tree = SegmentTree(source)
    source[0] = 99
    assert tree.query(0, 0) == 1