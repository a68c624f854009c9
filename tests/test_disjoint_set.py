import random

import pytest

from graphtree.disjoint_set import UnionFindSet


def test_initially_all_separate():
    ufs = UnionFindSet(6)
    assert ufs.set_count() == 6
    assert [ufs.find_root(i) for i in range(6)] == list(range(6))
    assert not ufs.is_in_same_set(0, 1)


def test_union_merges_and_counts():
    ufs = UnionFindSet(5)
    assert ufs.union(0, 1) is True
    assert ufs.union(3, 4) is True
    assert ufs.set_count() == 3
    assert ufs.is_in_same_set(0, 1)
    assert ufs.is_in_same_set(4, 3)
    assert not ufs.is_in_same_set(1, 3)


def test_union_same_set_is_noop():
    ufs = UnionFindSet(4)
    ufs.union(0, 1)
    ufs.union(1, 2)
    assert ufs.union(0, 2) is False
    assert ufs.set_count() == 2
    assert ufs.set_size(2) == 3


def test_transitivity():
    ufs = UnionFindSet(10)
    for a, b in [(0, 1), (1, 2), (2, 3), (7, 8)]:
        ufs.union(a, b)
    assert ufs.is_in_same_set(0, 3)
    assert ufs.find_root(0) == ufs.find_root(3)
    assert not ufs.is_in_same_set(3, 7)


def test_smaller_set_joins_larger():
    ufs = UnionFindSet(5)
    ufs.union(0, 1)
    ufs.union(0, 2)
    big_root = ufs.find_root(0)
    ufs.union(3, 2)
    assert ufs.find_root(3) == big_root


def test_random_matches_naive_partition():
    rng = random.Random(7)
    n = 40
    ufs = UnionFindSet(n)
    groups = [{i} for i in range(n)]
    for _ in range(60):
        a, b = rng.randrange(n), rng.randrange(n)
        ufs.union(a, b)
        ga = next(g for g in groups if a in g)
        gb = next(g for g in groups if b in g)
        if ga is not gb:
            groups.remove(gb)
            ga |= gb
    assert ufs.set_count() == len(groups)
    for group in groups:
        roots = {ufs.find_root(x) for x in group}
        assert len(roots) == 1
        assert ufs.set_size(next(iter(group))) == len(group)


def test_out_of_range():
    ufs = UnionFindSet(3)
    with pytest.raises(IndexError):
        ufs.find_root(3)
    with pytest.raises(IndexError):
        ufs.union(-1, 0)


def test_negative_size():
    with pytest.raises(ValueError):
        UnionFindSet(-1)