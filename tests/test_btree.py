import random

import pytest

from graphtree.btree import BTree, BTreeNode, main

CASES = [
    [10, 20],
    [10, 20, 30, 40],
    list(range(1, 11)),
    list(range(100, 0, -10)),
    [50, 20, 80, 10, 30, 60, 90, 25, 35, 70, 100],
    list(range(1, 51)),
]


def _check_structure(tree):
    leaf_depths = set()

    def visit(node, depth, low, high):
        assert 1 <= len(node.keys) <= tree.order - 1
        assert len(node.children) == len(node.keys) + 1
        assert node.keys == sorted(node.keys)
        for key in node.keys:
            assert low is None or key > low
            assert high is None or key < high
        if node.is_leaf:
            leaf_depths.add(depth)
            return
        bounds = [low, *node.keys, high]
        for i, child in enumerate(node.children):
            assert child is not None
            assert child.parent is node
            visit(child, depth + 1, bounds[i], bounds[i + 1])

    assert tree.root is not None
    assert tree.root.parent is None
    visit(tree.root, 0, None, None)
    assert len(leaf_depths) == 1


@pytest.mark.parametrize("keys", CASES)
def test_inorder_is_sorted(keys):
    tree = BTree(3)
    for key in keys:
        assert tree.insert(key) is True
    assert tree.inorder() == sorted(keys)
    assert list(tree) == sorted(keys)
    assert len(tree) == len(keys)
    _check_structure(tree)


@pytest.mark.parametrize("order", [3, 4, 5, 7])
def test_random_inserts_keep_invariants(order):
    rng = random.Random(order)
    keys = rng.sample(range(1000), 200)
    tree = BTree(order)
    for key in keys:
        tree.insert(key)
    _check_structure(tree)
    assert tree.inorder() == sorted(keys)


def test_duplicate_rejected():
    tree = BTree(3)
    for key in [5, 1, 9]:
        tree.insert(key)
    assert tree.insert(5) is False
    assert tree.inorder() == [1, 5, 9]
    assert len(tree) == 3


def test_root_split_shape():
    tree = BTree(3)
    for key in [10, 20, 30]:
        tree.insert(key)
    assert tree.root.keys == [20]
    assert [child.keys for child in tree.root.children] == [[10], [30]]


def test_find_present_and_absent():
    tree = BTree(3)
    keys = [50, 20, 80, 10, 30, 60, 90, 25, 35, 70, 100]
    for key in keys:
        tree.insert(key)
    for key in keys:
        node, idx = tree.find(key)
        assert node.keys[idx] == key
        assert key in tree
    node, idx = tree.find(33)
    assert idx is None
    assert node.is_leaf
    assert 33 not in tree


def test_find_on_empty_tree():
    tree = BTree(3)
    assert tree.find(1) == (None, None)
    assert tree.inorder() == []


def test_node_search():
    node = BTreeNode()
    assert node.search(4) == (False, 0)
    node.keys = [2, 4, 6]
    node.children = [None] * 4
    assert node.search(4) == (True, 1)
    assert node.search(5) == (False, 2)
    assert node.search(7) == (False, 3)


def test_string_keys():
    tree = BTree(4)
    words = ["pear", "apple", "fig", "kiwi", "banana", "cherry"]
    for word in words:
        tree.insert(word)
    assert tree.inorder() == sorted(words)
    _check_structure(tree)


def test_order_too_small():
    with pytest.raises(ValueError):
        BTree(2)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    lines = out.split("\n")
    assert lines[0] == "hello BTree"
    assert lines[1] == "=== Test Case 1: Minimal insert ==="
    assert lines[2] == "10 20 "
    assert "=== Test Case 6: Bulk insert (1~50) ===" in out
    assert " ".join(str(i) for i in range(1, 51)) + " " in lines