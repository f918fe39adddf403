import sys

import pytest

from ordtree import BSTree, TreeModifiedError
from ordtree.tree import traversal


def test_producers_are_restartable(scenario):
    first = list(scenario.preorder_keys())
    assert list(scenario.preorder_keys()) == first
    it = scenario.inorder_keys()
    assert next(it) == 4
    assert list(scenario.inorder_keys()) == [4, 8, 10, 12, 14, 20, 22]
    assert next(it) == 8


def test_producers_are_lazy(scenario):
    it = scenario.postorder_keys()
    assert next(it) == 4
    assert next(it) == 10


def test_handles_follow_order(scenario):
    assert [h.key for h in scenario.handles('preorder')] == \
            list(scenario.preorder_keys())
    assert [h.key for h in scenario.handles()] == list(scenario)


def test_unknown_order(scenario):
    with pytest.raises(ValueError):
        scenario.handles('levelorder')


def test_insert_during_traversal_raises(scenario):
    it = scenario.inorder_keys()
    next(it)
    scenario.insert(5)
    with pytest.raises(TreeModifiedError):
        next(it)


def test_insert_after_last_key_raises(scenario):
    it = scenario.preorder_keys()
    for _ in range(7):
        next(it)
    scenario.insert(1)
    with pytest.raises(TreeModifiedError):
        next(it)


def test_clear_during_traversal_raises(scenario):
    it = scenario.postorder_keys()
    next(it)
    scenario.clear()
    with pytest.raises(TreeModifiedError):
        list(it)


def test_modification_before_first_step_raises(scenario):
    it = scenario.inorder_keys()
    scenario.insert(30)
    with pytest.raises(TreeModifiedError):
        next(it)


def test_empty_walks():
    tree = BSTree()
    for walk in traversal.ORDERS.values():
        assert list(walk(tree.root, tree.nil)) == []


@pytest.mark.parametrize("order", ["inorder", "preorder", "postorder"])
def test_degenerate_tree_does_not_recurse(order):
    n = sys.getrecursionlimit() * 2
    tree = BSTree(range(n), depth_warning=None)
    keys = [h.key for h in tree.handles(order)]
    if order == "postorder":
        assert keys == list(range(n - 1, -1, -1))
    else:
        assert keys == list(range(n))
    assert tree.height() == n
    assert tree.clear() == n
