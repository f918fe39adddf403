import pytest

from ordtree import BSTree, InvariantError


def test_valid_tree(scenario):
    scenario.validate()


def test_detects_ordering_violation(scenario):
    scenario.find(10)._node.key = 30
    with pytest.raises(InvariantError) as e:
        scenario.validate()
    assert e.value.node_key == 30


def test_detects_equal_key_on_left(scenario):
    scenario.find(4)._node.key = 8
    with pytest.raises(InvariantError):
        scenario.validate()


def test_detects_broken_parent_link(scenario):
    scenario.find(14)._node.parent = scenario.root
    with pytest.raises(InvariantError) as e:
        scenario.validate()
    assert "parent link" in str(e.value)


def test_detects_root_with_parent(scenario):
    scenario.root.parent = scenario.find(4)._node
    with pytest.raises(InvariantError) as e:
        scenario.validate()
    assert str(e.value) == "invariant violated at key 20: root has a parent"


def test_detects_shared_child(scenario):
    node = scenario.find(12)._node
    node.right = node.left
    with pytest.raises(InvariantError):
        scenario.validate()


def test_detects_count_mismatch(scenario):
    scenario._size += 1
    with pytest.raises(InvariantError):
        scenario.validate()
    scenario._size -= 2
    with pytest.raises(InvariantError):
        scenario.validate()


def test_empty_tree_count_mismatch():
    tree = BSTree()
    tree._size = 1
    with pytest.raises(InvariantError):
        tree.validate()
