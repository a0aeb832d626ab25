import pytest

from algokit.structures.bst import BinarySearchTree

VALUES = [50, 30, 70, 20, 40, 60, 80, 35]


def make_tree(values=VALUES):
    tree = BinarySearchTree()
    for value in values:
        tree.insert(value)
    return tree


def test_inorder_is_sorted():
    assert make_tree().inorder() == sorted(VALUES)


def test_inorder_with_duplicates():
    data = [5, 3, 5, 7, 3]
    assert BinarySearchTree(data).inorder() == sorted(data)


def test_preorder_starts_with_root_and_holds_all():
    result = make_tree().preorder()
    assert result[0] == 50
    assert sorted(result) == sorted(VALUES)


def test_preorder_small_tree():
    tree = make_tree([50, 30, 70, 20, 40])
    assert tree.preorder() == [50, 30, 20, 40, 70]


def test_postorder_ends_with_root():
    result = make_tree().postorder()
    assert result[-1] == 50
    assert sorted(result) == sorted(VALUES)


def test_breadth_first_level_order():
    tree = make_tree([50, 30, 70, 20, 40])
    assert tree.breadth_first() == [50, 30, 70, 20, 40]


def test_empty_tree_traversals():
    tree = BinarySearchTree()
    assert tree.inorder() == []
    assert tree.breadth_first() == []


@pytest.mark.parametrize("victim", [20, 30, 50, 70, 35])
def test_remove_keeps_order(victim):
    tree = make_tree()
    tree.remove(victim)
    expected = sorted(VALUES)
    expected.remove(victim)
    assert tree.inorder() == expected


def test_remove_root_with_two_children_takes_left_maximum():
    tree = make_tree()
    tree.remove(50)
    assert tree.root.value == 40


def test_remove_only_node():
    tree = make_tree([7])
    tree.remove(7)
    assert tree.inorder() == []
    assert tree.root is None


def test_remove_missing_raises():
    tree = make_tree()
    with pytest.raises(KeyError):
        tree.remove(999)