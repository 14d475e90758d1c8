import pytest
from hypothesis import given, strategies as st

from algokit.binarytree import Node
from algokit.tree_properties import (
    apply_children_sum,
    has_path_sum,
    is_balanced,
    is_identical,
    is_symmetric,
    max_depth,
    max_path_sum,
    path_to,
    root_to_leaf_paths,
)


def chain(values):
    root = None
    for value in reversed(values):
        root = Node(value, left=root)
    return root


def bst(values):
    root = None
    for value in values:
        if root is None:
            root = Node(value)
            continue
        node = root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = Node(value)
                    break
                node = node.left
            else:
                if node.right is None:
                    node.right = Node(value)
                    break
                node = node.right
    return root


def copy_tree(node):
    if node is None:
        return None
    return Node(node.data, copy_tree(node.left), copy_tree(node.right))


def mirror(node):
    if node is None:
        return None
    return Node(node.data, mirror(node.right), mirror(node.left))


def nodes(node):
    if node is None:
        return []
    return [node, *nodes(node.left), *nodes(node.right)]


def sample_tree():
    return Node(1, Node(2, Node(4), Node(5, Node(6), Node(7))), Node(3))


def symmetric_tree():
    return Node(1, Node(2, Node(3), Node(4)), Node(2, Node(4), Node(3)))


def test_balanced_examples():
    assert is_balanced(None) is True
    assert is_balanced(symmetric_tree()) is True
    assert is_balanced(chain([1, 2, 3])) is False


@given(st.lists(st.integers(), min_size=1, max_size=30))
def test_chain_depth_is_length(values):
    assert max_depth(chain(values)) == len(values)


def test_depth_of_empty_tree():
    assert max_depth(None) == 0


@given(st.lists(st.integers(-50, 50), max_size=40))
def test_depth_bounds(values):
    root = bst(values)
    depth = max_depth(root)
    count = len(nodes(root))
    assert depth <= count
    assert (2**depth - 1) >= count


def test_apply_children_sum_source_example():
    root = Node(2, Node(35, Node(2), Node(3)), Node(10, Node(5), Node(2)))
    result = apply_children_sum(root)
    assert result is root
    for node in nodes(root):
        kids = [c for c in (node.left, node.right) if c is not None]
        if kids:
            assert node.data == sum(c.data for c in kids)


@given(st.lists(st.integers(0, 100), max_size=30))
def test_apply_children_sum_invariant(values):
    root = bst(values)
    before = {id(node): node.data for node in nodes(root)}
    apply_children_sum(root)
    for node in nodes(root):
        assert node.data >= before[id(node)]
        kids = [c for c in (node.left, node.right) if c is not None]
        if kids:
            assert node.data == sum(c.data for c in kids)


def test_apply_children_sum_empty():
    assert apply_children_sum(None) is None


def test_max_path_sum_empty_raises():
    with pytest.raises(ValueError):
        max_path_sum(None)


def test_max_path_sum_single_node():
    assert max_path_sum(Node(-7)) == -7


@given(st.lists(st.integers(1, 100), min_size=1, max_size=20))
def test_max_path_sum_positive_chain_is_total(values):
    assert max_path_sum(chain(values)) == sum(values)


@given(st.lists(st.integers(-100, -1), min_size=1, max_size=20))
def test_max_path_sum_all_negative_is_largest_node(values):
    assert max_path_sum(bst(values)) == max(values)


def test_has_path_sum_matches_every_leaf_path():
    root = sample_tree()
    for path in root_to_leaf_paths(root):
        total = sum(int(part) for part in path.split())
        assert has_path_sum(root, total) is True


def test_has_path_sum_partial_path_does_not_count():
    root = sample_tree()
    assert has_path_sum(root, 1 + 2) is False
    assert has_path_sum(None, 0) is False


def test_path_to_source_example():
    assert path_to(sample_tree(), 7) == [1, 2, 5, 7]


def test_path_to_missing_value():
    assert path_to(sample_tree(), 99) == []
    assert path_to(None, 1) == []


@given(st.lists(st.integers(-30, 30), min_size=1, max_size=30, unique=True))
def test_path_to_runs_from_root_to_target(values):
    root = bst(values)
    for value in values:
        path = path_to(root, value)
        assert path[0] == values[0]
        assert path[-1] == value


def test_root_to_leaf_paths_sample():
    assert root_to_leaf_paths(sample_tree()) == ["1 2 4", "1 2 5 6", "1 2 5 7", "1 3"]


def test_root_to_leaf_paths_empty_and_single():
    assert root_to_leaf_paths(None) == []
    assert root_to_leaf_paths(Node(5)) == ["5"]


def test_identical_copies():
    root = sample_tree()
    assert is_identical(root, copy_tree(root)) is True
    assert is_identical(None, None) is True
    assert is_identical(root, None) is False


def test_identical_detects_value_change():
    root = sample_tree()
    other = copy_tree(root)
    other.left.right.data = 50
    assert is_identical(root, other) is False


def test_symmetric_source_example():
    assert is_symmetric(symmetric_tree()) is True
    assert is_symmetric(None) is True


def test_not_symmetric():
    assert is_symmetric(sample_tree()) is False


@given(st.lists(st.integers(-20, 20), max_size=25))
def test_symmetric_iff_equal_to_mirror(values):
    root = bst(values)
    assert is_symmetric(root) == is_identical(root, mirror(root))


@given(st.lists(st.integers(-20, 20), max_size=25))
def test_tree_joined_with_its_mirror_is_symmetric(values):
    root = bst(values)
    joined = Node(0, copy_tree(root), mirror(root))
    assert is_symmetric(joined) is True