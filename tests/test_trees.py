import pytest

from dsalgo.trees import BinaryLifting, TreeNode, lca_binary_tree, lca_bst

TREE_EDGES = [(0, 1), (0, 2), (1, 3), (1, 4), (2, 5), (4, 6)]
DEPTHS = {0: 0, 1: 1, 2: 1, 3: 2, 4: 2, 5: 2, 6: 3}


@pytest.fixture
def lifting():
    return BinaryLifting(TREE_EDGES, root=0)


@pytest.fixture
def sample_tree():
    return TreeNode(
        20,
        TreeNode(8, TreeNode(4), TreeNode(12, TreeNode(10), TreeNode(14))),
        TreeNode(22),
    )


def test_kth_ancestor_along_path():
    path = BinaryLifting([(i, i + 1) for i in range(20)])
    for node in range(21):
        for k in range(node + 1):
            assert path.kth_ancestor(node, k) == node - k
        assert path.kth_ancestor(node, node + 1) is None


def test_kth_ancestor_depth_reaches_root(lifting):
    for node, depth in DEPTHS.items():
        assert lifting.kth_ancestor(node, depth) == 0
        assert lifting.kth_ancestor(node, depth + 1) is None
        assert lifting.kth_ancestor(node, 0) == node


def test_kth_ancestor_large_k(lifting):
    assert lifting.kth_ancestor(6, 1000) is None


def test_parent_links(lifting):
    for parent, child in TREE_EDGES:
        assert lifting.kth_ancestor(child, 1) == parent


def test_lca_cases(lifting):
    assert lifting.lca(6, 3) == 1
    assert lifting.lca(3, 6) == 1
    assert lifting.lca(6, 5) == 0
    assert lifting.lca(4, 6) == 4
    assert lifting.lca(5, 5) == 5


def test_lca_of_edge_is_parent(lifting):
    for parent, child in TREE_EDGES:
        assert lifting.lca(parent, child) == parent
        assert lifting.lca(child, parent) == parent


def test_custom_root_and_labels():
    lifting = BinaryLifting([("a", "b"), ("b", "c"), ("b", "d")], root="a")
    assert lifting.lca("c", "d") == "b"
    assert lifting.kth_ancestor("d", 2) == "a"


def test_single_node_tree():
    lifting = BinaryLifting([], root=0)
    assert lifting.kth_ancestor(0, 0) == 0
    assert lifting.kth_ancestor(0, 1) is None
    assert lifting.lca(0, 0) == 0


def test_invalid_trees():
    with pytest.raises(ValueError):
        BinaryLifting([(0, 1), (1, 2), (2, 0)])
    with pytest.raises(ValueError):
        BinaryLifting([(0, 1), (2, 3), (3, 4), (4, 2)])


def test_unknown_node_and_negative_k(lifting):
    with pytest.raises(KeyError):
        lifting.kth_ancestor(99, 1)
    with pytest.raises(KeyError):
        lifting.lca(0, 99)
    with pytest.raises(ValueError):
        lifting.kth_ancestor(3, -1)


def test_lca_binary_tree_source_example(sample_tree):
    assert lca_binary_tree(sample_tree, 10, 14).val == 12
    assert lca_binary_tree(sample_tree, 4, 14).val == 8
    assert lca_binary_tree(sample_tree, 10, 22).val == 20


def test_lca_bst_source_example(sample_tree):
    assert lca_bst(sample_tree, 10, 14).val == 12
    assert lca_bst(sample_tree, 4, 14).val == 8
    assert lca_bst(sample_tree, 10, 22).val == 20


def test_lca_node_is_own_ancestor(sample_tree):
    node = lca_binary_tree(sample_tree, 8, 14)
    assert node is sample_tree.left
    assert lca_bst(sample_tree, 8, 14) is sample_tree.left


def test_lca_empty_tree():
    assert lca_binary_tree(None, 1, 2) is None
    assert lca_bst(None, 1, 2) is None