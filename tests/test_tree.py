# tests/test_tree.py
# BST / red-black WordTree

import io

import pytest

from word_counter.core.protocols import WordDictionary
from word_counter.core.tree import Colour, TreeKind, WordTree


def _words(n):
    return [f"w{i:04d}" for i in range(n)]


def _check_red_black(node):
    """Return the black height of node, asserting the red-black rules hold."""
    if node is None:
        return 1
    if node.colour is Colour.RED:
        for child in (node.left, node.right):
            assert child is None or child.colour is Colour.BLACK
    left = _check_red_black(node.left)
    right = _check_red_black(node.right)
    assert left == right
    return left + (node.colour is Colour.BLACK)


@pytest.fixture(params=list(TreeKind))
def tree(request):
    return WordTree(request.param)


def test_insert_counts_and_search(tree):
    for w in ["pear", "apple", "pear", "fig", "pear"]:
        tree.insert(w)
    assert tree.search("pear") == 3
    assert tree.search("apple") == 1
    assert tree.search("kiwi") == 0
    assert "fig" in tree
    assert len(tree) == 3


def test_inorder_is_sorted(tree):
    words = ["m", "c", "x", "a", "e", "z", "c"]
    tree.insert_many(words)
    assert list(tree.inorder()) == [(1, "a"), (2, "c"), (1, "e"), (1, "m"), (1, "x"), (1, "z")]

    seen = []
    tree.traverse(lambda freq, word: seen.append(word))
    assert seen == sorted(set(words))


def test_preorder_starts_at_root(tree):
    tree.insert_many(["m", "c", "x"])
    order = [w for _, w in tree.preorder()]
    assert order[0] == tree.root.word
    assert sorted(order) == ["c", "m", "x"]


def test_empty_tree(tree):
    assert tree.depth() == 0
    assert list(tree.inorder()) == []
    assert tree.search("a") == 0
    buf = io.StringIO()
    tree.output_dot(buf)
    assert buf.getvalue() == "digraph tree {\nnode [shape = Mrecord, penwidth = 2];\n}\n"


def test_single_node_depth(tree):
    tree.insert("only")
    assert tree.depth() == 0


def test_bst_degenerates_on_sorted_input():
    tree = WordTree(TreeKind.BST)
    # deep enough to break a recursive implementation
    tree.insert_many(_words(3000))
    assert tree.depth() == 2999
    assert tree.search("w2999") == 1


def test_rbt_stays_balanced_on_sorted_input():
    tree = WordTree(TreeKind.RBT)
    tree.insert_many(_words(1023))
    assert tree.root.colour is Colour.BLACK
    _check_red_black(tree.root)
    # red-black height bound: 2 * log2(n + 1)
    assert tree.depth() < 2 * 10
    assert [w for _, w in tree.inorder()] == _words(1023)


def test_rbt_recolours_with_red_uncle():
    tree = WordTree(TreeKind.RBT)
    tree.insert_many(["b", "a", "c"])
    assert tree.root.left.colour is Colour.RED
    assert tree.root.right.colour is Colour.RED

    tree.insert("d")
    root = tree.root
    assert root.word == "b" and root.colour is Colour.BLACK
    assert root.left.colour is Colour.BLACK
    assert root.right.colour is Colour.BLACK
    assert root.right.right.word == "d"
    assert root.right.right.colour is Colour.RED


def test_rbt_rotates_with_black_uncle():
    tree = WordTree(TreeKind.RBT)
    tree.insert_many(["a", "b", "c"])
    assert tree.root.word == "b"
    assert tree.root.left.word == "a"
    assert tree.root.right.word == "c"
    _check_red_black(tree.root)


def test_dot_output_colours():
    tree = WordTree(TreeKind.RBT)
    tree.insert_many(["b", "a", "c", "c"])
    buf = io.StringIO()
    tree.output_dot(buf)
    lines = buf.getvalue().splitlines()

    assert lines[0] == "digraph tree {"
    assert lines[-1] == "}"
    assert '"b"[label="{<f0>b:1|{<f1>|<f2>}}"color=black];' in lines
    assert '"c"[label="{<f0>c:2|{<f1>|<f2>}}"color=red];' in lines
    # left subtree and its edge come before the right subtree
    assert lines.index('"b":f1 -> "a":f0;') < lines.index('"c"[label="{<f0>c:2|{<f1>|<f2>}}"color=red];')
    assert '"b":f2 -> "c":f0;' in lines


def test_bst_dot_is_all_black():
    tree = WordTree(TreeKind.BST)
    tree.insert_many(["b", "a", "c"])
    buf = io.StringIO()
    tree.output_dot(buf)
    assert "color=red" not in buf.getvalue()


def test_tree_satisfies_dictionary_protocol():
    assert isinstance(WordTree(), WordDictionary)
