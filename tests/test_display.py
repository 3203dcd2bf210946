import pytest

from suffixkit.display import path_of, render, self_test
from suffixkit.tree import SuffixTree


def _nodes(tree):
    stack = list(tree.root.children.values())
    while stack:
        node = stack.pop()
        yield node
        stack.extend(node.children.values())


def test_render_small_tree():
    assert render(SuffixTree("ab")) == "\nroot\n+ab$\n+b$\n+$\n"


def test_render_empty_text():
    assert render(SuffixTree("")) == "\nroot\n+$\n"


@pytest.mark.parametrize("text", ["banana", "mississippi", "aaaa", "abcabx"])
def test_render_has_one_line_per_node(text):
    tree = SuffixTree(text)
    lines = render(tree).split("\n")
    assert lines[:2] == ["", "root"]
    assert lines[-1] == ""
    body = lines[2:-1]
    assert len(body) == sum(1 for _ in _nodes(tree))
    assert all("+" in line for line in body)


def test_path_of_root_is_empty():
    tree = SuffixTree("banana")
    assert path_of(tree, tree.root) == ""


@pytest.mark.parametrize("text", ["", "a", "banana", "mississippi", "abababab"])
def test_self_test_passes(text):
    assert self_test(SuffixTree(text)) is True


def test_self_test_fails_on_damaged_tree():
    tree = SuffixTree("banana")
    tree.root.children.clear()
    assert self_test(tree) is False