"""Text rendering and self-checking of a built suffix tree."""

from __future__ import annotations

from .tree import Node, SuffixTree


def _edge_label(tree: SuffixTree, node: Node) -> str:
    return tree.string[node.edge_start:node.edge_end + 1]


def render(tree: SuffixTree) -> str:
    """Draw the tree, one edge per line, indented with ``|`` by depth."""
    lines = ["", "root"]
    stack = [(child, 1) for child in reversed(list(tree.root.children.values()))]
    while stack:
        node, depth = stack.pop()
        lines.append("|" * (depth - 1) + "+" + _edge_label(tree, node))
        stack.extend(
            (child, depth + 1) for child in reversed(list(node.children.values()))
        )
    return "\n".join(lines) + "\n"


def path_of(tree: SuffixTree, node: Node | None) -> str:
    """Return the full label on the path from the root down to ``node``."""
    labels = []
    while node is not None and node is not tree.root:
        labels.append(_edge_label(tree, node))
        node = node.parent
    return "".join(reversed(labels))


def self_test(tree: SuffixTree) -> bool:
    """Check that every substring of the tree's text can be found in it."""
    text = tree.text
    return all(
        tree.find(text[start:end + 1]) is not None
        for end in range(len(text))
        for start in range(end + 1)
    )