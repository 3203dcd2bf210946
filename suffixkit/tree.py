"""Suffix tree built with Ukkonen's linear-time algorithm.

The source text is stored 1-based in ``SuffixTree.string``: index 0 holds a
sentinel, the text occupies indices ``1..len(text)`` and a unique ``$``
terminator follows it at index ``SuffixTree.length``. Edge labels are index
ranges into that string, inclusive on both ends.
"""

from __future__ import annotations

from dataclasses import dataclass, field

TERMINATOR = "$"
_SENTINEL = "\0"


@dataclass(eq=False)
class Node:
    """A tree node together with the edge that leads into it."""

    parent: Node | None = field(repr=False)
    edge_start: int
    edge_end: int
    path_position: int
    children: dict[str, Node] = field(default_factory=dict, repr=False)
    suffix_link: Node | None = field(default=None, repr=False)

    @property
    def is_leaf(self) -> bool:
        return not self.children


class SuffixTree:
    """Suffix tree over a string that must not contain ``$``."""

    def __init__(self, text: str) -> None:
        if TERMINATOR in text:
            raise ValueError(f"text must not contain {TERMINATOR!r}")
        self.text = text
        self.length = len(text) + 1
        self.string = _SENTINEL + text + TERMINATOR
        # Virtual end shared by all leaves while the tree is being built.
        self._e = self.length
        self.root = Node(None, 0, 0, 0)
        first = Node(self.root, 1, self.length, 1)
        self.root.children[self.string[1]] = first

        self._pos_node = self.root
        self._edge_pos = 0
        self._suffixless: Node | None = None
        self._extension = 2
        self._repeated_extension = False

        for phase in range(2, self.length):
            self._single_phase(phase)

        self._finalize_leaves()

    # ------------------------------------------------------------------ search

    def find(self, pattern: str) -> int | None:
        """Return the 1-based start of an occurrence of ``pattern``, or None."""
        if not pattern:
            return None
        matched = 0
        node = self.root.children.get(pattern[0])
        while node is not None:
            segment = self.string[node.edge_start:self._label_end(node) + 1]
            rest = pattern[matched:]
            if rest.startswith(segment):
                matched += len(segment)
                if matched == len(pattern):
                    return node.path_position
                node = node.children.get(pattern[matched])
            elif segment.startswith(rest):
                return node.path_position
            else:
                return None
        return None

    def __contains__(self, pattern: object) -> bool:
        return isinstance(pattern, str) and self.find(pattern) is not None

    # ---------------------------------------------------------------- helpers

    def _label_end(self, node: Node) -> int:
        return self._e if node.is_leaf else node.edge_end

    def _label_length(self, node: Node) -> int:
        return self._label_end(node) - node.edge_start + 1

    def _is_last_char(self, node: Node, edge_pos: int) -> bool:
        return edge_pos == self._label_length(node) - 1

    def _finalize_leaves(self) -> None:
        stack = [self.root]
        while stack:
            node = stack.pop()
            if node.is_leaf and node is not self.root:
                node.edge_end = self._e
            stack.extend(node.children.values())

    # ------------------------------------------------------------ construction

    def _add_son(self, node: Node, begin: int, end: int, path_pos: int) -> Node:
        leaf = Node(node, begin, end, path_pos)
        node.children[self.string[begin]] = leaf
        return leaf

    def _split(self, node: Node, begin: int, end: int, path_pos: int,
               edge_pos: int) -> Node:
        parent = node.parent
        internal = Node(parent, node.edge_start, node.edge_start + edge_pos,
                        node.path_position)
        node.edge_start += edge_pos + 1
        leaf = Node(internal, begin, end, path_pos)
        # Same first character, so the internal node takes the old slot.
        parent.children[self.string[internal.edge_start]] = internal
        internal.children[self.string[node.edge_start]] = node
        internal.children[self.string[leaf.edge_start]] = leaf
        node.parent = internal
        return internal

    def _trace_single_edge(self, node: Node, begin: int, end: int,
                           skip: bool) -> tuple[Node, int, int, bool]:
        """Trace along one outgoing edge: (node, edge_pos, found, done)."""
        child = node.children.get(self.string[begin])
        if child is None:
            return node, self._label_length(node) - 1, 0, True

        length = self._label_length(child)
        str_len = end - begin + 1

        if skip:
            if length <= str_len:
                return child, length - 1, length, length >= str_len
            return child, str_len - 1, str_len, True

        length = min(length, str_len)
        edge_pos = 1
        found = 1
        while edge_pos < length:
            if (self.string[child.edge_start + edge_pos]
                    != self.string[begin + edge_pos]):
                return child, edge_pos - 1, found, True
            found += 1
            edge_pos += 1
        return child, edge_pos - 1, found, found >= str_len

    def _trace_string(self, node: Node, begin: int, end: int,
                      skip: bool) -> tuple[Node, int, int]:
        """Trace a range down from ``node``: (node, edge_pos, found)."""
        total = 0
        edge_pos = 0
        done = False
        while not done:
            node, edge_pos, found, done = self._trace_single_edge(
                node, begin, end, skip)
            begin += found
            total += found
        return node, edge_pos, total

    def _follow_suffix_link(self) -> None:
        node = self._pos_node
        if node is self.root:
            return
        if (node.suffix_link is None
                or not self._is_last_char(node, self._edge_pos)):
            if node.parent is self.root:
                self._pos_node = self.root
                return
            gamma_begin = node.edge_start
            gamma_end = node.edge_start + self._edge_pos
            self._pos_node, self._edge_pos, _ = self._trace_string(
                node.parent.suffix_link, gamma_begin, gamma_end, skip=True)
        else:
            self._pos_node = node.suffix_link
            self._edge_pos = self._label_length(self._pos_node) - 1

    def _single_extension(self, begin: int, end: int,
                          after_rule_3: bool) -> int:
        """Ensure ``string[begin..end]`` is in the tree; return the rule used."""
        path_pos = begin
        found = 0

        if not after_rule_3:
            self._follow_suffix_link()

        if self._pos_node is self.root:
            self._pos_node, self._edge_pos, found = self._trace_string(
                self.root, begin, end, skip=False)
        else:
            begin = end
            node = self._pos_node
            if self._is_last_char(node, self._edge_pos):
                child = node.children.get(self.string[end])
                if child is not None:
                    self._pos_node = child
                    self._edge_pos = 0
                    found = 1
            elif (self.string[node.edge_start + self._edge_pos + 1]
                  == self.string[end]):
                self._edge_pos += 1
                found = 1

        if found == end - begin + 1:
            if self._suffixless is not None:
                self._suffixless.suffix_link = self._pos_node.parent
                self._suffixless = None
            return 3

        node = self._pos_node
        if self._is_last_char(node, self._edge_pos) or node is self.root:
            if node.children:
                self._add_son(node, begin + found, end, path_pos)
                if self._suffixless is not None:
                    self._suffixless.suffix_link = node
                    self._suffixless = None
                return 2
            return 1

        internal = self._split(node, begin + found, end, path_pos,
                               self._edge_pos)
        if self._suffixless is not None:
            self._suffixless.suffix_link = internal
        if (self._label_length(internal) == 1
                and internal.parent is self.root):
            internal.suffix_link = self.root
            self._suffixless = None
        else:
            self._suffixless = internal
        self._pos_node = internal
        return 2

    def _single_phase(self, phase: int) -> None:
        self._e = phase + 1
        while self._extension <= phase + 1:
            rule = self._single_extension(self._extension, phase + 1,
                                          self._repeated_extension)
            if rule == 3:
                self._repeated_extension = True
                break
            self._repeated_extension = False
            self._extension += 1