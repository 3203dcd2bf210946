"""Find the longest prefix of a word that is a square (``ww``)."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .tree import SuffixTree


def max_prefix_length(word_length: int) -> int:
    """Return the largest half-length a repeated prefix can have."""
    if word_length < 0:
        raise ValueError("word length must not be negative")
    return word_length // 2


def _doubled_prefix_length(tree: SuffixTree, word: str, half: int) -> int:
    doubled = word[:half] * 2
    return len(doubled) if tree.find(doubled) == 1 else 0


def longest_repeated_prefix(tree: SuffixTree, word: str,
                            parallel: bool = False) -> int:
    """Return the length of the longest prefix ``ww`` of ``word``, or 0.

    ``tree`` must be the suffix tree of ``word``. Each candidate half-length
    is checked by looking up the doubled prefix and requiring that it starts
    at the first position of the text.
    """
    halves = range(1, max_prefix_length(len(word)) + 1)
    if parallel and len(halves) > 0:
        with ThreadPoolExecutor() as pool:
            found = pool.map(
                lambda half: _doubled_prefix_length(tree, word, half), halves)
            return max(found, default=0)
    return max(
        (_doubled_prefix_length(tree, word, half) for half in halves),
        default=0,
    )


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="repeating-prefix",
        description="Read a word from standard input and report the length "
                    "of its longest prefix made of one piece written twice.",
    )
    parser.add_argument("--parallel", action="store_true",
                        help="check candidate lengths in worker threads")
    args = parser.parse_args(argv)

    word = sys.stdin.readline()
    if not word:
        print("Input error.", file=sys.stderr)
        return 1

    print("Building suffix tree...")
    try:
        tree = SuffixTree(word)
    except ValueError as error:
        print(f"Error occured during building the suffix tree: {error}",
              file=sys.stderr)
        return 1
    print("Building suffix tree finished...")

    print(f"Maximum prefix length = {max_prefix_length(len(word))}")
    print("Searching...")
    length = longest_repeated_prefix(tree, word, args.parallel)
    if length > 0:
        print(f"\nLongest repeating prefix length = {length}")
    else:
        print("\nNo repeating prefix found.")
    return 0