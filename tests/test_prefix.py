import io

import pytest

from suffixkit.prefix import longest_repeated_prefix, main, max_prefix_length
from suffixkit.tree import SuffixTree

WORDS = ["abab", "abcabc", "aaaa", "abcd", "abaaba\n", "xyzxyzq", "a",
         "mississippi", "aabaab", "abcabcabcabc\n"]


def _longest(word, parallel=False):
    return longest_repeated_prefix(SuffixTree(word), word, parallel)


@pytest.mark.parametrize("length, expected", [(10, 5), (11, 5), (0, 0), (1, 0)])
def test_max_prefix_length(length, expected):
    assert max_prefix_length(length) == expected


def test_max_prefix_length_negative():
    with pytest.raises(ValueError):
        max_prefix_length(-1)


def test_whole_word_is_square():
    assert _longest("abab") == len("abab")
    assert _longest("abcabc") == len("abcabc")


def test_no_square_prefix():
    assert _longest("abcd") == 0
    assert _longest("a") == 0


@pytest.mark.parametrize("word", WORDS)
def test_result_is_a_square_prefix(word):
    length = _longest(word)
    assert length % 2 == 0
    half = length // 2
    assert word[:half] * 2 == word[:length]


@pytest.mark.parametrize("word", WORDS)
def test_result_is_longest(word):
    length = _longest(word)
    for half in range(length // 2 + 1, len(word) // 2 + 1):
        assert word[:half] * 2 != word[:2 * half]


@pytest.mark.parametrize("word", WORDS)
def test_parallel_matches_sequential(word):
    assert _longest(word, parallel=True) == _longest(word, parallel=False)


def test_main_reports_length(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abab\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Building suffix tree..." in out
    assert "Maximum prefix length = 2" in out
    assert "Longest repeating prefix length = 4" in out


def test_main_without_repeat(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abcd\n"))
    assert main(["--parallel"]) == 0
    assert "No repeating prefix found." in capsys.readouterr().out


def test_main_empty_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Input error." in capsys.readouterr().err


def test_main_rejects_terminator(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab$ab\n"))
    assert main([]) == 1
    assert "suffix tree" in capsys.readouterr().err