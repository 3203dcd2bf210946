# suffixkit

A suffix tree built with Ukkonen's linear-time algorithm, a search for the
longest prefix of a word that is one piece written twice in a row, and two
small terminal text effects.

## Install

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Suffix trees

```python
from suffixkit.tree import SuffixTree

tree = SuffixTree("mississippi")
"ssi" in tree          # True
tree.find("ssi")       # 1-based starting position of a match
tree.find("xyz")       # None
"xyz" in tree          # False
```

`find` returns the 1-based start of an occurrence, or `None` when the
pattern does not occur (and for the empty pattern). The text must not
contain `$`, which the tree reserves as its end marker; `SuffixTree`
raises `ValueError` if it does.

The tree keeps the text in `tree.text`, and a 1-based copy with the `$`
terminator in `tree.string`. Each `Node` has `parent`, `children` (keyed
by the first character of the child's edge), `edge_start`, `edge_end`,
`path_position`, `suffix_link` and `is_leaf`.

`suffixkit.display` offers:

- `render(tree)` – a text drawing of the tree, one edge per line, indented
  with `|` by depth;
- `path_of(tree, node)` – the full label on the path from the root to a node;
- `self_test(tree)` – `True` when every substring of the text is found.

## Longest repeated prefix

`suffixkit.prefix.longest_repeated_prefix(tree, word, parallel=False)`
takes the suffix tree of `word` and, for every half-length `h` from 1 to
`max_prefix_length(len(word))` (that is, `len(word) // 2`), looks up
`word[:h] * 2` in the tree. It returns the length of the longest such
doubled prefix found at position 1, or 0 when there is none. With
`parallel` set, the candidates are checked in a thread pool.

From the command line, the first line of standard input (including its
newline) is read:

    echo abcabcx | suffixkit-prefix
    echo abcabcx | suffixkit-prefix --parallel

It prints the maximum candidate length and then either
`Longest repeating prefix length = N` or `No repeating prefix found.`.
Empty input, or input containing `$`, is reported on standard error with
exit status 1.

## Terminal effects

    suffixkit-loading
    suffixkit-loading --frames 20 --delay 0.1
    suffixkit-vaporwave hello world

`suffixkit-loading` slides the letters of LOADING, one per frame, along a
row of 49 dashes, clearing the screen between frames; it runs until
interrupted unless `--frames` is given. `suffixkit-vaporwave` clears the
screen, prints `vaporwave` spaced out on one line and its arguments spaced
out on the next, then waits for Enter.

In Python, `suffixkit.animations.loading_frames()` yields the frames,
`loading_screen(delay, frames, stream)` plays them to a stream, and
`vaporwave(words)` returns the spaced-out text.