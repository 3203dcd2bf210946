"""Small terminal animations: a loading bar and spaced-out text."""

from __future__ import annotations

import argparse
import itertools
import sys
import time
from collections.abc import Iterator, Sequence
from typing import TextIO

CLEAR = "\033[H\033[2J"
BAR_WIDTH = 49
_LETTERS = "LOADING-"


def loading_frames() -> Iterator[str]:
    """Yield loading bar frames forever; one slot moves along the bar."""
    for tick in itertools.count():
        position = tick % BAR_WIDTH
        letter = _LETTERS[tick % len(_LETTERS)]
        yield "-" * position + letter + "-" * (BAR_WIDTH - position - 1)


def loading_screen(delay: float = 0.25, frames: int | None = None,
                   stream: TextIO | None = None) -> None:
    """Play the loading bar, ``frames`` times or forever when it is None."""
    out = sys.stdout if stream is None else stream
    for frame in itertools.islice(loading_frames(), frames):
        out.write("\v\v\t\t" + frame + "\n")
        out.flush()
        time.sleep(delay)
        out.write(CLEAR)
        out.flush()


def vaporwave(words: Sequence[str]) -> str:
    """Space out the words; the first one is set apart as a title."""
    parts = ["\t\v\v\t"]
    for index, word in enumerate(words):
        gap = " " if index == 0 else "  "
        parts.append("".join(char + gap for char in word) + gap)
        parts.append("\n\n\t\t\t" if index == 0 else "    ")
    return "".join(parts)


def loading_main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="loading")
    parser.add_argument("--frames", type=int, default=None)
    parser.add_argument("--delay", type=float, default=0.25)
    args = parser.parse_args(argv)
    if args.frames is not None and args.frames < 0:
        parser.error("--frames must not be negative")
    try:
        loading_screen(args.delay, args.frames)
    except KeyboardInterrupt:
        pass
    return 0


def vaporwave_main(argv: Sequence[str] | None = None) -> int:
    words = list(sys.argv[1:] if argv is None else argv)
    sys.stdout.write(CLEAR)
    sys.stdout.write(vaporwave(["vaporwave", *words]))
    sys.stdout.flush()
    sys.stdin.readline()
    return 0