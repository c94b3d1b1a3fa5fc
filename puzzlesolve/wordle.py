"""Find dictionary words matching a partly known word and required letters."""

from __future__ import annotations

import string
import sys
from collections.abc import Container, Iterator, Sequence

from .dictionary import read_dict_words

BLANK = "-"
DICTIONARY_FILE = "dict-eng.txt"


def _candidates(pattern: str, floating: str, prefix: str) -> Iterator[str]:
    position = len(prefix)
    if position == len(pattern):
        if not floating:
            yield prefix
        return

    fixed = pattern[position]
    if fixed != BLANK:
        yield from _candidates(pattern, floating, prefix + fixed)
        return

    blanks = pattern.count(BLANK, position)
    letters = sorted(set(floating)) if len(floating) == blanks else string.ascii_lowercase
    for letter in letters:
        remaining = floating.replace(letter, "", 1)
        yield from _candidates(pattern, remaining, prefix + letter)


def wordle(pattern: str, floating: str, dictionary: Container[str]) -> set[str]:
    """Return every dictionary word that fits the pattern and uses the floating letters.

    ``pattern`` holds fixed letters and ``-`` for unknown positions;
    every letter of ``floating`` must fill one of the unknown positions.
    """
    return {word for word in _candidates(pattern, floating, "") if word in dictionary}


def main(argv: Sequence[str] | None = None) -> int:
    """Print the words matching the pattern and floating letters given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print(
            'Please provide an initial string (e.g. "s---ng") '
            "and optional string of floating characters."
        )
        return 1
    dictionary = read_dict_words(DICTIONARY_FILE)
    pattern = args[0]
    floating = args[1] if len(args) > 1 else ""
    for word in sorted(wordle(pattern, floating, dictionary)):
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())