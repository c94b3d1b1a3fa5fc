"""Loading of the word list used by the word puzzle solver."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from functools import lru_cache
from pathlib import Path


def _is_ascii_letters(token: str) -> bool:
    return token.isascii() and token.isalpha()


def parse_dict_words(lines: Iterable[str]) -> set[str]:
    """Collect the words from whitespace-separated text lines.

    A token is kept only when it does not start with an upper-case letter
    and consists solely of ASCII letters.
    """
    return {
        token
        for line in lines
        for token in line.split()
        if not token[0].isupper() and _is_ascii_letters(token)
    }


@lru_cache(maxsize=None)
def _load(path: Path) -> frozenset[str]:
    try:
        with path.open(encoding="utf-8", errors="replace") as handle:
            words = frozenset(parse_dict_words(handle))
    except OSError as exc:
        raise OSError("Cannot open dictionary file.") from exc
    print(f"Read {len(words)} words into dictionary.", file=sys.stderr)
    return words


def read_dict_words(filename: str | Path) -> frozenset[str]:
    """Read a dictionary file once and return its words.

    Later calls for the same file return the words already read.
    Raises OSError when the file cannot be opened.
    """
    return _load(Path(filename).resolve())