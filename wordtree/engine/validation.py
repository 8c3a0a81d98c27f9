"""
Candidate word validation.

A candidate list is acceptable iff every entry:
  - is a string
  - is alphabetic a–z only
  - has exactly WORD_LENGTH letters
and no word appears twice (a duplicate would make guessing it ambiguous:
the copy would answer all-green without being the solution).

`check_words` is the fatal, construction-time gate used before any feedback
table is allocated; `is_valid_word` is the soft per-word check.
"""

from __future__ import annotations

from typing import Iterable, List, Set

from .codes import WORD_LENGTH


def is_valid_word(word: object, N: int = WORD_LENGTH) -> bool:
    """Return True if `word` is a lowercase-able N-letter alphabetic string."""
    if not isinstance(word, str):
        return False
    w = word.strip().lower()
    return len(w) == N and w.isalpha() and w.isascii()


def check_words(words: Iterable[str], N: int = WORD_LENGTH) -> List[str]:
    """
    Normalize and validate a candidate list.

    Returns:
      the words, stripped and lowercased, in input order.

    Raises:
      ValueError on the first malformed word, on duplicates, or on an empty list.
    """
    out: List[str] = []
    seen: Set[str] = set()
    for i, w in enumerate(words):
        if not is_valid_word(w, N):
            raise ValueError(f"word #{i} {w!r} does not have {N} letters a-z")
        w = w.strip().lower()
        if w in seen:
            raise ValueError(f"duplicate word {w!r} in candidate list")
        seen.add(w)
        out.append(w)
    if not out:
        raise ValueError("candidate list is empty")
    return out
