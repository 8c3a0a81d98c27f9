"""
Candidate filtering given observed feedback.

Given:
  - a pool of words
  - a history of (guess, pattern) pairs, pattern as typed text ('GBYYB')
    or as a color tuple

Return:
  - words that would have produced exactly the recorded pattern for every
    guess, order preserved.

This is how the CLI narrows the starting candidate set before optimizing.
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple, Union

from .codes import encode, parse_pattern, to_letters
from .scoring import score
from .validation import is_valid_word

History = Iterable[Tuple[str, Union[str, Sequence[int]]]]


def filter_candidates(words: Iterable[str], history: History) -> List[str]:
    """
    Keep only words consistent with ALL (guess, pattern) pairs in `history`.

    Raises ValueError if a guess is not a 5-letter word or a pattern cannot
    be parsed.
    """
    # Normalize once to the "GYB" text form; guesses and patterns may arrive
    # as raw text from the command line
    parsed: List[Tuple[str, str]] = []
    for g, patt in history:
        if not is_valid_word(g):
            raise ValueError(f"guess {g!r} does not have 5 letters a-z")
        colors = parse_pattern(patt) if isinstance(patt, str) else tuple(patt)
        parsed.append((g.strip().lower(), to_letters(encode(colors))))

    out: List[str] = []
    for w in words:
        if all(score(g, w) == letters for g, letters in parsed):
            out.append(w)
    return out
