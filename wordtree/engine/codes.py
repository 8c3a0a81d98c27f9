"""
Feedback codes.

A feedback pattern is five colors, one per position:
  - BLACK  (0) : letter not in the solution (or already consumed)
  - YELLOW (1) : letter present at another, unmatched position
  - GREEN  (2) : exact positional match

Patterns are packed into a single integer in [0, 243) as base-3 digits,
position 0 being the least significant digit:

    code = c0 * 1 + c1 * 3 + c2 * 9 + c3 * 27 + c4 * 81

so the all-green pattern (a win) is code 242.
"""

from __future__ import annotations

from typing import Iterable, Tuple

WORD_LENGTH = 5

BLACK, YELLOW, GREEN = 0, 1, 2

NUM_CODES = 3 ** WORD_LENGTH          # 243
WIN_CODE = NUM_CODES - 1              # 242, all green
NON_WINNING_CODES = NUM_CODES - 1     # buckets available after a wrong guess

# Text and display forms, indexed by color value
LETTERS = "BYG"
SYMBOLS = ("⬛", "🟨", "🟩")

_PARSE = {"b": BLACK, "-": BLACK, "y": YELLOW, "g": GREEN}

Pattern = Tuple[int, ...]


def encode(colors: Iterable[int]) -> int:
    """Pack five colors into a feedback code."""
    colors = tuple(colors)
    if len(colors) != WORD_LENGTH:
        raise ValueError(f"pattern must have {WORD_LENGTH} colors, got {len(colors)}")
    code = 0
    for i, c in enumerate(colors):
        if c not in (BLACK, YELLOW, GREEN):
            raise ValueError(f"invalid color {c!r} at position {i}")
        code += c * 3 ** i
    return code


def decode(code: int) -> Pattern:
    """Unpack a feedback code into its five colors."""
    if not 0 <= code < NUM_CODES:
        raise ValueError(f"feedback code out of range: {code}")
    out = []
    for _ in range(WORD_LENGTH):
        out.append(code % 3)
        code //= 3
    return tuple(out)


def render(code: int) -> str:
    """Emoji rendering, e.g. 242 -> five green squares."""
    return "".join(SYMBOLS[c] for c in decode(code))


def to_letters(code: int) -> str:
    """Text rendering, e.g. 38 -> 'GBYYB'."""
    return "".join(LETTERS[c] for c in decode(code))


def parse_pattern(text: str) -> Pattern:
    """
    Parse a typed pattern such as 'GBYYB' (case-insensitive, '-' = black).

    Raises ValueError on wrong length or unknown characters.
    """
    t = text.strip().lower()
    if len(t) != WORD_LENGTH:
        raise ValueError(f"pattern {text!r} must have {WORD_LENGTH} characters")
    try:
        return tuple(_PARSE[ch] for ch in t)
    except KeyError as e:
        raise ValueError(f"pattern {text!r} should contain only B, G or Y") from e
