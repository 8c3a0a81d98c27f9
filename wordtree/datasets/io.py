"""Word list files: one word per line, UTF-8."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


def load_words(p: Path | str) -> List[str]:
    """
    Read a newline-separated word list, lowercased, blanks dropped, order kept.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    lines = p.read_text(encoding="utf-8").splitlines()
    return [w.strip().lower() for w in lines if w.strip()]


def save_words(words: Iterable[str], p: Path | str) -> str:
    """
    Write one word per line with a trailing newline, creating parent dirs.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    words = list(words)
    p.write_text("".join(w + "\n" for w in words), encoding="utf-8")
    return str(p)
