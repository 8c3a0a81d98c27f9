"""
Candidate list validator.

What this module does:
- Validate a word list file (one word per line) before building a feedback table.
- Enforce formatting rules (lowercase, a–z only, exact length N).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordtree.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist("data/solutions.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Tuple

from wordtree.engine.codes import WORD_LENGTH


@dataclass
class WordlistReport:
    """Diagnostics and metadata for one candidate list."""
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line, blank lines are skipped
      - must be lowercase a–z with exact length N

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0
    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if not w:
                continue
            if w.islower() and w.isalpha() and w.isascii() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1
    return valid, invalid


def validate_wordlist(path: str, N: int = WORD_LENGTH) -> Dict:
    """
    Validate a candidate list for word length N.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see WordlistReport) whose `passed`
        flag requires an existing, non-empty file with no invalid lines and
        no duplicates.
    """
    p = Path(path)
    if not p.exists():
        return asdict(WordlistReport(
            N=N, path=path, exists=False, count=0, unique_count=0,
            invalid_lines=0, sha256="", passed=False,
            issues=[f"word list not found: {path}"],
        ))

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        unique_count=unique,
        invalid_lines=invalid,
        sha256=_sha256_file(p),
        passed=not issues,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Compact one-liner for the console.

    Example:
        N=5 | words=2315 (uniq=2315, sha=abc123...) | OK
    """
    status = "OK" if report["passed"] else "FAIL: " + "; ".join(report["issues"])
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} "
        f"(uniq={report['unique_count']}, sha={sha}) | {status}"
    )
