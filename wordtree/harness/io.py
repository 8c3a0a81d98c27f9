"""
I/O utilities for optimizer runs.

Responsibilities:
- write_words_csv: index -> word table of the (filtered) candidate list.
- write_codes_csv: every feedback code with its rendered pattern.
- write_manifest:  dump a JSON manifest with config, hashes and the result.
- timestamp_id:    stable UTC run ID string.
- git_commit_or_unknown: best-effort short commit hash for reproducibility.

Both CSVs are tab-separated with text fields quoted, so spreadsheet apps keep
patterns and words as text.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from pathlib import Path
from typing import Dict, Sequence

from wordtree.engine.codes import NUM_CODES, render


def _open_out(path: str) -> Path:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    return p


def write_words_csv(words: Sequence[str], path: str) -> str:
    """
    Write one row per candidate: index<TAB>"word".

    Returns the path written.
    """
    p = _open_out(path)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t", quoting=csv.QUOTE_NONNUMERIC)
        for i, word in enumerate(words):
            w.writerow([i, word])
    return str(p)


def write_codes_csv(path: str) -> str:
    """
    Write all 243 feedback codes: code<TAB>"pattern" (emoji squares).

    Returns the path written.
    """
    p = _open_out(path)
    with p.open("w", newline="", encoding="utf-8") as f:
        w = csv.writer(f, delimiter="\t", quoting=csv.QUOTE_NONNUMERIC)
        for code in range(NUM_CODES):
            w.writerow([code, render(code)])
    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    """
    Write a JSON manifest for a run.

    Typical keys:
      - run_id, git_commit
      - config: CLI args (words path, history, max_steps, ...)
      - wordlist: output of datasets.validate_wordlist(...)
      - num_candidates, steps, done, score
    """
    p = _open_out(path)
    with p.open("w", encoding="utf-8") as f:
        json.dump(manifest, f, indent=2, ensure_ascii=False)
    return str(p)


def timestamp_id() -> str:
    """
    Return a compact UTC timestamp suitable for filenames, e.g. 20250820T024121Z.
    """
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """
    Best-effort short git hash of the current repo state.
    Returns 'unknown' if git is not available or the call fails.
    """
    try:
        return (
            subprocess.check_output(
                ["git", "rev-parse", "--short", "HEAD"],
                stderr=subprocess.DEVNULL,
            )
            .decode()
            .strip()
        )
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
