"""
Download a published list of past answers to use as the candidate list.

What it does:
- Downloads the page with historical answers.
- Parses visible text and extracts rows like: YYYY-MM-DD (Day) <num> <ANSWER>
- Captures the final 5-letter UPPERCASE token as the answer.
- Lowercases and de-duplicates while preserving calendar order.
"""

from __future__ import annotations

import re
from typing import Iterable, List

import requests
from bs4 import BeautifulSoup

URL = "https://wordlehints.co.uk/wordle-past-answers/"
ROW_RE = re.compile(r"(\d{4}-\d{2}-\d{2})\s*\([A-Za-z]+\)\s*\d+\s+([A-Z]{5})\b")


def unique_preserve_order(words: Iterable[str]) -> List[str]:
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def parse_answers(html: str) -> List[str]:
    """Extract answers from an archive page, oldest first, without repeats."""
    text = BeautifulSoup(html, "html.parser").get_text("\n", strip=True)
    return unique_preserve_order(m.group(2).lower() for m in ROW_RE.finditer(text))


def fetch_answers(url: str = URL, timeout: float = 30) -> List[str]:
    """Download `url` and parse it; HTTP errors propagate as requests exceptions."""
    r = requests.get(url, timeout=timeout)
    r.raise_for_status()
    return parse_answers(r.text)
