from .codes import WIN_CODE, NUM_CODES, encode, decode, render, parse_pattern
from .scoring import feedback, score
from .table import FeedbackTable
from .constraints import filter_candidates
from .validation import check_words, is_valid_word

__all__ = [
    "WIN_CODE", "NUM_CODES", "encode", "decode", "render", "parse_pattern",
    "feedback", "score", "FeedbackTable", "filter_candidates",
    "check_words", "is_valid_word",
]
