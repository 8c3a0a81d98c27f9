from .core import optimize, play_case, evaluate_strategy
from .io import write_words_csv, write_codes_csv, write_manifest

__all__ = [
    "optimize", "play_case", "evaluate_strategy",
    "write_words_csv", "write_codes_csv", "write_manifest",
]
