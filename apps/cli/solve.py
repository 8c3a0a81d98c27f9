# apps/cli/solve.py
"""
CLI entry point for computing the optimal guessing strategy.

This script:
  1) Validates the word list (prints counts + SHA, rejects bad lines/duplicates).
  2) Narrows the candidates with any feedback already observed, given as
     GUESS PATTERN pairs (pattern letters: G=green, Y=yellow, B=black).
  3) Optionally dumps the candidates and all feedback codes as CSV.
  4) Refines the strategy tree with a live progress indicator until it is
     provably optimal (or --max-steps is reached), then prints the tree and
     the expected number of guesses.

Example:
    python -m apps.cli.solve --words wordtree/datasets/data/solutions_5.txt raise BYBBG
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import List, Tuple

from tqdm import tqdm

from wordtree.datasets import load_words, pretty_summary, validate_wordlist
from wordtree.engine import FeedbackTable, filter_candidates
from wordtree.harness import optimize, write_codes_csv, write_manifest, write_words_csv
from wordtree.harness.io import git_commit_or_unknown, timestamp_id
from wordtree.solvers import new_game


def _history_pairs(ap: argparse.ArgumentParser, items: List[str]) -> List[Tuple[str, str]]:
    """Group positional args into (guess, pattern) pairs."""
    if len(items) % 2 != 0:
        ap.error("expected an even number of arguments: GUESS PATTERN [GUESS PATTERN ...]")
    return [(items[i].lower(), items[i + 1]) for i in range(0, len(items), 2)]


def main():
    """
    Parse CLI args, validate the word list, run the optimizer with progress, print the result.
    """
    ap = argparse.ArgumentParser(description="wordtree — optimal expected-guesses strategy")
    ap.add_argument("history", nargs="*", metavar="GUESS PATTERN",
                    help="feedback already observed, e.g. 'raise BYBBG'")
    ap.add_argument("--words", default="wordtree/datasets/data/solutions_5.txt",
                    help="path to the candidate list (one word per line); "
                         "create the default one with: python -m script.fetch_words")
    ap.add_argument("--max-steps", type=int,
                    help="stop after this many refine steps (default: run to optimality)")
    ap.add_argument("--top", type=int, default=3,
                    help="number of leading guesses shown in progress output")
    ap.add_argument("--dump-dir", help="write all_words.csv and all_scores.csv here")
    ap.add_argument("--outdir", help="write a JSON run manifest here")
    ap.add_argument(
        "--progress",
        choices=["auto", "bar", "plain", "off"],
        default="auto",
        help="Show refine progress (auto=bar on a terminal, else plain text)."
    )
    args = ap.parse_args()

    history = _history_pairs(ap, args.history)

    # 1) Validate the word list and print a one-liner summary
    rep = validate_wordlist(args.words)
    print(pretty_summary(rep))
    if not rep["exists"]:
        raise SystemExit(f"Word list {args.words} not found; fetch it with: python -m script.fetch_words")
    if not rep["passed"]:
        raise SystemExit("Validation failed — fix the word list before running.")

    # 2) Load and narrow by observed feedback
    words = load_words(args.words)
    try:
        words = filter_candidates(words, history)
    except ValueError as e:
        ap.error(str(e))
    if not words:
        raise SystemExit("No candidate word is consistent with the given feedback.")
    print(f"{len(words)} candidate(s) remaining")

    # 3) Optional informational dumps
    if args.dump_dir:
        print(f"Wrote: {write_words_csv(words, str(Path(args.dump_dir) / 'all_words.csv'))}")
        print(f"Wrote: {write_codes_csv(str(Path(args.dump_dir) / 'all_scores.csv'))}")

    # 4) Precompute feedback and build the root game
    table = FeedbackTable.build(words)
    print("all scores computed")
    game = new_game(table, range(len(words)))

    mode = args.progress
    if mode == "auto":
        mode = "bar" if sys.stderr.isatty() else "plain"

    bar = tqdm(desc="Refining", unit="step", ncols=100) if mode == "bar" else None
    last_print = 0.0

    def on_step(step, g):
        nonlocal last_print
        if bar is not None:
            bar.update(1)
            bar.set_postfix_str(f"{g.get_average_score():.5f} | {g.describe_best(words, args.top)}")
        elif mode == "plain":
            now = time.time()
            if now - last_print >= 1.0 or g.is_optimization_done():
                sys.stderr.write(
                    f"[{step}] score>={g.get_average_score():.6f} | {g.describe_best(words, args.top)}\n"
                )
                sys.stderr.flush()
                last_print = now

    # 5) Refine
    result = optimize(game, words, max_steps=args.max_steps, on_step=on_step, top=args.top)
    if bar is not None:
        bar.close()

    if result["done"]:
        print(result["tree"])
        print(f"average score : {result['score']}")
    else:
        print(f"Stopped after {result['steps']} step(s); optimization not done.")
        print(f"average score >= {result['score']:.6f}")
        print(f"best so far: {result['best']}")

    # 6) Optional manifest
    if args.outdir:
        run_id = timestamp_id()
        manifest = {
            "run_id": run_id,
            "git_commit": git_commit_or_unknown(),
            "config": vars(args),
            "wordlist": rep,
            "num_candidates": len(words),
            "steps": result["steps"],
            "done": result["done"],
            "score": result["score"],
            "time_ms": result["time_ms"],
        }
        path = write_manifest(manifest, str(Path(args.outdir) / f"run_{run_id}_manifest.json"))
        print(f"Wrote: {path}")


if __name__ == "__main__":
    main()
